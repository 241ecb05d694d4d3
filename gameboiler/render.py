"""Renderer interface, colours and the game's renderer handle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} outside 0..255")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


RAYWHITE = Color(245, 245, 245, 255)
WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
RED = Color(255, 0, 0, 255)


def _component(value: float) -> int:
    return min(255, max(0, int(value * 255)))


def color_from_floats(r: float, g: float, b: float, a: float) -> Color:
    """Convert components in 0..1 to a colour, truncating and clamping."""
    return Color(_component(r), _component(g), _component(b), _component(a))


class RenderAPI(Protocol):
    """Operations a graphics backend provides to the game."""

    def init_window(self, width: int, height: int, title: str) -> None: ...

    def shutdown(self) -> None: ...

    def begin_frame(self) -> None: ...

    def end_frame(self) -> None: ...

    def draw_rectangle(
        self, x: int, y: int, width: int, height: int, color: Color
    ) -> None: ...

    def draw_rectangle_lines(
        self, x: int, y: int, width: int, height: int, color: Color
    ) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None: ...

    def draw_circle(
        self, center_x: int, center_y: int, radius: float, color: Color
    ) -> None: ...

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None: ...

    def clear(self, r: float, g: float, b: float, a: float) -> None: ...

    def window_should_close(self) -> bool: ...

    def get_fps(self) -> int: ...


@dataclass
class GameRender:
    """The game's renderer: a backend plus optional backend-specific data."""

    api: RenderAPI
    impl: Any = None