"""Renderer backend drawing with pygame."""

from __future__ import annotations

from typing import Callable, Protocol

import pygame

from .render import RAYWHITE, Color, color_from_floats

DEFAULT_TARGET_FPS = 60


class _EventSink(Protocol):
    def update(self) -> None: ...

    def process_event(self, event: pygame.event.Event) -> None: ...


class PygameRenderer:
    """Window and drawing backend built on pygame.

    Events are polled in :meth:`window_should_close`; an optional input sink
    is reset and then fed every polled event, once per frame.
    """

    def __init__(
        self,
        input_sink: _EventSink | None = None,
        *,
        exit_key: int | None = pygame.K_ESCAPE,
        target_fps: int = DEFAULT_TARGET_FPS,
    ) -> None:
        self.input_sink = input_sink
        self.exit_key = exit_key
        self.target_fps = target_fps
        self._surface: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        self._close_requested = False

    @property
    def surface(self) -> pygame.Surface | None:
        """The window surface, or ``None`` before :meth:`init_window`."""
        return self._surface

    def _require(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("window is not open; call init_window first")
        return self._surface

    def init_window(self, width: int, height: int, title: str) -> None:
        """Open a window of the given size and title."""
        pygame.display.init()
        pygame.font.init()
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._close_requested = False

    def shutdown(self) -> None:
        """Close the window and release pygame resources."""
        self._fonts.clear()
        self._surface = None
        self._clock = None
        pygame.font.quit()
        pygame.display.quit()

    def begin_frame(self) -> None:
        """Start a frame by clearing to the background colour."""
        self._require().fill(RAYWHITE.rgb)

    def end_frame(self) -> None:
        """Present the frame and wait to hold the target frame rate."""
        self._require()
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(self.target_fps)

    def _draw(
        self, painter: Callable[[pygame.Surface, tuple[int, ...]], None], color: Color
    ) -> None:
        screen = self._require()
        if color.a >= 255:
            painter(screen, color.rgb)
            return
        layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        painter(layer, color.rgba)
        screen.blit(layer, (0, 0))

    def draw_rectangle(
        self, x: int, y: int, width: int, height: int, color: Color
    ) -> None:
        """Draw a filled rectangle."""
        rect = pygame.Rect(x, y, width, height)
        self._draw(lambda target, rgba: pygame.draw.rect(target, rgba, rect), color)

    def draw_rectangle_lines(
        self, x: int, y: int, width: int, height: int, color: Color
    ) -> None:
        """Draw a one-pixel rectangle outline."""
        rect = pygame.Rect(x, y, width, height)
        self._draw(
            lambda target, rgba: pygame.draw.rect(target, rgba, rect, width=1), color
        )

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Draw a line between two points."""
        self._draw(
            lambda target, rgba: pygame.draw.line(target, rgba, (x1, y1), (x2, y2)),
            color,
        )

    def draw_circle(
        self, center_x: int, center_y: int, radius: float, color: Color
    ) -> None:
        """Draw a filled circle."""
        self._draw(
            lambda target, rgba: pygame.draw.circle(
                target, rgba, (center_x, center_y), radius
            ),
            color,
        )

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        """Draw ``text`` with its top-left corner at ``(x, y)``."""
        screen = self._require()
        rendered = self._font(size).render(text, True, color.rgb)
        if color.a < 255:
            rendered.set_alpha(color.a)
        screen.blit(rendered, (x, y))

    def clear(self, r: float, g: float, b: float, a: float) -> None:
        """Fill the window with a colour given as components in 0..1."""
        self._require().fill(color_from_floats(r, g, b, a).rgba)

    def window_should_close(self) -> bool:
        """Poll events; true once the window was closed or the exit key hit."""
        self._require()
        if self.input_sink is not None:
            self.input_sink.update()
        for event in pygame.event.get():
            if self.input_sink is not None:
                self.input_sink.process_event(event)
            if event.type == pygame.QUIT:
                self._close_requested = True
            elif (
                event.type == pygame.KEYDOWN
                and self.exit_key is not None
                and event.key == self.exit_key
            ):
                self._close_requested = True
        return self._close_requested

    def get_fps(self) -> int:
        """Current frames per second, averaged by the frame clock."""
        if self._clock is None:
            return 0
        return int(round(self._clock.get_fps()))