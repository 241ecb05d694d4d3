"""Window parameters and state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Window:
    """Size, title and display flags of a game window."""

    width: int = 0
    height: int = 0
    title: str | None = None
    target_fps: int = 0
    fullscreen: bool = False
    resizable: bool = False
    borderless: bool = False
    vsync: bool = False

    def set_size(self, width: int, height: int) -> None:
        """Change the window size."""
        self.width = width
        self.height = height

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen."""
        self.fullscreen = not self.fullscreen