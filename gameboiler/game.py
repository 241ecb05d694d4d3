"""The game object: setup, main loop, ticking and teardown."""

from __future__ import annotations

from typing import Any

from .input import InputSystem, PlatformInput, default_input_bindings
from .log import (
    CategoryLogger,
    LogMask,
    get_global_logger,
    set_global_logger,
)
from .panic import panic
from .render import RED, WHITE, Color, GameRender, RenderAPI
from .settings import Settings, default_settings
from .states import GameState, get_game_state_table, update_game_state
from .timer import time_delta, time_now

GAME_NAME = "gameboiler"
GAME_VERSION = "0.1.0"

GAME_TICK_RATE = 60.0
GAME_TICK_DURATION = 1.0 / GAME_TICK_RATE

LOG_MASK = LogMask.ALL

_log = CategoryLogger("Game")

_OVERLAY_BACKGROUND = Color(0, 0, 0, 128)


class Game:
    """Holds game state, settings, renderer, input and logger."""

    def __init__(
        self,
        render_api: RenderAPI | None = None,
        platform_input: PlatformInput | None = None,
        logger: Any = None,
    ) -> None:
        self.current_state = GameState.INVALID
        self.previous_state = GameState.INVALID
        self.settings: Settings = default_settings()
        self.renderer: GameRender | None = (
            GameRender(render_api, None) if render_api is not None else None
        )
        self.input: InputSystem | None = InputSystem(
            bindings=default_input_bindings(), platform=platform_input
        )
        self.logger = logger
        if logger is not None:
            init = getattr(logger, "init", None)
            if callable(init):
                init(None, LOG_MASK, True)
            set_global_logger(logger)
        _log.info("Logger initialized")
        self.is_running = True
        self.debug_overlay_enabled = False
        self.delta_time = 0.0
        self.last_delta_time = 0.0
        _log.debug("Game initialized v%s", GAME_VERSION)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    def _render_api(self) -> RenderAPI:
        if self.renderer is None or self.renderer.api is None:
            panic("Game has no renderer")
        assert self.renderer is not None
        return self.renderer.api

    def init(self) -> None:
        """Open the game window at the configured size."""
        if self.renderer is not None and self.renderer.api is not None:
            self.renderer.api.init_window(
                self.settings.window_width, self.settings.window_height, GAME_NAME
            )
        _log.info("Game initialized.")

    def shutdown(self) -> None:
        """Stop the main loop and enter the shutdown state."""
        self.is_running = False
        update_game_state(self, GameState.SHUTDOWN)
        _log.info("Game shutting down...")

    def start(self) -> None:
        """Run the main loop until the game stops or the window closes."""
        api = self._render_api()
        _log.info("Game loop started...")
        update_game_state(self, GameState.BOOT)
        self.is_running = True
        self.last_delta_time = time_now()
        while self.is_running:
            if api.window_should_close():
                self.shutdown()
                break
            api.begin_frame()
            self.tick()
            if self.debug_overlay_enabled:
                debug_overlay_render(self)
            api.end_frame()
        _log.info("Game loop ended.")

    def tick(self) -> None:
        """Advance the clock and run the current state's update handler."""
        now = time_now()
        self.delta_time = time_delta(self.last_delta_time, now)
        self.last_delta_time = now
        handlers = get_game_state_table().get(self.current_state)
        if handlers is not None and handlers.update is not None:
            handlers.update(self)

    def destroy(self) -> None:
        """Shut down the renderer and logger and release the input system."""
        if self.renderer is not None:
            self.renderer.api.shutdown()
            self.renderer = None
        if self.logger is not None:
            shutdown = getattr(self.logger, "shutdown", None)
            if callable(shutdown):
                shutdown()
            if get_global_logger() is self.logger:
                set_global_logger(None)
            self.logger = None
        self.input = None


def debug_overlay_render(game: Game) -> None:
    """Draw the debug panel with frame rate and frame time."""
    api = game._render_api()
    api.draw_rectangle(5, 5, 200, 200, _OVERLAY_BACKGROUND)
    api.draw_rectangle_lines(5, 5, 200, 200, WHITE)
    api.draw_text("Debug Overlay", 10, 10, 20, RED)
    api.draw_text(f"FPS: {api.get_fps()}", 10, 40, 16, WHITE)
    api.draw_text(f"Delta Time: {game.delta_time * 1000.0:.3f} ms", 10, 60, 16, WHITE)