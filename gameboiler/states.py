"""Game states, their handlers and the transitions between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from .input import InputKey
from .log import CategoryLogger
from .panic import panic

if TYPE_CHECKING:
    from .game import Game

_log = CategoryLogger()

StateHandler = Callable[[Any], object]


class GameState(enum.IntEnum):
    """The states the game moves through."""

    INVALID = -1
    BOOT = 0
    MENU = 1
    SETTINGS = 2
    PLAYING = 3
    PAUSED = 4
    SHUTDOWN = 5


@dataclass(frozen=True)
class StateHandlers:
    """Callbacks run on entering, updating and leaving a state."""

    enter: Optional[StateHandler] = None
    update: Optional[StateHandler] = None
    exit: Optional[StateHandler] = None


@dataclass(frozen=True)
class ActionDispatch:
    """An input action together with the handler run when it is pressed."""

    action: InputKey
    handler: StateHandler


def _announce(verb: str, name: str) -> str:
    """Log that a state is being entered or left and return the message."""
    message = f"{verb} {name} State"
    _log.info("%s", message)
    return message


def boot_enter(game: Game) -> str:
    return _announce("Entering", "Boot")


def boot_update(game: Game) -> None:
    _log.info("Updating Boot State, delta time: %f", game.delta_time)
    update_game_state(game, GameState.MENU)


def boot_exit(game: Game) -> str:
    return _announce("Exiting", "Boot")


def menu_enter(game: Game) -> str:
    return _announce("Entering", "Menu")


def menu_update(game: Game) -> None:
    _log.info("Updating Menu State, delta time: %f", game.delta_time)
    update_game_state(game, GameState.PLAYING)


def menu_exit(game: Game) -> str:
    return _announce("Exiting", "Menu")


def settings_enter(game: Game) -> str:
    return _announce("Entering", "Settings")


def settings_update(game: Game) -> None:
    _log.info("Updating Settings State, delta time: %f", game.delta_time)
    update_game_state(game, GameState.SHUTDOWN)


def settings_exit(game: Game) -> str:
    return _announce("Exiting", "Settings")


def in_game_enter(game: Game) -> str:
    return _announce("Entering", "In-Game")


def in_game_update(game: Game) -> None:
    if game.input is not None:
        handle_game_dispatch(game)


def in_game_exit(game: Game) -> str:
    return _announce("Exiting", "In-Game")


def paused_enter(game: Game) -> str:
    return _announce("Entering", "Paused")


def paused_update(game: Game) -> None:
    _log.info("Updating Paused State, delta time: %f", game.delta_time)
    update_game_state(game, GameState.SETTINGS)


def paused_exit(game: Game) -> str:
    return _announce("Exiting", "Paused")


def shutdown_enter(game: Game) -> str:
    return _announce("Entering", "Shutdown")


def shutdown_update(game: Game) -> None:
    _log.info("Updating Shutdown State, delta time: %f", game.delta_time)
    game.is_running = False


def shutdown_exit(game: Game) -> str:
    return _announce("Exiting", "Shutdown")


def handle_pause(game: Game) -> None:
    """Enter the paused state if the pause action was pressed."""
    if game.input.action_pressed(InputKey.PAUSE):
        update_game_state(game, GameState.PAUSED)


def handle_debug_toggle(game: Game) -> None:
    """Flip the debug overlay if the debug action was pressed."""
    if game.input.action_pressed(InputKey.DEBUG_TOGGLE):
        game.debug_overlay_enabled = not game.debug_overlay_enabled
        _log.info(
            "Debug overlay toggled: %s", "ON" if game.debug_overlay_enabled else "OFF"
        )


IN_GAME_ACTIONS: tuple[ActionDispatch, ...] = (
    ActionDispatch(InputKey.PAUSE, handle_pause),
    ActionDispatch(InputKey.DEBUG_TOGGLE, handle_debug_toggle),
)


def handle_game_dispatch(game: Game) -> None:
    """Run the handler of every in-game action pressed this frame."""
    if game.input is None:
        return
    for dispatch in IN_GAME_ACTIONS:
        if game.input.action_pressed(dispatch.action):
            dispatch.handler(game)


_TABLE: Mapping[GameState, StateHandlers] = MappingProxyType(
    {
        GameState.BOOT: StateHandlers(boot_enter, boot_update, boot_exit),
        GameState.MENU: StateHandlers(menu_enter, menu_update, menu_exit),
        GameState.SETTINGS: StateHandlers(
            settings_enter, settings_update, settings_exit
        ),
        GameState.PLAYING: StateHandlers(in_game_enter, in_game_update, in_game_exit),
        GameState.PAUSED: StateHandlers(paused_enter, paused_update, paused_exit),
        GameState.SHUTDOWN: StateHandlers(
            shutdown_enter, shutdown_update, shutdown_exit
        ),
    }
)

_KNOWN_STATES = frozenset(GameState)


def get_game_state_table() -> Mapping[GameState, StateHandlers]:
    """Return the read-only table of handlers for every valid state."""
    return _TABLE


def get_game_state(game: Game | None) -> GameState:
    """Return the current state of ``game``."""
    if game is None:
        panic("get_game_state: game is None")
    return game.current_state


def update_game_state(game: Game | None, new_state: int) -> None:
    """Leave the current state and enter ``new_state``."""
    if game is None:
        panic("update_game_state: game is None")
    if game.current_state not in _KNOWN_STATES or new_state not in _TABLE:
        panic("Invalid game state transition")
    target = GameState(new_state)

    game.previous_state = game.current_state
    if game.current_state != GameState.INVALID:
        leaving = _TABLE[game.previous_state]
        if leaving.exit is not None:
            leaving.exit(game)
    game.current_state = target
    entering = _TABLE[target]
    if entering.enter is not None:
        entering.enter(game)