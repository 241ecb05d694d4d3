"""Logical input actions bound to physical keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Protocol

from .panic import panic

MAX_BINDINGS_PER_ACTION = 4


class InputKey(enum.IntEnum):
    """Logical game actions."""

    DEBUG_TOGGLE = 0
    MOVE_UP = 1
    MOVE_DOWN = 2
    MOVE_LEFT = 3
    MOVE_RIGHT = 4
    INTERACT = 5
    PAUSE = 6


class PhysicalKey(enum.IntEnum):
    """Physical keys and buttons on keyboard, mouse and gamepad."""

    NONE = 0
    KEYBOARD_KEY_W = enum.auto()
    KEYBOARD_KEY_A = enum.auto()
    KEYBOARD_KEY_S = enum.auto()
    KEYBOARD_KEY_D = enum.auto()
    KEYBOARD_KEY_UP = enum.auto()
    KEYBOARD_KEY_DOWN = enum.auto()
    KEYBOARD_KEY_LEFT = enum.auto()
    KEYBOARD_KEY_RIGHT = enum.auto()
    KEYBOARD_KEY_ESCAPE = enum.auto()
    KEYBOARD_KEY_F1 = enum.auto()
    KEYBOARD_KEY_ENTER = enum.auto()
    KEYBOARD_KEY_E = enum.auto()
    MOUSE_BUTTON_LEFT = enum.auto()
    MOUSE_BUTTON_RIGHT = enum.auto()
    MOUSE_BUTTON_MIDDLE = enum.auto()
    MOUSE_BUTTON_SCROLL_UP = enum.auto()
    MOUSE_BUTTON_SCROLL_DOWN = enum.auto()
    MOUSE_BUTTON_FORWARD = enum.auto()
    MOUSE_BUTTON_BACK = enum.auto()
    GAMEPAD_DPAD_UP = enum.auto()
    GAMEPAD_DPAD_DOWN = enum.auto()
    GAMEPAD_DPAD_LEFT = enum.auto()
    GAMEPAD_DPAD_RIGHT = enum.auto()
    GAMEPAD_BUTTON_A = enum.auto()
    GAMEPAD_BUTTON_B = enum.auto()
    GAMEPAD_BUTTON_X = enum.auto()
    GAMEPAD_BUTTON_Y = enum.auto()
    GAMEPAD_SHOULDER_LEFT_TRIGGER = enum.auto()
    GAMEPAD_SHOULDER_LEFT_BUMPER = enum.auto()
    GAMEPAD_SHOULDER_RIGHT_TRIGGER = enum.auto()
    GAMEPAD_SHOULDER_RIGHT_BUMPER = enum.auto()
    GAMEPAD_BUTTON_BACK = enum.auto()
    GAMEPAD_BUTTON_START = enum.auto()
    GAMEPAD_THUMB_LEFT_CLICK = enum.auto()
    GAMEPAD_THUMB_RIGHT_CLICK = enum.auto()


class InputDevice(enum.Enum):
    KEYBOARD = enum.auto()
    MOUSE = enum.auto()
    GAMEPAD = enum.auto()


@dataclass(frozen=True)
class InputBinding:
    """A device together with a device-specific key code."""

    device: InputDevice
    code: int


@dataclass
class ActionBindings:
    """Physical keys bound to one action, at most MAX_BINDINGS_PER_ACTION."""

    keys: list[PhysicalKey] = field(default_factory=list)

    def add(self, key: PhysicalKey) -> None:
        """Bind another physical key to this action."""
        if key == PhysicalKey.NONE:
            raise ValueError("cannot bind PhysicalKey.NONE")
        if len(self.keys) >= MAX_BINDINGS_PER_ACTION:
            raise ValueError(
                f"an action holds at most {MAX_BINDINGS_PER_ACTION} bindings"
            )
        self.keys.append(PhysicalKey(key))

    @property
    def count(self) -> int:
        return len(self.keys)

    def __iter__(self) -> Iterator[PhysicalKey]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)


def _empty_bindings() -> dict[InputKey, ActionBindings]:
    return {action: ActionBindings() for action in InputKey}


@dataclass
class Input:
    """Bindings for every action."""

    action_bindings: dict[InputKey, ActionBindings] = field(
        default_factory=_empty_bindings
    )

    def __getitem__(self, action: InputKey) -> ActionBindings:
        return self.action_bindings[action]


class PlatformInput(Protocol):
    """Platform backend answering queries about physical keys."""

    def update(self) -> None: ...

    def key_pressed(self, key: PhysicalKey) -> bool: ...

    def key_down(self, key: PhysicalKey) -> bool: ...


_DEFAULT_BINDINGS: dict[InputKey, tuple[PhysicalKey, ...]] = {
    InputKey.MOVE_UP: (
        PhysicalKey.KEYBOARD_KEY_W,
        PhysicalKey.KEYBOARD_KEY_UP,
        PhysicalKey.GAMEPAD_DPAD_UP,
    ),
    InputKey.MOVE_DOWN: (
        PhysicalKey.KEYBOARD_KEY_S,
        PhysicalKey.KEYBOARD_KEY_DOWN,
        PhysicalKey.GAMEPAD_DPAD_DOWN,
    ),
    InputKey.MOVE_LEFT: (
        PhysicalKey.KEYBOARD_KEY_A,
        PhysicalKey.KEYBOARD_KEY_LEFT,
        PhysicalKey.GAMEPAD_DPAD_LEFT,
    ),
    InputKey.MOVE_RIGHT: (
        PhysicalKey.KEYBOARD_KEY_D,
        PhysicalKey.KEYBOARD_KEY_RIGHT,
        PhysicalKey.GAMEPAD_DPAD_RIGHT,
    ),
    InputKey.INTERACT: (
        PhysicalKey.KEYBOARD_KEY_E,
        PhysicalKey.KEYBOARD_KEY_ENTER,
        PhysicalKey.GAMEPAD_BUTTON_A,
    ),
    InputKey.PAUSE: (
        PhysicalKey.KEYBOARD_KEY_ESCAPE,
        PhysicalKey.GAMEPAD_BUTTON_START,
    ),
    InputKey.DEBUG_TOGGLE: (PhysicalKey.KEYBOARD_KEY_F1,),
}


def load_default_input_bindings(bindings: Input | None) -> None:
    """Append the default key bindings to ``bindings``."""
    if bindings is None:
        panic("load_default_input_bindings: bindings are None")
        return
    for action, keys in _DEFAULT_BINDINGS.items():
        for key in keys:
            bindings.action_bindings[action].add(key)


def default_input_bindings() -> Input:
    """Return a fresh set of default bindings."""
    bindings = Input()
    load_default_input_bindings(bindings)
    return bindings


@dataclass
class InputSystem:
    """Resolves logical actions through bindings and a platform backend."""

    bindings: Input = field(default_factory=Input)
    platform: PlatformInput | None = None

    def _platform(self) -> PlatformInput:
        if self.platform is None:
            panic("InputSystem: no platform input backend")
        assert self.platform is not None
        return self.platform

    def action_pressed(self, action: InputKey) -> bool:
        """True if any key bound to ``action`` was pressed this frame."""
        platform = self._platform()
        return any(platform.key_pressed(key) for key in self.bindings[action])

    def action_down(self, action: InputKey) -> bool:
        """True if any key bound to ``action`` is held down."""
        platform = self._platform()
        return any(platform.key_down(key) for key in self.bindings[action])