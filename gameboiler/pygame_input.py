"""Physical key state tracked from pygame events."""

from __future__ import annotations

import pygame

from .input import PhysicalKey

TRIGGER_THRESHOLD = 0.5

_KEYBOARD: dict[int, PhysicalKey] = {
    pygame.K_w: PhysicalKey.KEYBOARD_KEY_W,
    pygame.K_a: PhysicalKey.KEYBOARD_KEY_A,
    pygame.K_s: PhysicalKey.KEYBOARD_KEY_S,
    pygame.K_d: PhysicalKey.KEYBOARD_KEY_D,
    pygame.K_UP: PhysicalKey.KEYBOARD_KEY_UP,
    pygame.K_DOWN: PhysicalKey.KEYBOARD_KEY_DOWN,
    pygame.K_LEFT: PhysicalKey.KEYBOARD_KEY_LEFT,
    pygame.K_RIGHT: PhysicalKey.KEYBOARD_KEY_RIGHT,
    pygame.K_ESCAPE: PhysicalKey.KEYBOARD_KEY_ESCAPE,
    pygame.K_F1: PhysicalKey.KEYBOARD_KEY_F1,
    pygame.K_RETURN: PhysicalKey.KEYBOARD_KEY_ENTER,
    pygame.K_e: PhysicalKey.KEYBOARD_KEY_E,
}

_MOUSE: dict[int, PhysicalKey] = {
    1: PhysicalKey.MOUSE_BUTTON_LEFT,
    2: PhysicalKey.MOUSE_BUTTON_MIDDLE,
    3: PhysicalKey.MOUSE_BUTTON_RIGHT,
    6: PhysicalKey.MOUSE_BUTTON_FORWARD,
    7: PhysicalKey.MOUSE_BUTTON_BACK,
}

_GAMEPAD_BUTTONS: dict[int, PhysicalKey] = {
    0: PhysicalKey.GAMEPAD_BUTTON_A,
    1: PhysicalKey.GAMEPAD_BUTTON_B,
    2: PhysicalKey.GAMEPAD_BUTTON_X,
    3: PhysicalKey.GAMEPAD_BUTTON_Y,
    4: PhysicalKey.GAMEPAD_SHOULDER_LEFT_TRIGGER,
    5: PhysicalKey.GAMEPAD_SHOULDER_RIGHT_TRIGGER,
    6: PhysicalKey.GAMEPAD_BUTTON_BACK,
    7: PhysicalKey.GAMEPAD_BUTTON_START,
    8: PhysicalKey.GAMEPAD_THUMB_LEFT_CLICK,
    9: PhysicalKey.GAMEPAD_THUMB_RIGHT_CLICK,
}

_GAMEPAD_AXES: dict[int, PhysicalKey] = {
    4: PhysicalKey.GAMEPAD_SHOULDER_LEFT_BUMPER,
    5: PhysicalKey.GAMEPAD_SHOULDER_RIGHT_BUMPER,
}

_DPAD = (
    PhysicalKey.GAMEPAD_DPAD_UP,
    PhysicalKey.GAMEPAD_DPAD_DOWN,
    PhysicalKey.GAMEPAD_DPAD_LEFT,
    PhysicalKey.GAMEPAD_DPAD_RIGHT,
)


def _hat_directions(value: tuple[int, int]) -> set[PhysicalKey]:
    x, y = value
    directions = set()
    if y > 0:
        directions.add(PhysicalKey.GAMEPAD_DPAD_UP)
    elif y < 0:
        directions.add(PhysicalKey.GAMEPAD_DPAD_DOWN)
    if x < 0:
        directions.add(PhysicalKey.GAMEPAD_DPAD_LEFT)
    elif x > 0:
        directions.add(PhysicalKey.GAMEPAD_DPAD_RIGHT)
    return directions


class PygameInput:
    """Platform input backend fed with pygame events.

    :meth:`update` starts a new frame: keys pressed and wheel movement seen
    in the previous frame are forgotten, held keys stay down.
    """

    def __init__(self, gamepad: int = 0) -> None:
        self.gamepad = gamepad
        self._down: set[PhysicalKey] = set()
        self._pressed: set[PhysicalKey] = set()
        self._wheel = 0.0

    def _set(self, key: PhysicalKey, down: bool) -> None:
        if down:
            if key not in self._down:
                self._pressed.add(key)
            self._down.add(key)
        else:
            self._down.discard(key)

    def _from_gamepad(self, event: pygame.event.Event) -> bool:
        return getattr(event, "joy", 0) == self.gamepad

    def process_event(self, event: pygame.event.Event) -> None:
        """Update key state from one pygame event; others are ignored."""
        kind = event.type
        if kind in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEYBOARD.get(event.key)
            if key is not None:
                self._set(key, kind == pygame.KEYDOWN)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            key = _MOUSE.get(event.button)
            if key is not None:
                self._set(key, kind == pygame.MOUSEBUTTONDOWN)
        elif kind == pygame.MOUSEWHEEL:
            self._wheel += event.y
        elif kind in (pygame.JOYBUTTONDOWN, pygame.JOYBUTTONUP):
            key = _GAMEPAD_BUTTONS.get(event.button)
            if key is not None and self._from_gamepad(event):
                self._set(key, kind == pygame.JOYBUTTONDOWN)
        elif kind == pygame.JOYAXISMOTION:
            key = _GAMEPAD_AXES.get(event.axis)
            if key is not None and self._from_gamepad(event):
                self._set(key, event.value > TRIGGER_THRESHOLD)
        elif kind == pygame.JOYHATMOTION:
            if self._from_gamepad(event):
                directions = _hat_directions(event.value)
                for key in _DPAD:
                    self._set(key, key in directions)

    def update(self) -> None:
        """Begin a new frame of input."""
        self._pressed.clear()
        self._wheel = 0.0

    def key_pressed(self, key: PhysicalKey) -> bool:
        """True if ``key`` went down during the current frame."""
        if key == PhysicalKey.MOUSE_BUTTON_SCROLL_UP:
            return self._wheel > 0
        if key == PhysicalKey.MOUSE_BUTTON_SCROLL_DOWN:
            return self._wheel < 0
        return key in self._pressed

    def key_down(self, key: PhysicalKey) -> bool:
        """True while ``key`` is held."""
        if key == PhysicalKey.MOUSE_BUTTON_SCROLL_UP:
            return self._wheel > 0
        if key == PhysicalKey.MOUSE_BUTTON_SCROLL_DOWN:
            return self._wheel < 0
        return key in self._down