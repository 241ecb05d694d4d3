import pygame
import pytest

from gameboiler.input import InputKey, InputSystem, PhysicalKey, default_input_bindings
from gameboiler.pygame_input import PygameInput


def _key(kind, key):
    return pygame.event.Event(kind, key=key)


def test_keydown_is_pressed_and_down():
    backend = PygameInput()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_w))
    assert backend.key_pressed(PhysicalKey.KEYBOARD_KEY_W) is True
    assert backend.key_down(PhysicalKey.KEYBOARD_KEY_W) is True


def test_update_clears_pressed_but_keeps_down():
    backend = PygameInput()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_RETURN))
    backend.update()
    assert backend.key_pressed(PhysicalKey.KEYBOARD_KEY_ENTER) is False
    assert backend.key_down(PhysicalKey.KEYBOARD_KEY_ENTER) is True


def test_keyup_releases():
    backend = PygameInput()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_F1))
    backend.process_event(_key(pygame.KEYUP, pygame.K_F1))
    assert backend.key_down(PhysicalKey.KEYBOARD_KEY_F1) is False


def test_held_key_not_pressed_again():
    backend = PygameInput()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_a))
    backend.update()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_a))
    assert backend.key_pressed(PhysicalKey.KEYBOARD_KEY_A) is False


def test_unmapped_key_ignored():
    backend = PygameInput()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_z))
    assert not any(backend.key_down(key) for key in PhysicalKey)


def test_none_key_never_active():
    backend = PygameInput()
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_w))
    assert backend.key_pressed(PhysicalKey.NONE) is False


@pytest.mark.parametrize(
    "button, key",
    [
        (1, PhysicalKey.MOUSE_BUTTON_LEFT),
        (2, PhysicalKey.MOUSE_BUTTON_MIDDLE),
        (3, PhysicalKey.MOUSE_BUTTON_RIGHT),
    ],
)
def test_mouse_buttons(button, key):
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button))
    assert backend.key_pressed(key) is True
    backend.process_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=button))
    assert backend.key_down(key) is False


def test_mouse_wheel_lasts_one_frame():
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1))
    assert backend.key_pressed(PhysicalKey.MOUSE_BUTTON_SCROLL_UP) is True
    assert backend.key_down(PhysicalKey.MOUSE_BUTTON_SCROLL_DOWN) is False
    backend.update()
    assert backend.key_down(PhysicalKey.MOUSE_BUTTON_SCROLL_UP) is False


def test_wheel_down():
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-2))
    assert backend.key_pressed(PhysicalKey.MOUSE_BUTTON_SCROLL_DOWN) is True


def test_gamepad_button_start():
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.JOYBUTTONDOWN, joy=0, button=7))
    assert backend.key_pressed(PhysicalKey.GAMEPAD_BUTTON_START) is True


def test_other_gamepad_ignored():
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.JOYBUTTONDOWN, joy=1, button=0))
    assert backend.key_down(PhysicalKey.GAMEPAD_BUTTON_A) is False


def test_dpad_hat_motion():
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.JOYHATMOTION, joy=0, hat=0, value=(0, 1)))
    assert backend.key_pressed(PhysicalKey.GAMEPAD_DPAD_UP) is True
    assert backend.key_down(PhysicalKey.GAMEPAD_DPAD_DOWN) is False
    backend.process_event(pygame.event.Event(pygame.JOYHATMOTION, joy=0, hat=0, value=(0, 0)))
    assert backend.key_down(PhysicalKey.GAMEPAD_DPAD_UP) is False


def test_trigger_axis_threshold():
    backend = PygameInput()
    backend.process_event(pygame.event.Event(pygame.JOYAXISMOTION, joy=0, axis=4, value=0.9))
    assert backend.key_down(PhysicalKey.GAMEPAD_SHOULDER_LEFT_BUMPER) is True
    backend.process_event(pygame.event.Event(pygame.JOYAXISMOTION, joy=0, axis=4, value=-1.0))
    assert backend.key_down(PhysicalKey.GAMEPAD_SHOULDER_LEFT_BUMPER) is False


def test_drives_input_system():
    backend = PygameInput()
    system = InputSystem(default_input_bindings(), backend)
    backend.process_event(_key(pygame.KEYDOWN, pygame.K_ESCAPE))
    assert system.action_pressed(InputKey.PAUSE) is True
    assert system.action_down(InputKey.MOVE_UP) is False
    backend.update()
    assert system.action_pressed(InputKey.PAUSE) is False
    assert system.action_down(InputKey.PAUSE) is True