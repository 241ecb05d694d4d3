import json

import pytest

from gameboiler.input import PhysicalKey
from gameboiler.settings import (
    DEFAULT_KEYBINDS,
    Keybind,
    Settings,
    default_settings,
    load_settings,
    save_settings,
)


def test_defaults_match_source():
    settings = default_settings()
    assert settings.window_width == 800
    assert settings.window_height == 600
    assert settings.fullscreen is False
    assert settings.master_volume == 1.0
    assert settings.music_volume == pytest.approx(0.8)
    assert settings.sfx_volume == pytest.approx(0.8)


def test_default_keybinds_order():
    names = [bind.name for bind in default_settings().keybinds]
    assert names == [
        "MOVE_UP",
        "MOVE_DOWN",
        "MOVE_LEFT",
        "MOVE_RIGHT",
        "INTERACT",
        "PAUSE",
        "DEBUG_TOGGLE",
    ]
    assert DEFAULT_KEYBINDS[5] == Keybind("PAUSE", PhysicalKey.KEYBOARD_KEY_ESCAPE)


def test_reset_to_defaults_restores_everything():
    settings = Settings(window_width=1920, fullscreen=True, sfx_volume=0.1, keybinds=())
    settings.reset_to_defaults()
    assert settings == default_settings()


def test_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    original = Settings(
        window_width=1280,
        window_height=720,
        fullscreen=True,
        master_volume=0.5,
        music_volume=0.25,
        sfx_volume=0.75,
        keybinds=(Keybind("JUMP", PhysicalKey.GAMEPAD_BUTTON_A),),
    )
    save_settings(original, path)
    assert load_settings(path) == original


def test_missing_entries_keep_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"window_width": 1024}))
    loaded = load_settings(path)
    assert loaded.window_width == 1024
    assert loaded.window_height == default_settings().window_height
    assert loaded.keybinds == DEFAULT_KEYBINDS


def test_saved_file_uses_key_names(tmp_path):
    path = tmp_path / "settings.json"
    save_settings(default_settings(), path)
    data = json.loads(path.read_text())
    assert data["keybinds"][0] == {"name": "MOVE_UP", "key": "KEYBOARD_KEY_W"}


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_settings(path)


@pytest.mark.parametrize(
    "content",
    [
        [1, 2, 3],
        {"window_width": "wide"},
        {"fullscreen": 1},
        {"master_volume": True},
        {"keybinds": [{"name": "X", "key": "NO_SUCH_KEY"}]},
        {"keybinds": "W"},
    ],
)
def test_bad_values_raise(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(content))
    with pytest.raises(ValueError):
        load_settings(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.json")