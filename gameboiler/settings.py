"""Game settings: defaults, reset, and JSON persistence."""

from __future__ import annotations

import dataclasses
import json
import os
from dataclasses import dataclass
from typing import Any

from .files import read_file, save_file
from .input import PhysicalKey


@dataclass(frozen=True)
class Keybind:
    """A named action together with its primary physical key."""

    name: str
    key: PhysicalKey


DEFAULT_KEYBINDS: tuple[Keybind, ...] = (
    Keybind("MOVE_UP", PhysicalKey.KEYBOARD_KEY_W),
    Keybind("MOVE_DOWN", PhysicalKey.KEYBOARD_KEY_S),
    Keybind("MOVE_LEFT", PhysicalKey.KEYBOARD_KEY_A),
    Keybind("MOVE_RIGHT", PhysicalKey.KEYBOARD_KEY_D),
    Keybind("INTERACT", PhysicalKey.KEYBOARD_KEY_E),
    Keybind("PAUSE", PhysicalKey.KEYBOARD_KEY_ESCAPE),
    Keybind("DEBUG_TOGGLE", PhysicalKey.KEYBOARD_KEY_F1),
)


@dataclass
class Settings:
    """User-adjustable game settings."""

    window_width: int = 800
    window_height: int = 600
    fullscreen: bool = False
    master_volume: float = 1.0
    music_volume: float = 0.8
    sfx_volume: float = 0.8
    keybinds: tuple[Keybind, ...] = DEFAULT_KEYBINDS

    def reset_to_defaults(self) -> None:
        """Restore every setting to its default value."""
        defaults = default_settings()
        for item in dataclasses.fields(self):
            setattr(self, item.name, getattr(defaults, item.name))


def default_settings() -> Settings:
    """Return a new settings object holding the defaults."""
    return Settings()


_INT_FIELDS = ("window_width", "window_height")
_BOOL_FIELDS = ("fullscreen",)
_FLOAT_FIELDS = ("master_volume", "music_volume", "sfx_volume")


def _to_json(settings: Settings) -> dict[str, Any]:
    return {
        "window_width": settings.window_width,
        "window_height": settings.window_height,
        "fullscreen": settings.fullscreen,
        "master_volume": settings.master_volume,
        "music_volume": settings.music_volume,
        "sfx_volume": settings.sfx_volume,
        "keybinds": [
            {"name": bind.name, "key": PhysicalKey(bind.key).name}
            for bind in settings.keybinds
        ],
    }


def _parse_keybinds(value: Any) -> tuple[Keybind, ...]:
    if not isinstance(value, list):
        raise ValueError("keybinds must be a list")
    binds = []
    for entry in value:
        if not isinstance(entry, dict):
            raise ValueError("each keybind must be an object")
        name, key = entry.get("name"), entry.get("key")
        if not isinstance(name, str) or not isinstance(key, str):
            raise ValueError("keybind needs string 'name' and 'key'")
        try:
            physical = PhysicalKey[key]
        except KeyError:
            raise ValueError(f"unknown physical key: {key}") from None
        binds.append(Keybind(name, physical))
    return tuple(binds)


def _from_json(data: Any) -> Settings:
    if not isinstance(data, dict):
        raise ValueError("settings must be a JSON object")
    settings = default_settings()
    for name in _INT_FIELDS:
        if name in data:
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
            setattr(settings, name, value)
    for name in _BOOL_FIELDS:
        if name in data:
            value = data[name]
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean")
            setattr(settings, name, value)
    for name in _FLOAT_FIELDS:
        if name in data:
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number")
            setattr(settings, name, float(value))
    if "keybinds" in data:
        settings.keybinds = _parse_keybinds(data["keybinds"])
    return settings


def load_settings(path: str | os.PathLike[str]) -> Settings:
    """Read settings from a JSON file; missing entries keep their defaults."""
    raw = read_file(path)
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"invalid settings file {path}: {exc}") from exc
    return _from_json(data)


def save_settings(settings: Settings, path: str | os.PathLike[str]) -> None:
    """Write ``settings`` to ``path`` as JSON."""
    text = json.dumps(_to_json(settings), indent=2)
    save_file(path, (text + "\n").encode("utf-8"))