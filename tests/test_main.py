from unittest import mock

import pygame
import pytest

from gameboiler.log import get_global_logger, set_global_logger
from gameboiler.main import main


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    set_global_logger(None)


def test_version_option(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "gameboiler 0.1.0" in capsys.readouterr().out


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2


def test_runs_until_window_closed(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]) as polled:
        status = main([])
    assert status == 0
    assert polled.call_count == 1
    assert get_global_logger() is None
    err = capsys.readouterr().err
    assert "[Game] Logger initialized" in err
    assert "[General] Entering Boot State" in err
    assert "[General] Entering Shutdown State" in err