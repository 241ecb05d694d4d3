"""Command-line entry point that runs the game."""

from __future__ import annotations

import argparse
from typing import Sequence

from .game import GAME_NAME, GAME_VERSION, Game
from .log import CategoryLogger, StdLogBackend
from .pygame_input import PygameInput
from .pygame_render import PygameRenderer

_log = CategoryLogger("Main")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in a pygame window; returns the exit status."""
    parser = argparse.ArgumentParser(prog="gameboiler", description="Run the game.")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {GAME_VERSION}"
    )
    parser.parse_args(argv)

    _log.info("Starting %s", GAME_NAME)
    platform_input = PygameInput()
    renderer = PygameRenderer(input_sink=platform_input)
    game = Game(renderer, platform_input, StdLogBackend())
    try:
        game.init()
        game.start()
    finally:
        game.destroy()
    _log.info("Exiting %s", GAME_NAME)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())