"""Fatal error reporting and build configuration flags."""

import sys

BUILD_DEBUG = True
ENABLE_ASSERTS = BUILD_DEBUG
ENABLE_LOGGING = True

CONFIG_ENABLE_LOGGING = True
CONFIG_LOGGING_LIBRARY_STD = True
CONFIG_ENABLE_RENDERER = True
CONFIG_RENDERER_LIBRARY_PYGAME = True


class PanicError(RuntimeError):
    """Raised for critical errors the game cannot continue from."""


def panic(message: str) -> None:
    """Report ``message`` on stderr and raise :class:`PanicError`."""
    print(f"PANIC: {message}", file=sys.stderr)
    raise PanicError(message)