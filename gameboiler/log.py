"""Levelled, categorised logging with a pluggable backend."""

from __future__ import annotations

import contextlib
import enum
import logging
import sys
import threading
from dataclasses import dataclass
from typing import IO, Any, Protocol

MESSAGE_LIMIT = 1023
_LINE_LIMIT = 1199


class LogLevel(enum.IntEnum):
    """Severity of a log message, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


class LogMask(enum.IntFlag):
    """Bit set of enabled log levels."""

    TRACE = 1 << LogLevel.TRACE
    DEBUG = 1 << LogLevel.DEBUG
    INFO = 1 << LogLevel.INFO
    WARNING = 1 << LogLevel.WARNING
    ERROR = 1 << LogLevel.ERROR
    FATAL = 1 << LogLevel.FATAL
    ALL = TRACE | DEBUG | INFO | WARNING | ERROR | FATAL


def level_to_mask(level: int) -> LogMask:
    """Return the mask bit that enables ``level``."""
    return LogMask(1 << int(level))


_PY_LEVELS = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}


class _LogApi(Protocol):
    def msg(self, level: int, category: str, message: str) -> None: ...


class StdLogBackend:
    """Log backend writing to a stream and, optionally, a file."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._mask = LogMask.ALL
        self._lock: Any = contextlib.nullcontext()
        self._logger: logging.Logger | None = None

    def init(self, log_file: str | None, mask: int, thread_safe: bool) -> None:
        """Configure output file, enabled levels and locking."""
        self.shutdown()
        self._mask = LogMask(mask)
        self._lock = threading.Lock() if thread_safe else contextlib.nullcontext()
        self._logger = self._build_logger(log_file)

    def _build_logger(self, log_file: str | None) -> logging.Logger:
        logger = logging.Logger(f"{__name__}.{id(self):x}", level=1)
        logger.propagate = False
        formatter = logging.Formatter("%(asctime)s %(level_name)-7s %(message)s")
        stream = self._stream if self._stream is not None else sys.stderr
        handlers: list[logging.Handler] = [logging.StreamHandler(stream)]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        return logger

    def _enabled(self, level: LogLevel) -> bool:
        return bool(self._mask & level_to_mask(level))

    def _emit(self, py_level: int, name: str, line: str) -> None:
        if self._logger is None:
            self._logger = self._build_logger(None)
        with self._lock:
            self._logger.log(py_level, "%s", line, extra={"level_name": name})

    def msg(self, level: int, category: str, message: str) -> None:
        """Write ``message`` under ``category`` if ``level`` is enabled."""
        try:
            known = LogLevel(level)
        except ValueError:
            if self._enabled(LogLevel.ERROR):
                self._emit(
                    logging.ERROR,
                    LogLevel.ERROR.name,
                    f"Unknown logging level, error: {message}",
                )
            return
        if not self._enabled(known):
            return
        line = f"[{category}] {message}"[:_LINE_LIMIT]
        self._emit(_PY_LEVELS[known], known.name, line)

    def shutdown(self) -> None:
        """Close every handler of this backend."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)
        self._logger = None


DEFAULT_BACKEND = StdLogBackend()


@dataclass
class _LoggerSlot:
    logger: _LogApi | None = None


_slot = _LoggerSlot()


def set_global_logger(logger: _LogApi | None) -> _LogApi | None:
    """Route module-level logging to ``logger`` and return the one it replaces.

    ``None`` restores the default backend.
    """
    previous = _slot.logger
    _slot.logger = logger
    return previous


def get_global_logger() -> _LogApi | None:
    """Return the configured global logger, or ``None`` if none is set."""
    return _slot.logger


def log_msg(level: int, category: str, fmt: str, *args: Any) -> None:
    """Format a message and hand it to the global logger or the default backend."""
    message = fmt % args if args else fmt
    api = _slot.logger if _slot.logger is not None else DEFAULT_BACKEND
    api.msg(level, category, message[:MESSAGE_LIMIT])


@dataclass(frozen=True)
class CategoryLogger:
    """Logger bound to one category."""

    category: str = "General"

    def trace(self, fmt: str, *args: Any) -> None:
        log_msg(LogLevel.TRACE, self.category, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        log_msg(LogLevel.DEBUG, self.category, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        log_msg(LogLevel.INFO, self.category, fmt, *args)

    def warn(self, fmt: str, *args: Any) -> None:
        log_msg(LogLevel.WARNING, self.category, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        log_msg(LogLevel.ERROR, self.category, fmt, *args)

    def fatal(self, fmt: str, *args: Any) -> None:
        log_msg(LogLevel.FATAL, self.category, fmt, *args)