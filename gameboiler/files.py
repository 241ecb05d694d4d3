"""Whole-file read and write helpers."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of ``path``; raises OSError on failure."""
    return Path(path).read_bytes()


def save_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Write ``data`` to ``path``, replacing it; raises OSError on failure."""
    with open(path, "wb") as handle:
        written = handle.write(data)
    if written != len(data):
        raise OSError(f"short write to {path}: {written} of {len(data)} bytes")