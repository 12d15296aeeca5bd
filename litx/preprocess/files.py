"""File-system access used by preprocessor directives."""

from __future__ import annotations

import errno
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def read_text(self, path: Path) -> str:
        """Read the whole file as text.

        Raises OSError, or ValueError for undecodable text and unusable paths
        (an embedded NUL byte).
        """
        ...


class LocalFileSystem:
    """Reads real files as UTF-8. Each read opens and closes its own handle."""

    def read_text(self, path: Path) -> str:
        return path.read_bytes().decode("utf-8")


class MemoryFileSystem:
    """In-memory files keyed by path, for hosts that keep sources off disk."""

    def __init__(self, files: Mapping[str | Path, str] | None = None) -> None:
        self._files: dict[Path, str] = {}
        for path, text in (files or {}).items():
            self.add(path, text)

    def add(self, path: str | Path, text: str) -> None:
        self._files[normalize_path(path)] = text

    def read_text(self, path: Path) -> str:
        key = normalize_path(path)
        if key not in self._files:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
        return self._files[key]


def normalize_path(path: str | Path) -> Path:
    """Collapse `.`/`..` segments without touching the file system."""
    return Path(os.path.normpath(path))


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "normalize_path",
]
