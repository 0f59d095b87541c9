from __future__ import annotations

from typing import Optional


class StorageError(Exception):
    """Base error for favorites persistence failures."""

    def __init__(self, message: str, *, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class StorageLoadError(StorageError):
    """The storage medium could not be read."""


class StorageWriteError(StorageError):
    """The storage medium rejected a write; nothing was persisted."""
