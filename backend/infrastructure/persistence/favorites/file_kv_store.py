from __future__ import annotations

import asyncio
import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from application.ports.key_value_store_port import KeyValueStorePort

_UNSAFE_KEY_RE = re.compile(r"[^0-9A-Za-z_.-]")


class FileKeyValueStore(KeyValueStorePort):
    """One UTF-8 file per key under `directory`.

    Writes go to a temp file in the same directory and are moved into place with
    `os.replace`, so readers see either the old or the new value.
    """

    def __init__(self, *, directory: Path, suffix: str = ".json") -> None:
        self._directory = Path(directory)
        self._suffix = suffix

    def _path(self, key: str) -> Path:
        slug = _UNSAFE_KEY_RE.sub("_", (key or "").strip()).strip(".")
        if not slug:
            raise ValueError(f"invalid storage key: {key!r}")
        return self._directory / f"{slug}{self._suffix}"

    def _read(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write(self, path: Path, value: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}.", suffix=".tmp", dir=self._directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

    def _delete(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, self._path(key))

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, self._path(key), value)

    async def delete(self, key: str) -> bool:
        return await asyncio.to_thread(self._delete, self._path(key))

    async def close(self) -> None:
        return None
