from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorePort(Protocol):
    """Asynchronous string key-value medium (device storage, file, redis...)."""

    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Store `value` under `key`; raises on any rejected write."""
        ...

    async def delete(self, key: str) -> bool:
        ...

    async def close(self) -> None:
        ...
