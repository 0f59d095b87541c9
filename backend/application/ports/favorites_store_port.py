from __future__ import annotations

from typing import Protocol

from domain.favorites import FavoritesCollection


class FavoritesStorePort(Protocol):
    async def load(self) -> FavoritesCollection:
        """Persisted favorites; empty when missing, corrupt or unreadable. Never raises."""
        ...

    async def load_for_update(self) -> FavoritesCollection:
        """Like `load`, but raises StorageLoadError when the medium read fails."""
        ...

    async def save(self, favorites: FavoritesCollection) -> None:
        """Write the full collection; raises StorageWriteError on failure."""
        ...

    async def close(self) -> None:
        ...
