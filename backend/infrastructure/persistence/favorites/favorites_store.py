from __future__ import annotations

import logging

from pydantic import ValidationError

from application.favorites.errors import StorageLoadError, StorageWriteError
from application.ports.favorites_store_port import FavoritesStorePort
from application.ports.key_value_store_port import KeyValueStorePort
from domain.favorites import FavoritesCollection, dedupe_records
from infrastructure.persistence.favorites.schemas import dump_favorites, parse_favorites
from infrastructure.utils import format_kv

logger = logging.getLogger(__name__)

FAVORITES_KEY = "user_favorites"


class DurableFavoritesStore(FavoritesStorePort):
    """Favorites collection serialized as one JSON array under a single key."""

    def __init__(self, *, kv: KeyValueStorePort, key: str = FAVORITES_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    async def _read(self) -> FavoritesCollection:
        try:
            raw = await self._kv.get(self._key)
        except Exception as exc:
            raise StorageLoadError(f"failed to read favorites: {exc}", key=self._key) from exc

        if raw is None or raw == "":
            return ()
        try:
            records = parse_favorites(raw)
        except ValidationError as exc:
            logger.warning(
                "favorites payload corrupt; treating as empty %s",
                format_kv(key=self._key, errors=exc.error_count(), size=len(raw)),
            )
            return ()
        deduped = dedupe_records(records)
        if len(deduped) != len(records):
            logger.warning(
                "favorites payload had duplicate ids %s",
                format_kv(key=self._key, stored=len(records), kept=len(deduped)),
            )
        return deduped

    async def load(self) -> FavoritesCollection:
        try:
            return await self._read()
        except StorageLoadError:
            logger.warning("favorites load failed; returning empty %s", format_kv(key=self._key), exc_info=True)
            return ()

    async def load_for_update(self) -> FavoritesCollection:
        return await self._read()

    async def save(self, favorites: FavoritesCollection) -> None:
        payload = dump_favorites(favorites)
        try:
            await self._kv.set(self._key, payload)
        except Exception as exc:
            raise StorageWriteError(f"failed to write favorites: {exc}", key=self._key) from exc
        logger.debug("favorites saved %s", format_kv(key=self._key, count=len(favorites)))

    async def contains(self, movie_id: int) -> bool:
        """Durable membership check; any read problem counts as 'not a favorite'."""
        favorites = await self.load()
        return any(r.movie_id == int(movie_id) for r in favorites)

    async def clear(self) -> bool:
        """Administrative reset: drop the stored collection."""
        try:
            return await self._kv.delete(self._key)
        except Exception as exc:
            raise StorageWriteError(f"failed to clear favorites: {exc}", key=self._key) from exc

    async def close(self) -> None:
        await self._kv.close()
