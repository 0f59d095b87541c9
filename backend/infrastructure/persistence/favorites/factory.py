"""Factory for the key-value medium behind the favorites store.

Mirrors the memory-store factory: one place that maps configuration onto a
concrete `KeyValueStorePort`.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from application.ports.key_value_store_port import KeyValueStorePort
from infrastructure.config.favorites_storage import FavoritesStorageConfig

logger = logging.getLogger(__name__)

BackendType = Literal["memory", "file", "redis", ""]


class KeyValueStoreFactory:
    """Creates key-value media based on configuration."""

    @staticmethod
    def create(
        backend: BackendType | None = None,
        *,
        config: Optional[FavoritesStorageConfig] = None,
    ) -> KeyValueStorePort:
        """Create the medium for `backend`.

        Args:
            backend: 'memory', 'file' or 'redis'. If None, `config.backend` is used.
            config: Storage settings; defaults to the resolved process settings.

        Raises:
            ValueError: If an unsupported backend is specified.
        """
        if config is None:
            from infrastructure.config.settings import FAVORITES_STORAGE

            config = FAVORITES_STORAGE

        if backend is None:
            backend = config.backend  # type: ignore[assignment]

        backend = (backend or "").strip().lower()

        match backend:
            case "file":
                from infrastructure.persistence.favorites.file_kv_store import FileKeyValueStore

                return FileKeyValueStore(directory=config.directory)

            case "redis":
                if not config.redis_url:
                    logger.warning(
                        "FAVORITES_STORAGE_BACKEND=redis but FAVORITES_REDIS_URL is not set; "
                        "falling back to InMemoryKeyValueStore"
                    )
                    from infrastructure.persistence.favorites.memory_kv_store import (
                        InMemoryKeyValueStore,
                    )

                    return InMemoryKeyValueStore()

                from infrastructure.persistence.favorites.redis_kv_store import RedisKeyValueStore

                return RedisKeyValueStore(
                    redis_url=config.redis_url,
                    timeout_s=config.redis_timeout_s,
                )

            case "memory" | "":
                from infrastructure.persistence.favorites.memory_kv_store import InMemoryKeyValueStore

                return InMemoryKeyValueStore()

            case _:
                raise ValueError(
                    f"Unsupported favorites storage backend: {backend!r}. "
                    f"Supported values: 'memory', 'file', 'redis'"
                )


def create_key_value_store(
    backend: BackendType | None = None,
    *,
    config: Optional[FavoritesStorageConfig] = None,
) -> KeyValueStorePort:
    """Shorthand for KeyValueStoreFactory.create()."""
    return KeyValueStoreFactory.create(backend, config=config)
