from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from application.favorites import FavoritesCacheManager, set_favorites_manager
from application.ports.key_value_store_port import KeyValueStorePort
from infrastructure.config.favorites_storage import FavoritesStorageConfig


def build_favorites_manager(
    *,
    config: Optional[FavoritesStorageConfig] = None,
    kv: Optional[KeyValueStorePort] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FavoritesCacheManager:
    """Wire medium -> durable store -> cache manager from configuration."""
    if config is None:
        from infrastructure.config.settings import FAVORITES_STORAGE

        config = FAVORITES_STORAGE

    from infrastructure.persistence.favorites import DurableFavoritesStore, create_key_value_store

    medium = kv if kv is not None else create_key_value_store(config=config)
    store = DurableFavoritesStore(kv=medium, key=config.key)
    return FavoritesCacheManager(store=store, clock=clock)


def bootstrap_favorites(
    *,
    config: Optional[FavoritesStorageConfig] = None,
    kv: Optional[KeyValueStorePort] = None,
) -> FavoritesCacheManager:
    """Build the process-wide favorites manager and register it."""
    manager = build_favorites_manager(config=config, kv=kv)
    set_favorites_manager(manager)
    return manager
