from __future__ import annotations

from infrastructure.config.favorites_storage import (  # noqa: F401
    FavoritesStorageConfig,
    apply_env_overrides,
    load_favorites_storage_config,
)

__all__ = [
    "FavoritesStorageConfig",
    "apply_env_overrides",
    "load_favorites_storage_config",
]
