from __future__ import annotations

from application.favorites.cache_manager import FavoritesCacheManager

_favorites_manager: FavoritesCacheManager | None = None


def set_favorites_manager(manager: FavoritesCacheManager | None) -> None:
    global _favorites_manager
    _favorites_manager = manager


def get_favorites_manager() -> FavoritesCacheManager:
    if _favorites_manager is None:
        raise RuntimeError(
            "Favorites manager not configured. "
            "Call infrastructure.bootstrap.bootstrap_favorites() (or "
            "set_favorites_manager(...)) before using favorites."
        )
    return _favorites_manager


__all__ = [
    "set_favorites_manager",
    "get_favorites_manager",
]
