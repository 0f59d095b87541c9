from application.favorites.broadcast import StateBroadcaster
from application.favorites.cache_manager import FavoritesCacheManager
from application.favorites.errors import StorageError, StorageLoadError, StorageWriteError
from application.favorites.provider import get_favorites_manager, set_favorites_manager

__all__ = [
    "FavoritesCacheManager",
    "StateBroadcaster",
    "StorageError",
    "StorageLoadError",
    "StorageWriteError",
    "get_favorites_manager",
    "set_favorites_manager",
]
