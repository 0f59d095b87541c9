from .factory import KeyValueStoreFactory, create_key_value_store
from .favorites_store import FAVORITES_KEY, DurableFavoritesStore
from .file_kv_store import FileKeyValueStore
from .memory_kv_store import InMemoryKeyValueStore

__all__ = [
    "FAVORITES_KEY",
    "DurableFavoritesStore",
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    "KeyValueStoreFactory",
    "create_key_value_store",
]
