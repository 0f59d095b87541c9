import sys
import unittest
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from application.favorites import FavoritesCacheManager, get_favorites_manager, set_favorites_manager
from domain.favorites import MovieSummary
from infrastructure.bootstrap import bootstrap_favorites, build_favorites_manager
from infrastructure.config.favorites_storage import FavoritesStorageConfig
from infrastructure.persistence.favorites import InMemoryKeyValueStore


class TestFavoritesProvider(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        set_favorites_manager(None)

    def tearDown(self) -> None:
        set_favorites_manager(None)

    def test_get_before_configuration_raises(self) -> None:
        with self.assertRaises(RuntimeError):
            get_favorites_manager()

    def test_bootstrap_registers_shared_manager(self) -> None:
        manager = bootstrap_favorites(config=FavoritesStorageConfig(backend="memory"))
        self.assertIsInstance(manager, FavoritesCacheManager)
        self.assertIs(get_favorites_manager(), manager)

    async def test_built_manager_uses_configured_key(self) -> None:
        kv = InMemoryKeyValueStore()
        manager = build_favorites_manager(config=FavoritesStorageConfig(backend="memory", key="kid_profile"), kv=kv)

        await manager.toggle(MovieSummary(id=1, title="One"))

        self.assertIsNotNone(await kv.get("kid_profile"))
        self.assertIsNone(await kv.get("user_favorites"))


if __name__ == "__main__":
    unittest.main()
