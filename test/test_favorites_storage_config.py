import sys
import tempfile
import unittest
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from infrastructure.config.favorites_storage import (
    FAVORITES_STORAGE_CONFIG_PATH_ENV,
    FavoritesStorageConfig,
    apply_env_overrides,
    load_favorites_storage_config,
)

_RUNTIME = Path("/srv/runtime")


class TestFavoritesStorageConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        path = self.tmp / "favorites_storage.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_packaged_defaults(self) -> None:
        config = load_favorites_storage_config(runtime_root=_RUNTIME)
        self.assertEqual(config.backend, "file")
        self.assertEqual(config.key, "user_favorites")
        self.assertEqual(config.directory, _RUNTIME / "favorites")

    def test_missing_file_gives_defaults(self) -> None:
        config = load_favorites_storage_config(self.tmp / "nope.yaml", runtime_root=_RUNTIME)
        self.assertEqual(config, FavoritesStorageConfig(directory=_RUNTIME / "favorites"))

    def test_yaml_values_are_normalized(self) -> None:
        path = self._write(
            """
favorites_storage:
  backend: "  REDIS "
  key: profile_favorites
  directory: /var/lib/favs
  redis:
    url: redis://cache:6379/2
    timeout_s: -3
"""
        )
        config = load_favorites_storage_config(path, runtime_root=_RUNTIME)
        self.assertEqual(config.backend, "redis")
        self.assertEqual(config.key, "profile_favorites")
        self.assertEqual(config.directory, Path("/var/lib/favs"))
        self.assertEqual(config.redis_url, "redis://cache:6379/2")
        self.assertEqual(config.redis_timeout_s, 5.0)

    def test_garbage_yaml_falls_back(self) -> None:
        path = self._write("favorites_storage:\n  backend: floppy\n  key: ''\n  redis: [1, 2]\n")
        config = load_favorites_storage_config(path, runtime_root=_RUNTIME)
        self.assertEqual(config.backend, "file")
        self.assertEqual(config.key, "user_favorites")
        self.assertEqual(config.redis_url, "")

    def test_config_path_from_environ(self) -> None:
        path = self._write("favorites_storage:\n  backend: memory\n")
        config = load_favorites_storage_config(
            runtime_root=_RUNTIME, environ={FAVORITES_STORAGE_CONFIG_PATH_ENV: str(path)}
        )
        self.assertEqual(config.backend, "memory")

    def test_env_overrides(self) -> None:
        base = FavoritesStorageConfig(directory=_RUNTIME / "favorites")
        config = apply_env_overrides(
            base,
            {
                "FAVORITES_STORAGE_BACKEND": "Redis",
                "FAVORITES_STORAGE_KEY": "k2",
                "FAVORITES_STORAGE_DIR": "custom",
                "FAVORITES_REDIS_URL": "redis://localhost:6379/0",
                "FAVORITES_REDIS_TIMEOUT_S": "1.5",
            },
            runtime_root=_RUNTIME,
        )
        self.assertEqual(config.backend, "redis")
        self.assertEqual(config.key, "k2")
        self.assertEqual(config.directory, _RUNTIME / "custom")
        self.assertEqual(config.redis_url, "redis://localhost:6379/0")
        self.assertEqual(config.redis_timeout_s, 1.5)

    def test_empty_env_keeps_yaml(self) -> None:
        base = FavoritesStorageConfig(backend="memory")
        self.assertIs(apply_env_overrides(base, {"FAVORITES_STORAGE_BACKEND": ""}, runtime_root=_RUNTIME), base)

    def test_malformed_env_values_raise(self) -> None:
        base = FavoritesStorageConfig()
        with self.assertRaises(ValueError):
            apply_env_overrides(base, {"FAVORITES_STORAGE_BACKEND": "floppy"}, runtime_root=_RUNTIME)
        with self.assertRaises(ValueError):
            apply_env_overrides(base, {"FAVORITES_REDIS_TIMEOUT_S": "soon"}, runtime_root=_RUNTIME)


if __name__ == "__main__":
    unittest.main()
