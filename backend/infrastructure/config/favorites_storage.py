from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "favorites_storage.yaml"
FAVORITES_STORAGE_CONFIG_PATH_ENV = "FAVORITES_STORAGE_CONFIG_PATH"

SUPPORTED_BACKENDS = ("memory", "file", "redis")
DEFAULT_STORAGE_KEY = "user_favorites"
DEFAULT_REDIS_TIMEOUT_S = 5.0


@dataclass(frozen=True)
class FavoritesStorageConfig:
    backend: str = "file"
    key: str = DEFAULT_STORAGE_KEY
    directory: Path = Path("favorites")
    redis_url: str = ""
    redis_timeout_s: float = DEFAULT_REDIS_TIMEOUT_S


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return data if isinstance(data, dict) else {}


def _as_timeout(raw: Any, default: float) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _resolve_dir(raw: Any, runtime_root: Path) -> Path:
    text = str(raw).strip() if isinstance(raw, (str, Path)) else ""
    path = Path(text or "favorites").expanduser()
    return path if path.is_absolute() else runtime_root / path


def _normalize(data: Dict[str, Any], runtime_root: Path) -> FavoritesStorageConfig:
    section = data.get("favorites_storage", {})
    if not isinstance(section, dict):
        section = {}

    backend = str(section.get("backend") or "file").strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        backend = "file"

    key = section.get("key")
    key = key.strip() if isinstance(key, str) and key.strip() else DEFAULT_STORAGE_KEY

    redis_section = section.get("redis", {})
    if not isinstance(redis_section, dict):
        redis_section = {}
    redis_url = redis_section.get("url")

    return FavoritesStorageConfig(
        backend=backend,
        key=key,
        directory=_resolve_dir(section.get("directory"), runtime_root),
        redis_url=redis_url.strip() if isinstance(redis_url, str) else "",
        redis_timeout_s=_as_timeout(redis_section.get("timeout_s"), DEFAULT_REDIS_TIMEOUT_S),
    )


def load_favorites_storage_config(
    path: Path | None = None,
    *,
    runtime_root: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> FavoritesStorageConfig:
    """Read the YAML defaults; `environ` only decides which file to read."""
    if path is None:
        env_path = (environ or {}).get(FAVORITES_STORAGE_CONFIG_PATH_ENV)
        path = Path(env_path).expanduser() if env_path else _DEFAULT_CONFIG_PATH
    return _normalize(_load_yaml(path), runtime_root)


def apply_env_overrides(
    config: FavoritesStorageConfig,
    environ: Mapping[str, str],
    *,
    runtime_root: Path,
) -> FavoritesStorageConfig:
    """Overlay FAVORITES_* environment variables onto YAML defaults.

    Unlike YAML values, malformed env values are errors.
    """
    updates: Dict[str, Any] = {}

    backend = (environ.get("FAVORITES_STORAGE_BACKEND") or "").strip().lower()
    if backend:
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported FAVORITES_STORAGE_BACKEND: {backend!r}. "
                f"Supported values: {', '.join(SUPPORTED_BACKENDS)}"
            )
        updates["backend"] = backend

    key = (environ.get("FAVORITES_STORAGE_KEY") or "").strip()
    if key:
        updates["key"] = key

    directory = (environ.get("FAVORITES_STORAGE_DIR") or "").strip()
    if directory:
        updates["directory"] = _resolve_dir(directory, runtime_root)

    redis_url = (environ.get("FAVORITES_REDIS_URL") or "").strip()
    if redis_url:
        updates["redis_url"] = redis_url

    raw_timeout = (environ.get("FAVORITES_REDIS_TIMEOUT_S") or "").strip()
    if raw_timeout:
        try:
            updates["redis_timeout_s"] = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(
                f"FAVORITES_REDIS_TIMEOUT_S must be a number, got {raw_timeout!r}"
            ) from exc

    return replace(config, **updates) if updates else config


__all__ = [
    "FAVORITES_STORAGE_CONFIG_PATH_ENV",
    "FavoritesStorageConfig",
    "SUPPORTED_BACKENDS",
    "apply_env_overrides",
    "load_favorites_storage_config",
]
