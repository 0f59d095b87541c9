import os
from pathlib import Path

from dotenv import load_dotenv

from infrastructure.config.favorites_storage import (
    FavoritesStorageConfig,
    apply_env_overrides,
    load_favorites_storage_config,
)

# 统一加载环境变量，确保配置来源一致。
# 项目根目录的 .env 优先级高于外部 shell 环境变量。
load_dotenv(override=True)


# ===== 基础路径设置 =====
#
# NOTE:
# - All backend code lives under `<repo>/backend/`.
# - Runtime artifacts (file-backed favorites) live under `<repo>/files/`.

INFRASTRUCTURE_DIR = Path(__file__).resolve().parent.parent  # backend/infrastructure/
_BACKEND_DIR = INFRASTRUCTURE_DIR.parent  # backend/

# Prefer repo root when the monorepo layout is detected; otherwise fall back to cwd
# (installed packages / container deployments).
if _BACKEND_DIR.name == "backend":
    PROJECT_ROOT = _BACKEND_DIR.parent
else:
    PROJECT_ROOT = Path.cwd()

RUNTIME_ROOT = Path(os.getenv("RUNTIME_ROOT", PROJECT_ROOT / "files")).expanduser()


# ===== 日志 =====

LOG_LEVEL = (os.getenv("FAVORITES_LOG_LEVEL") or "INFO").strip().upper()


# ===== 收藏存储（YAML 默认值 + 环境变量覆盖）=====


def get_favorites_storage_config() -> FavoritesStorageConfig:
    """Resolve storage config from the YAML defaults and the current environment."""
    base = load_favorites_storage_config(runtime_root=RUNTIME_ROOT, environ=os.environ)
    return apply_env_overrides(base, os.environ, runtime_root=RUNTIME_ROOT)


FAVORITES_STORAGE = get_favorites_storage_config()
