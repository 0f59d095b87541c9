from __future__ import annotations

from typing import Optional

from application.ports.key_value_store_port import KeyValueStorePort


class RedisKeyValueStore(KeyValueStorePort):
    """Redis-backed medium for deployments sharing favorites across processes.

    Keys are namespaced with `prefix`; values are stored as plain strings
    without expiry.
    """

    def __init__(self, *, redis_url: str, timeout_s: float = 5.0, prefix: str = "favorites:") -> None:
        try:
            import redis.asyncio as redis  # type: ignore[import-not-found]
        except ImportError as e:  # pragma: no cover
            raise ImportError(
                "Redis favorites storage requires the 'redis' package. "
                "Install it via: pip install redis"
            ) from e

        self._client = redis.from_url(
            redis_url,
            decode_responses=True,  # return str, not bytes
            socket_connect_timeout=timeout_s,
            socket_timeout=timeout_s,
        )
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> Optional[str]:
        return await self._client.get(self._key(key))

    async def set(self, key: str, value: str) -> None:
        await self._client.set(self._key(key), value)

    async def delete(self, key: str) -> bool:
        return bool(await self._client.delete(self._key(key)))

    async def close(self) -> None:
        await self._client.aclose()
