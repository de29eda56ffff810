from __future__ import annotations

import json
from typing import Any, Optional

from redis.asyncio import Redis

from todo.infrastructure.db.query_logger import CacheLogLevel, CacheQueryLogger


class RedisQueryCache:
    """
    Query results cached per table, stored as JSON strings.

    Keys look like ``<prefix><table>:<key>``; ``clear`` drops one table.
    """

    def __init__(
        self,
        redis: Redis,
        logger: CacheQueryLogger,
        *,
        key_prefix: str = "qc:",
        ttl_seconds: int = 300,
    ) -> None:
        self._redis = redis
        self._logger = logger
        self._prefix = key_prefix
        self._ttl = ttl_seconds

    def _key(self, table: str, key: str) -> str:
        return f"{self._prefix}{table}:{key}"

    def _debug(self, fmt: str, *args: Any) -> None:
        if self._logger.level() <= CacheLogLevel.DEBUG:
            self._logger.debugf(fmt, *args)

    async def get(self, table: str, key: str) -> Optional[dict]:
        raw = await self._redis.get(self._key(table, key))
        if raw is None:
            self._debug("[cache] miss %s:%s", table, key)
            return None
        self._debug("[cache] hit %s:%s", table, key)
        return json.loads(raw)

    async def put(self, table: str, key: str, value: dict) -> None:
        await self._redis.set(self._key(table, key), json.dumps(value), ex=self._ttl)
        self._debug("[cache] put %s:%s", table, key)

    async def delete(self, table: str, key: str) -> None:
        await self._redis.delete(self._key(table, key))
        self._debug("[cache] delete %s:%s", table, key)

    async def clear(self, table: str) -> int:
        """Drop every cached entry of ``table``. Returns the number of keys removed."""
        keys = [k async for k in self._redis.scan_iter(match=f"{self._prefix}{table}:*")]
        if not keys:
            return 0
        removed = await self._redis.delete(*keys)
        self._debug("[cache] cleared %s (%s keys)", table, removed)
        return int(removed)
