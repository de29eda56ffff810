from __future__ import annotations

from typing import Optional

from redis.asyncio import Redis

from todo.settings import get_settings

_client: Optional[Redis] = None


def create_redis(url: str | None = None) -> Redis:
    """
    Build a client for the query cache. Nothing connects until first use.
    Values are JSON text, so responses are decoded to str.
    """
    return Redis.from_url(
        url or get_settings().redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=30,
    )


def get_redis() -> Redis:
    """Shared client for the process, created on first call."""
    global _client
    if _client is None:
        _client = create_redis()
    return _client


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
