import pytest_asyncio

from todo.infrastructure.redis_cache.pool import create_redis


@pytest_asyncio.fixture
async def redis_client():
    r = create_redis()
    try:
        yield r
    finally:
        await r.aclose()
