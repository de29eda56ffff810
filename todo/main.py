from contextlib import asynccontextmanager

from fastapi import FastAPI

from todo.infrastructure.db.pool import close_pool, get_pool
from todo.infrastructure.db.query_logger import CacheQueryLogger, create_query_logger
from todo.infrastructure.redis_cache.pool import close_redis, get_redis
from todo.infrastructure.redis_cache.query_cache import RedisQueryCache
from todo.logging import setup_logging
from todo.presentation.api import api
from todo.presentation.errors import register_error_handlers
from todo.settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    query_logger = create_query_logger(settings)
    app.state.query_logger = query_logger

    pool = get_pool(query_logger)
    if getattr(pool, "closed", True):
        await pool.open()

    # The cache reads the same logger through its own level enumeration
    app.state.query_cache = RedisQueryCache(
        get_redis(),
        CacheQueryLogger(query_logger),
        ttl_seconds=settings.query_cache_ttl_seconds,
    )

    try:
        yield
    finally:
        # shutdown
        await close_redis()
        await close_pool()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title="Todo API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    register_error_handlers(app)
    app.include_router(api)
    return app


app = create_app()
