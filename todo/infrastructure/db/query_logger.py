from __future__ import annotations

import logging
import threading
from enum import IntEnum
from typing import Any, Optional

from todo.logging import database_formatter, get_log_handler
from todo.settings import Settings

logger = logging.getLogger(__name__)

DATABASE_CHANNEL = "todo.database"

# The backend knows one level the stdlib does not ship.
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

_BACKEND_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "NOTICE": NOTICE,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


class QueryLogLevel(IntEnum):
    """Levels the database driver reads from its logger."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERR = 3
    OFF = 4
    UNKNOWN = 5


class CacheLogLevel(IntEnum):
    """Levels the query cache reads from its logger."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERR = 3
    OFF = 4
    UNKNOWN = 5


# CRITICAL has no counterpart and narrows to ERR, NOTICE narrows to WARNING.
_QUERY_LEVEL_BY_BACKEND: dict[int, QueryLogLevel] = {
    logging.CRITICAL: QueryLogLevel.ERR,
    logging.ERROR: QueryLogLevel.ERR,
    logging.WARNING: QueryLogLevel.WARNING,
    NOTICE: QueryLogLevel.WARNING,
    logging.INFO: QueryLogLevel.INFO,
    logging.DEBUG: QueryLogLevel.DEBUG,
}

_CACHE_BY_QUERY: dict[QueryLogLevel, CacheLogLevel] = {
    QueryLogLevel.DEBUG: CacheLogLevel.DEBUG,
    QueryLogLevel.INFO: CacheLogLevel.INFO,
    QueryLogLevel.WARNING: CacheLogLevel.WARNING,
    QueryLogLevel.ERR: CacheLogLevel.ERR,
    QueryLogLevel.OFF: CacheLogLevel.OFF,
    QueryLogLevel.UNKNOWN: CacheLogLevel.UNKNOWN,
}

_QUERY_BY_CACHE: dict[CacheLogLevel, QueryLogLevel] = {
    cache: query for query, cache in _CACHE_BY_QUERY.items()
}


def resolve_backend_level(name: str) -> Optional[int]:
    """Case-insensitive lookup of a backend level name. None if unknown."""
    if not isinstance(name, str):
        return None
    return _BACKEND_LEVELS.get(name.strip().upper())


def query_level_for_backend(level: Optional[int]) -> QueryLogLevel:
    return _QUERY_LEVEL_BY_BACKEND.get(level, QueryLogLevel.OFF)


def to_cache_level(level: Any) -> CacheLogLevel:
    if isinstance(level, bool) or not isinstance(level, int):
        return CacheLogLevel.UNKNOWN
    return _CACHE_BY_QUERY.get(level, CacheLogLevel.UNKNOWN)


def from_cache_level(level: Any) -> QueryLogLevel:
    if isinstance(level, bool) or not isinstance(level, int):
        return QueryLogLevel.UNKNOWN
    return _QUERY_BY_CACHE.get(level, QueryLogLevel.UNKNOWN)


def _join(values: tuple) -> str:
    return " ".join(str(v) for v in values)


class QueryLogger:
    """
    Logger handed to the database layer.

    Log calls go straight to the wrapped ``logging.Logger``; the backend's own
    level decides what is written. ``level()`` is what the driver reads to
    decide what it bothers to emit.
    """

    def __init__(
        self,
        logger: logging.Logger,
        level: QueryLogLevel = QueryLogLevel.OFF,
        show_sql: bool = True,
    ) -> None:
        self._logger = logger
        self._level = level
        self._show_sql = show_sql
        self._lock = threading.Lock()

    @property
    def backend(self) -> logging.Logger:
        return self._logger

    def debug(self, *values: Any) -> None:
        self._logger.debug(_join(values))

    def debugf(self, fmt: str, *args: Any) -> None:
        self._logger.debug(fmt, *args)

    def info(self, *values: Any) -> None:
        self._logger.info(_join(values))

    def infof(self, fmt: str, *args: Any) -> None:
        self._logger.info(fmt, *args)

    def warn(self, *values: Any) -> None:
        self._logger.warning(_join(values))

    def warnf(self, fmt: str, *args: Any) -> None:
        self._logger.warning(fmt, *args)

    def error(self, *values: Any) -> None:
        self._logger.error(_join(values))

    def errorf(self, fmt: str, *args: Any) -> None:
        self._logger.error(fmt, *args)

    def level(self) -> QueryLogLevel:
        with self._lock:
            return self._level

    def set_level(self, level: QueryLogLevel) -> None:
        with self._lock:
            self._level = level

    def show_sql(self, *show: bool) -> None:
        """Set whether SQL statements are traced. No argument leaves it as is."""
        if show:
            with self._lock:
                self._show_sql = bool(show[0])

    def is_show_sql(self) -> bool:
        with self._lock:
            return self._show_sql


class CacheQueryLogger:
    """
    The same logger, seen through the cache's level enumeration.

    Shares backend and level with the wrapped ``QueryLogger``.
    """

    def __init__(self, query_logger: QueryLogger) -> None:
        self._inner = query_logger

    def __getattr__(self, name: str) -> Any:
        return getattr(self._inner, name)

    def level(self) -> CacheLogLevel:
        return to_cache_level(self._inner.level())

    def set_level(self, level: CacheLogLevel) -> None:
        self._inner.set_level(from_cache_level(level))


_registration_lock = threading.Lock()


def create_query_logger(
    settings: Settings,
    *,
    handler: Optional[logging.Handler] = None,
    channel: str = DATABASE_CHANNEL,
) -> QueryLogger:
    """
    Build the database logger and register its channel.

    The channel's handler and formatter are attached once per process; later
    calls reuse them and close any ``handler`` they were given. With
    ``log_database`` off the channel discards everything, whatever handler
    was passed. An unknown ``log_database_level`` is reported at CRITICAL and
    leaves the channel level unset.
    """
    backend_level = resolve_backend_level(settings.log_database_level)
    if backend_level is None:
        logger.critical(
            "Error setting database log level: %s",
            f"invalid log level {settings.log_database_level!r}",
        )

    channel_logger = logging.getLogger(channel)
    unused: Optional[logging.Handler] = None
    with _registration_lock:
        if channel_logger.handlers:
            unused = handler
        else:
            if not settings.log_database:
                unused, handler = handler, logging.NullHandler()
            elif handler is None:
                handler = get_log_handler(settings.log_database_target)
            handler.setFormatter(database_formatter())
            channel_logger.addHandler(handler)
            channel_logger.propagate = False
        channel_logger.setLevel(
            backend_level if backend_level is not None else logging.NOTSET
        )

    if unused is not None:
        unused.close()

    return QueryLogger(channel_logger, level=query_level_for_backend(backend_level))
