from __future__ import annotations

from typing import Any

import psycopg

from todo.infrastructure.db.query_logger import QueryLogLevel, QueryLogger


def _statement_text(query: Any) -> str:
    if isinstance(query, str):
        return query.strip()
    if isinstance(query, bytes):
        return query.decode("utf-8", errors="replace").strip()
    return repr(query)


def make_tracing_cursor(query_logger: QueryLogger) -> type[psycopg.AsyncCursor]:
    """
    Return a cursor class that traces statements through ``query_logger``.

    ``execute``, ``executemany`` and ``stream`` are traced. Statements are
    logged at INFO while SQL tracing is on and the logger's level lets INFO
    through. Failing statements are logged at ERROR and the driver error is
    re-raised.
    """

    def trace(query: Any, params: Any) -> None:
        if query_logger.is_show_sql() and query_logger.level() <= QueryLogLevel.INFO:
            query_logger.infof("[SQL] %s %s", _statement_text(query), params)

    def trace_failure(query: Any, exc: psycopg.Error) -> None:
        if query_logger.level() <= QueryLogLevel.ERR:
            query_logger.errorf("[SQL] %s failed: %s", _statement_text(query), exc)

    class TracingCursor(psycopg.AsyncCursor):
        async def execute(self, query: Any, params: Any = None, **kwargs: Any):
            trace(query, params)
            try:
                return await super().execute(query, params, **kwargs)
            except psycopg.Error as exc:
                trace_failure(query, exc)
                raise

        async def executemany(self, query: Any, params_seq: Any, **kwargs: Any):
            params_seq = list(params_seq)
            trace(query, params_seq)
            try:
                return await super().executemany(query, params_seq, **kwargs)
            except psycopg.Error as exc:
                trace_failure(query, exc)
                raise

        async def stream(self, query: Any, params: Any = None, **kwargs: Any):
            trace(query, params)
            try:
                async for record in super().stream(query, params, **kwargs):
                    yield record
            except psycopg.Error as exc:
                trace_failure(query, exc)
                raise

    return TracingCursor
