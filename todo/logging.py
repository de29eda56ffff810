import logging
import sys
import time
from datetime import datetime, timezone

from pythonjsonlogger.json import JsonFormatter


class UTCJsonFormatter(JsonFormatter):
    converter = time.gmtime


class DatabaseJsonFormatter(JsonFormatter):
    """JSON lines for the database channel, stamped in RFC3339 (UTC, microseconds)."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
            timespec="microseconds"
        )


DATABASE_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(UTCJsonFormatter(fmt))
    root.addHandler(handler)


def get_log_handler(target: str) -> logging.Handler:
    """
    Map a configured log target to a handler:
    "stdout" / "stderr" -> stream, "off" -> discard, anything else -> file path.
    """
    normalized = target.strip()
    if normalized.lower() in ("", "stdout"):
        return logging.StreamHandler(sys.stdout)
    if normalized.lower() == "stderr":
        return logging.StreamHandler(sys.stderr)
    if normalized.lower() == "off":
        return logging.NullHandler()
    return logging.FileHandler(normalized, encoding="utf-8")


def database_formatter() -> logging.Formatter:
    return DatabaseJsonFormatter(
        DATABASE_LOG_FORMAT, static_fields={"module": "DATABASE"}
    )
