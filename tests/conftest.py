import logging

import pytest

from tests.fakes import FakeRedis, ListHandler
from todo.infrastructure.db.query_logger import QueryLogger, QueryLogLevel


@pytest.fixture()
def backend():
    """
    A logger outside the logging manager's tree, so tests never touch
    the process-wide database channel.
    """
    handler = ListHandler()
    logger = logging.Logger("test.database", level=logging.DEBUG)
    logger.addHandler(handler)
    return logger, handler


@pytest.fixture()
def query_logger(backend):
    logger, _ = backend
    return QueryLogger(logger, level=QueryLogLevel.DEBUG)


@pytest.fixture()
def fake_redis():
    return FakeRedis()
