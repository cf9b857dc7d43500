import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
from loguru import logger
from pymongo.collection import Collection

from mongolog.sink import Level, LogEntry


@pytest.fixture
def collection():
    """Stand-in for a pymongo collection; inserted documents land in `.docs`."""
    coll = MagicMock(spec=Collection)
    coll.docs = []
    coll.insert_one.side_effect = lambda doc: coll.docs.append(doc)
    return coll


@pytest.fixture
def make_entry():
    def _make(level=Level.INFO, message="hello", data=None, timestamp=None):
        return LogEntry(
            timestamp=timestamp or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc),
            level=level,
            message=message,
            data=data,
        )
    return _make


@pytest.fixture
def clean_logger():
    """Remove every loguru handler before and after the test."""
    logger.remove()
    yield logger
    logger.remove()
