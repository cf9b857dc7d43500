"""
mongolog - MongoDB sink for Loguru

Stores every log entry as a document with a time-ordered ObjectId,
level, origin, message and the bound extra data.
"""

from mongolog.sink import (
    ALL_LEVELS,
    ERROR_KEY,
    DescribableError,
    Level,
    LogEntry,
    LogRecord,
    LogStoreWriteError,
    MongoSink,
    as_error_description,
    register_panic_level,
    timed_object_id,
)

__version__ = "0.1.0"

__all__ = [
    "ALL_LEVELS",
    "ERROR_KEY",
    "DescribableError",
    "Level",
    "LogEntry",
    "LogRecord",
    "LogStoreWriteError",
    "MongoSink",
    "as_error_description",
    "register_panic_level",
    "timed_object_id",
]
