from .errors import ERROR_KEY, DescribableError, LogStoreWriteError, as_error_description
from .hook import MongoSink
from .levels import ALL_LEVELS, Level, register_panic_level
from .record import LogEntry, LogRecord, timed_object_id

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
