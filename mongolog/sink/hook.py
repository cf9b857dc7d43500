from typing import Any, FrozenSet, Mapping

from bson.errors import BSONError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .errors import ERROR_KEY, LogStoreWriteError, as_error_description
from .levels import ALL_LEVELS, Level
from .record import LogEntry, LogRecord, copy_data, timed_object_id


class MongoSink:
    """
    Loguru sink that writes every log entry into a MongoDB collection.

    Each entry becomes one document:
        {_id, level, origin, message, data}
    where `data` is a copy of the values bound with logger.bind() / extra.

    Usage:
        sink = MongoSink("system", client["app"]["logs"])
        logger.add(sink, filter=sink.accepts)

    The collection handle is owned by the caller, the sink never opens or
    closes connections. Writes are synchronous; failures are raised as
    LogStoreWriteError and never retried.
    """

    def __init__(self, origin: str, collection: Collection):
        self._origin = origin
        self._collection = collection

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def collection(self) -> Collection:
        return self._collection

    def levels(self) -> FrozenSet[Level]:
        """Severities this sink wants to receive: all of them."""
        return ALL_LEVELS

    def accepts(self, record: Mapping[str, Any]) -> bool:
        """Loguru filter callable based on levels()."""
        level = record["level"]
        return Level.from_loguru(level.name, level.no) in self.levels()

    def deliver(self, entry: LogEntry) -> None:
        """
        Build the document for `entry` and insert it.

        The entry (and its data mapping) is never modified; the error key is
        rewritten on the record's own copy.
        """
        data = copy_data(entry.data)
        if ERROR_KEY in data:
            description = as_error_description(data[ERROR_KEY])
            if description is not None:
                data[ERROR_KEY] = description

        record = LogRecord(
            id=timed_object_id(entry.timestamp),
            level=entry.level.value,
            origin=self._origin,
            message=entry.message or "",
            data=data,
        )
        try:
            self._collection.insert_one(record.to_document())
        except (PyMongoError, BSONError) as e:
            raise LogStoreWriteError(e) from e

    def __call__(self, message) -> None:
        """Loguru entry point: `message.record` holds the log record."""
        self.deliver(LogEntry.from_loguru(message.record))

    def __repr__(self):
        return f"MongoSink(origin={self._origin!r}, collection={self._collection!r})"
