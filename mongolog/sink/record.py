import struct
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from bson import ObjectId

from .levels import Level


def timed_object_id(t: datetime) -> ObjectId:
    """
    New ObjectId whose timestamp part is taken from `t` instead of the clock.

    The remaining 8 bytes come from a regular ObjectId, so ids stay unique
    while sorting by the time of the log entry.
    """
    oid = bytearray(ObjectId().binary)
    oid[:4] = struct.pack(">I", int(t.timestamp()) & 0xFFFFFFFF)
    return ObjectId(bytes(oid))


def copy_value(value: Any) -> Any:
    """
    Copy dicts, lists, tuples and sets all the way down.

    Other objects (exceptions, datetimes, locks...) are shared as they are.
    """
    if isinstance(value, Mapping):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(copy_value(v) for v in value)
    if isinstance(value, set):
        return {copy_value(v) for v in value}
    return value


def copy_data(data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Independent copy of an entry's data; None becomes an empty dict."""
    if not data:
        return {}
    return copy_value(data)


@dataclass
class LogEntry:
    """A single log event as handed over by the logging framework."""
    timestamp: datetime
    level: Level
    message: str = ""
    data: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_loguru(cls, record: Mapping[str, Any]) -> "LogEntry":
        """Build an entry from a loguru record dict (message.record)."""
        level = record["level"]
        return cls(
            timestamp=record["time"],
            level=Level.from_loguru(level.name, level.no),
            message=record.get("message") or "",
            data=record.get("extra"),
        )


@dataclass
class LogRecord:
    """Document written to the log collection."""
    level: str
    message: str = ""
    origin: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    id: Optional[ObjectId] = None

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {}
        if self.id is not None:
            doc["_id"] = self.id
        doc["level"] = self.level
        if self.origin:
            doc["origin"] = self.origin
        doc["message"] = self.message
        doc["data"] = self.data
        return doc
