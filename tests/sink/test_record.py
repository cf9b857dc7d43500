from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from bson import ObjectId

from mongolog.sink.levels import Level
from mongolog.sink.record import LogEntry, LogRecord, copy_data, timed_object_id


T = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_timed_object_id_uses_entry_time():
    oid = timed_object_id(T)

    assert isinstance(oid, ObjectId)
    assert oid.generation_time == T
    assert oid.binary[:4] == int(T.timestamp()).to_bytes(4, "big")


def test_timed_object_id_sorts_by_timestamp():
    later = timed_object_id(T + timedelta(seconds=1))
    earlier = timed_object_id(T)

    assert earlier.binary[:4] < later.binary[:4]
    assert earlier < later


def test_timed_object_id_is_unique_for_same_time():
    assert timed_object_id(T) != timed_object_id(T)


def test_document_omits_empty_id_and_origin():
    record = LogRecord(level="info", message="", data={})

    assert record.to_document() == {"level": "info", "message": "", "data": {}}


def test_document_full():
    oid = ObjectId()
    record = LogRecord(id=oid, level="error", origin="system", message="disk full", data={"code": 42})

    assert record.to_document() == {
        "_id": oid,
        "level": "error",
        "origin": "system",
        "message": "disk full",
        "data": {"code": 42},
    }


def test_entry_from_loguru_record():
    record = {
        "time": T,
        "level": SimpleNamespace(name="WARNING", no=30),
        "message": "slow query",
        "extra": {"ms": 1200},
    }

    entry = LogEntry.from_loguru(record)

    assert entry.timestamp == T
    assert entry.level is Level.WARN
    assert entry.message == "slow query"
    assert entry.data == {"ms": 1200}


def test_copy_data_missing_mapping():
    assert copy_data(None) == {}
    assert copy_data({}) == {}


def test_copy_data_copies_containers():
    err = ValueError("x")
    data = {"ctx": {"ids": [1, 2], "seen": {3}}, "error": err}

    copied = copy_data(data)

    assert copied == data
    assert copied["ctx"] is not data["ctx"]
    assert copied["ctx"]["ids"] is not data["ctx"]["ids"]
    assert copied["ctx"]["seen"] is not data["ctx"]["seen"]
    assert copied["error"] is err
