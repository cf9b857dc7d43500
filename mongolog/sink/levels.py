from enum import Enum
from functools import total_ordering
from typing import Dict, FrozenSet


@total_ordering
class Level(Enum):
    """
    Severity levels understood by the Mongo sink.

    Ordered from least to most severe:
        DEBUG < INFO < WARN < ERROR < FATAL < PANIC
    The value is the name stored in the `level` field of each document.
    """
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self):
        return self.value

    @classmethod
    def from_loguru(cls, name: str, no: int = 0) -> "Level":
        """
        Map a loguru level to a sink level.

        Built-in loguru names are mapped by name. Custom levels fall back on
        their severity number, using loguru's own thresholds.
        """
        level = _LOGURU_NAMES.get(name.upper())
        if level is not None:
            return level
        if no >= 60:
            return cls.PANIC
        if no >= 50:
            return cls.FATAL
        if no >= 40:
            return cls.ERROR
        if no >= 30:
            return cls.WARN
        if no >= 20:
            return cls.INFO
        return cls.DEBUG


_RANKS: Dict[Level, int] = {level: i for i, level in enumerate(Level)}

_LOGURU_NAMES: Dict[str, Level] = {
    "TRACE": Level.DEBUG,
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "SUCCESS": Level.INFO,
    "WARNING": Level.WARN,
    "ERROR": Level.ERROR,
    "CRITICAL": Level.FATAL,
    "PANIC": Level.PANIC,
}

ALL_LEVELS: FrozenSet[Level] = frozenset(Level)

PANIC_LEVEL_NAME = "PANIC"
PANIC_LEVEL_NO = 60


def register_panic_level(logger) -> None:
    """Add the PANIC level to a loguru logger, once."""
    try:
        logger.level(PANIC_LEVEL_NAME)
    except ValueError:
        logger.level(PANIC_LEVEL_NAME, no=PANIC_LEVEL_NO, color="<RED><bold>")
