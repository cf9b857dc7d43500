from abc import ABC, abstractmethod
from typing import Any, Optional

# Key in the entry data whose error value is stored as text.
ERROR_KEY = "error"


class DescribableError(ABC):
    """
    Contract for values that should be stored by their description when
    bound under the error key.

    Exceptions already satisfy it through str(); other objects opt in by
    subclassing and implementing describe().
    """

    @abstractmethod
    def describe(self) -> str:
        pass


def as_error_description(value: Any) -> Optional[str]:
    """Return the text form of an error-like value, or None for anything else."""
    if isinstance(value, DescribableError):
        return value.describe()
    if isinstance(value, BaseException):
        return str(value)
    return None


class LogStoreWriteError(Exception):
    """Raised when a log record could not be inserted into the store."""

    PREFIX = "failed to send log entry to store"

    def __init__(self, cause: BaseException):
        super().__init__(f"{self.PREFIX}: {cause}")
        self.cause = cause
