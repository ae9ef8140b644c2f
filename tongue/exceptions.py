"""Custom exceptions for the tongue vocabulary manager"""

from pathlib import Path
from typing import Any


class TongueError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class StoreError(TongueError):
    """Base class for failures at the collection file boundary"""

    def __init__(
        self,
        message: str,
        path: Path | str,
        original_error: Exception | None = None,
    ):
        details: dict[str, Any] = {"path": str(path)}
        if original_error is not None:
            details["original_error"] = str(original_error)
        super().__init__(message, details)
        self.path = Path(path)
        self.original_error = original_error


class CollectionNotFoundError(StoreError):
    """Raised when the collection file does not exist yet"""

    def __init__(self, path: Path | str):
        super().__init__(f"Collection file '{path}' does not exist", path)


class CollectionReadError(StoreError):
    """Raised when the collection file exists but cannot be read"""

    def __init__(self, path: Path | str, original_error: Exception | None = None):
        super().__init__(
            f"Couldn't read collection file '{path}'", path, original_error
        )


class CollectionParseError(StoreError):
    """Raised when the collection file is not a valid list of entries"""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Couldn't parse collection file '{path}': {reason}", path)
        self.reason = reason


class CollectionWriteError(StoreError):
    """Raised when the collection cannot be serialized or written"""

    def __init__(self, path: Path | str, original_error: Exception | None = None):
        super().__init__(
            f"Couldn't write collection file '{path}'", path, original_error
        )


class SelectionError(TongueError):
    """Base class for lookups that cannot be satisfied"""


class IndexOutOfRangeError(SelectionError):
    """Raised when a 1-based index lies outside the collection"""

    def __init__(self, index: int, count: int):
        super().__init__(
            f"Warning: Your Database has {count} entries.\n"
            f"Please choose an index between 1 and {count}.",
        )
        self.index = index
        self.count = count


class EmptyCollectionError(SelectionError):
    """Raised when an entry is requested from an empty collection"""

    def __init__(self) -> None:
        super().__init__("Your database has no entries.")


class EntryValidationError(TongueError):
    """Raised when a new entry is rejected"""

    def __init__(self, field: str, value: str, reason: str):
        super().__init__(
            f"Invalid {field} term '{value}': {reason}",
            {"field": field, "value": value, "reason": reason},
        )
        self.field = field
        self.value = value
        self.reason = reason
