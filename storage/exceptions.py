"""Knowledge base storage errors."""

from pathlib import Path

from knowledge.exceptions import AskAndLearnError


class DatabaseError(AskAndLearnError):
    """Base class for knowledge base storage failures."""

    action = "database error for"

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.action} {self.path}: {reason}")


class DatabaseReadError(DatabaseError):
    """Raised when the database file cannot be read."""

    action = "can not read db"


class DatabaseParseError(DatabaseError):
    """Raised when the database content is not a valid tree."""

    action = "can not parse db"


class DatabaseWriteError(DatabaseError):
    """Raised when the database cannot be serialized or written."""

    action = "can not write db"


__all__ = [
    "DatabaseError",
    "DatabaseParseError",
    "DatabaseReadError",
    "DatabaseWriteError",
]
