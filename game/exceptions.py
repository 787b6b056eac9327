"""Errors reading the player's answers."""

from knowledge.exceptions import AskAndLearnError


class InputError(AskAndLearnError):
    """Base class for failures reading the player's answers."""


class InputClosedError(InputError):
    """Raised when the input stream ends before an answer was given."""

    def __init__(self) -> None:
        super().__init__("input stream closed while waiting for an answer")


class InputReadError(InputError):
    """Raised when reading from the input stream fails."""


__all__ = ["InputClosedError", "InputError", "InputReadError"]
