"""Interactive guessing sessions."""

from .console import ConsoleIO, SessionIO
from .exceptions import InputClosedError, InputError, InputReadError
from .session import GameOutcome, SessionStats, play_game, play_session

__all__ = [
    "ConsoleIO",
    "GameOutcome",
    "InputClosedError",
    "InputError",
    "InputReadError",
    "SessionIO",
    "SessionStats",
    "play_game",
    "play_session",
]
