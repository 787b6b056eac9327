"""Line-oriented prompts on text streams."""

import sys
from typing import Protocol, TextIO

from loguru import logger

from .exceptions import InputClosedError, InputReadError

YES_ANSWERS = ("yes", "y")
NO_ANSWERS = ("no", "n")


class SessionIO(Protocol):
    """What the session driver needs from the player's terminal."""

    def ask(self, prompt: str) -> str: ...

    def ask_yes_no(self, prompt: str) -> bool: ...


class ConsoleIO:
    """
    Ask questions on an output stream and read answers line by line.

    Prompts are followed by a single space and no newline. Empty answers
    are asked again; yes/no questions are asked again until the answer is
    exactly one of "yes", "y", "no" or "n".
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        """Ask until a non-empty line is entered and return it."""
        while True:
            self._stdout.write(prompt + " ")
            self._stdout.flush()
            answer = self._read_line()
            if answer:
                return answer

    def ask_yes_no(self, prompt: str) -> bool:
        """Ask until the answer is yes/y (True) or no/n (False)."""
        while True:
            answer = self.ask(prompt)
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            logger.debug(f"CONSOLE: ignoring answer {answer!r} to {prompt!r}")

    def _read_line(self) -> str:
        try:
            line = self._stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"error when reading input: {e}") from e

        if line == "":
            raise InputClosedError()
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line
