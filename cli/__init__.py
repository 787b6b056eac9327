"""Command-line interface for ask-and-learn."""

from .main import main, run

__all__ = ["main", "run"]
