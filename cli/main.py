"""Command-line entry point: load the knowledge base, play, save."""

import argparse
import sys
from typing import TextIO

from loguru import logger
from pydantic import ValidationError

from config.logging_config import SHOWN_TO_USER, configure_logging
from config.settings import get_settings
from game.console import ConsoleIO
from game.session import SessionStats, play_session
from knowledge.exceptions import AskAndLearnError
from storage.repository import KnowledgeBase

PROG = "ask-and-learn"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [-c] database-file",
        description="Guess the animal you are thinking of, and learn from mistakes.",
    )
    parser.add_argument(
        "-c",
        "--create",
        action="store_true",
        help="create new DB instead of loading an existing one",
    )
    parser.add_argument("database", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one ask-and-learn session and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.database) != 1:
        print("database expected", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1
    db_path = args.database[0]

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_file, settings.log_level)

    knowledge_base = KnowledgeBase(db_path, indent=settings.json_indent)
    stats = SessionStats()
    with logger.contextualize(db_path=db_path):
        try:
            if args.create:
                root = knowledge_base.create(settings.default_animal)
            else:
                root = knowledge_base.load()
            play_session(root, ConsoleIO(stdin, stdout), stats)
            knowledge_base.save(root)
        except AskAndLearnError as e:
            logger.bind(**{SHOWN_TO_USER: True}).error(f"CLI: {type(e).__name__}: {e}")
            print(f"error: {e}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            logger.warning(
                f"CLI: interrupted after {stats.games} games, changes not saved"
            )
            print(file=sys.stderr)
            return 130

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
