"""Game loop: guess, learn from mistakes, play again."""

from dataclasses import dataclass, field
from enum import StrEnum

from loguru import logger

from knowledge.learning import learn
from knowledge.model import Node
from knowledge.traversal import traverse

from .console import SessionIO


class GameOutcome(StrEnum):
    GUESSED = "guessed"
    LEARNED = "learned"


@dataclass
class SessionStats:
    """Counters for one run of play_session."""

    games: int = 0
    guessed: int = 0
    learned: list[str] = field(default_factory=list)

    def record(self, outcome: GameOutcome, animal: str | None = None) -> None:
        self.games += 1
        if outcome == GameOutcome.GUESSED:
            self.guessed += 1
        elif animal:
            self.learned.append(animal)


def play_game(root: Node, io: SessionIO) -> tuple[GameOutcome, str]:
    """
    Play one round against the tree rooted at root.

    Returns:
        Tuple of (outcome, animal); animal is the correct guess when
        GUESSED, or the newly learned animal when LEARNED.
    """
    leaf = traverse(root, io.ask_yes_no)
    guess = leaf.animal

    if io.ask_yes_no(f"Is it a {guess}?"):
        logger.info(f"SESSION: guessed {guess!r}")
        return GameOutcome.GUESSED, guess

    animal = io.ask("What is the animal I failed to find?")
    question = io.ask(f"What question can distinguish a {animal} from a {guess}?")
    is_yes = io.ask_yes_no(f"What answer is expected for a {animal}?")
    learn(leaf, animal, question, is_yes)
    return GameOutcome.LEARNED, animal


def play_session(
    root: Node, io: SessionIO, stats: SessionStats | None = None
) -> Node:
    """
    Play games until the player declines another one.

    The tree is mutated in place whenever a guess fails. Errors raised by
    io abort the session and propagate to the caller.

    Returns:
        The same root, ready to be saved.
    """
    stats = stats if stats is not None else SessionStats()
    again = True
    while again:
        with logger.contextualize(game=stats.games + 1):
            outcome, animal = play_game(root, io)
            stats.record(outcome, animal)
        again = io.ask_yes_no("Play another game?")

    logger.info(
        f"SESSION: finished after {stats.games} games "
        f"({stats.guessed} guessed, {len(stats.learned)} learned)"
    )
    return root
