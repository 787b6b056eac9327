"""Grow the tree when a guess was wrong."""

from loguru import logger

from .exceptions import InvalidMutationError
from .model import Leaf, Node, Question


def learn(
    leaf: Node, new_animal: str, question: str, new_animal_is_yes: bool
) -> None:
    """
    Turn a leaf node into a question node distinguishing two animals.

    The old animal moves into a fresh leaf on the opposite branch of the
    new one. The node object itself is kept, so its parent keeps pointing
    at it and sees the question instead of the old guess.

    Args:
        leaf: The leaf reached by the failed guess
        new_animal: The animal the player was thinking of
        question: Question telling new_animal apart from the old animal
        new_animal_is_yes: Whether "yes" to question leads to new_animal

    Raises:
        InvalidMutationError: If leaf is not a leaf or an argument is empty.
    """
    if not isinstance(leaf.content, Leaf):
        raise InvalidMutationError(f"can only learn on a leaf, got {leaf!r}")
    if not new_animal:
        raise InvalidMutationError("new animal name must not be empty")
    if not question:
        raise InvalidMutationError("distinguishing question must not be empty")

    old_animal = leaf.content.animal
    new_leaf = Node.leaf(new_animal)
    other_leaf = Node.leaf(old_animal)

    if new_animal_is_yes:
        leaf.content = Question(question, no=other_leaf, yes=new_leaf)
    else:
        leaf.content = Question(question, no=new_leaf, yes=other_leaf)

    logger.info(
        f"LEARN: {question!r} yes={leaf.yes.animal!r} no={leaf.no.animal!r}"
    )
