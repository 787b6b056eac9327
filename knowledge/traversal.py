"""Walk the decision tree from the root down to a guess."""

from collections.abc import Callable

from loguru import logger

from .model import Node, Question

AnswerProvider = Callable[[str], bool]


def traverse(root: Node, ask: AnswerProvider) -> Node:
    """Follow the player's answers from root until a leaf is reached.

    Args:
        root: Root of the decision tree
        ask: Returns True for "yes" to the given question text

    Returns:
        The reached leaf Node itself (not a copy), so callers can mutate it.
    """
    node = root
    depth = 0
    while isinstance(node.content, Question):
        question = node.content
        answer = ask(question.text)
        logger.debug(
            f"TRAVERSE: depth={depth} question={question.text!r} answer={answer}"
        )
        node = question.yes if answer else question.no
        depth += 1

    logger.debug(f"TRAVERSE: reached leaf {node.content.animal!r} at depth {depth}")
    return node
