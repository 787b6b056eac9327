"""Decision tree knowledge base: model, traversal and learning."""

from .exceptions import (
    AskAndLearnError,
    InvalidMutationError,
    KnowledgeError,
    MalformedTreeError,
)
from .learning import learn
from .model import Leaf, Node, Question, check_tree
from .traversal import AnswerProvider, traverse

__all__ = [
    "AnswerProvider",
    "AskAndLearnError",
    "InvalidMutationError",
    "KnowledgeError",
    "Leaf",
    "MalformedTreeError",
    "Node",
    "Question",
    "check_tree",
    "learn",
    "traverse",
]
