"""Exception hierarchy for the decision tree.

AskAndLearnError is the common base; storage and game define their own
subclasses in storage.exceptions and game.exceptions.
"""


class AskAndLearnError(Exception):
    """Base exception for all ask-and-learn errors."""


class KnowledgeError(AskAndLearnError):
    """Raised when the decision tree itself is misused or inconsistent."""


class MalformedTreeError(KnowledgeError):
    """Raised when a node is neither a well-formed leaf nor a question."""


class InvalidMutationError(KnowledgeError):
    """Raised when learn() is called outside its preconditions."""


__all__ = [
    "AskAndLearnError",
    "InvalidMutationError",
    "KnowledgeError",
    "MalformedTreeError",
]
