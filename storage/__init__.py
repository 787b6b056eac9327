"""Knowledge base persistence."""

from .exceptions import (
    DatabaseError,
    DatabaseParseError,
    DatabaseReadError,
    DatabaseWriteError,
)
from .records import MAX_DEPTH, NodeKind, NodeRecord, dump_tree, node_from_data
from .repository import KnowledgeBase

__all__ = [
    "MAX_DEPTH",
    "DatabaseError",
    "DatabaseParseError",
    "DatabaseReadError",
    "DatabaseWriteError",
    "KnowledgeBase",
    "NodeKind",
    "NodeRecord",
    "dump_tree",
    "node_from_data",
]
