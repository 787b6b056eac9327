"""Repository for knowledge base file access.

Loads and saves the decision tree as pretty-printed JSON records.
"""

import json
from pathlib import Path

from loguru import logger

from knowledge.model import Node

from .exceptions import DatabaseParseError, DatabaseReadError, DatabaseWriteError
from .records import MAX_DEPTH, InvalidRecordError, dump_tree, node_from_data, tree_depth


class KnowledgeBase:
    """
    File-backed storage for one decision tree.

    The tree itself is owned by the caller; this class only converts it
    to and from the database file.
    """

    def __init__(self, path: str | Path, *, indent: int = 4):
        self.path = Path(path)
        self.indent = indent

    @staticmethod
    def create(default_animal: str) -> Node:
        """Create a fresh tree holding a single default guess."""
        root = Node.leaf(default_animal)
        logger.info(f"KNOWLEDGE_BASE: created new tree with {default_animal!r}")
        return root

    def load(self) -> Node:
        """
        Read and validate the tree stored at self.path.

        Raises:
            DatabaseReadError: If the file cannot be read
            DatabaseParseError: If the content is not a valid tree
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DatabaseReadError(self.path, str(e)) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise DatabaseParseError(self.path, f"invalid JSON: {e}") from e
        except RecursionError as e:
            raise DatabaseParseError(self.path, "tree is nested too deeply") from e

        try:
            root = node_from_data(data)
        except InvalidRecordError as e:
            raise DatabaseParseError(self.path, str(e)) from e

        logger.info(
            f"KNOWLEDGE_BASE: loaded {self.path} "
            f"({sum(1 for _ in root.iter_nodes())} nodes, {len(root.animals())} animals)"
        )
        return root

    def save(self, root: Node) -> None:
        """
        Write the tree to self.path, replacing any previous content.

        Trees deeper than MAX_DEPTH are refused before the file is touched,
        so a saved database can always be loaded again.

        Raises:
            DatabaseWriteError: If the tree is too deep or cannot be written
        """
        depth = tree_depth(root)
        if depth > MAX_DEPTH:
            raise DatabaseWriteError(
                self.path, f"tree depth {depth} exceeds the limit of {MAX_DEPTH}"
            )

        content = self.dumps(root)
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise DatabaseWriteError(self.path, str(e)) from e

        logger.info(
            f"KNOWLEDGE_BASE: saved {self.path} ({len(root.animals())} animals, depth {depth})"
        )

    def dumps(self, root: Node) -> str:
        """Serialize a tree to the database text format."""
        return dump_tree(root, self.indent)
