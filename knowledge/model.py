"""Decision tree data structures.

A Node is the slot the tree links to. Its content is exactly one of two
variants: a Leaf naming an animal, or a Question with a ``no`` and a
``yes`` child. Learning replaces the content of an existing Node, so
parent links never need to be rewired.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .exceptions import MalformedTreeError


@dataclass(frozen=True)
class Leaf:
    """An answer: the animal guessed when traversal ends here."""

    animal: str

    def __post_init__(self) -> None:
        if not isinstance(self.animal, str) or not self.animal:
            raise MalformedTreeError("leaf animal must be a non-empty string")


@dataclass(frozen=True)
class Question:
    """A yes/no question with one child per answer."""

    text: str
    no: "Node"
    yes: "Node"

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise MalformedTreeError("question text must be a non-empty string")
        if not isinstance(self.no, Node) or not isinstance(self.yes, Node):
            raise MalformedTreeError(
                f"question {self.text!r} needs both a 'no' and a 'yes' child"
            )


@dataclass
class Node:
    """A tree slot holding either a Leaf or a Question."""

    content: Leaf | Question

    @classmethod
    def leaf(cls, animal: str) -> "Node":
        return cls(Leaf(animal))

    @classmethod
    def question(cls, text: str, no: "Node", yes: "Node") -> "Node":
        return cls(Question(text, no=no, yes=yes))

    @property
    def is_leaf(self) -> bool:
        """True iff this node holds an animal and has no children."""
        return isinstance(self.content, Leaf)

    @property
    def animal(self) -> str | None:
        return self.content.animal if isinstance(self.content, Leaf) else None

    @property
    def text(self) -> str | None:
        return self.content.text if isinstance(self.content, Question) else None

    @property
    def no(self) -> "Node | None":
        return self.content.no if isinstance(self.content, Question) else None

    @property
    def yes(self) -> "Node | None":
        return self.content.yes if isinstance(self.content, Question) else None

    def iter_nodes(self) -> Iterator["Node"]:
        """Yield every node of the subtree in pre-order (no before yes)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node.content, Question):
                stack.append(node.content.yes)
                stack.append(node.content.no)

    def animals(self) -> list[str]:
        """Animal names of all leaves, in pre-order."""
        return [node.content.animal for node in self.iter_nodes() if node.is_leaf]

    def __repr__(self) -> str:
        if isinstance(self.content, Leaf):
            return f"Node(Leaf({self.content.animal!r}))"
        return f"Node(Question({self.content.text!r}))"


def check_tree(root: Node) -> None:
    """Verify that every node of the tree is well formed and singly owned.

    Raises:
        MalformedTreeError: on an invalid node, a shared node or a cycle.
    """
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, Node):
            raise MalformedTreeError(f"expected a Node, got {type(node).__name__}")
        if id(node) in seen:
            raise MalformedTreeError(f"{node!r} is reachable more than once")
        seen.add(id(node))

        content = node.content
        if isinstance(content, Leaf):
            # frozen dataclasses can still be patched with object.__setattr__
            Leaf(content.animal)
        elif isinstance(content, Question):
            Question(content.text, no=content.no, yes=content.yes)
            stack.append(content.yes)
            stack.append(content.no)
        else:
            raise MalformedTreeError(
                f"node content must be Leaf or Question, got {type(content).__name__}"
            )
