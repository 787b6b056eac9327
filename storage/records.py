"""On-disk knowledge base format.

Each tree node is stored as a JSON object with the fields ``Kind``,
``Animal``, ``Question``, ``No`` and ``Yes``. Leaves carry ``Animal`` and
null children; questions carry ``Question`` and both children. Records
written without ``Kind`` are classified by whether ``Animal`` is set.

Nodes are validated one record at a time and trees are converted with
explicit stacks, so a tree's depth is bounded only by MAX_DEPTH.
"""

import json
from enum import StrEnum
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from knowledge.model import Leaf, Node, Question

# Deepest tree (in questions from root to leaf) that save() writes and
# load() reads; json.loads needs one interpreter recursion level per node.
MAX_DEPTH = 500


class NodeKind(StrEnum):
    leaf = "leaf"
    question = "question"


class InvalidRecordError(ValueError):
    """Raised when a stored record does not describe a valid node."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"{location}: {reason}")


class NodeRecord(BaseModel):
    """One tree node as stored on disk; children stay raw JSON values."""

    kind: NodeKind | None = Field(None, alias="Kind")
    animal: str = Field("", alias="Animal")
    question: str = Field("", alias="Question")
    no: dict[str, Any] | None = Field(None, alias="No")
    yes: dict[str, Any] | None = Field(None, alias="Yes")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("animal", "question", mode="before")
    @classmethod
    def coerce_none_str(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v

    @model_validator(mode="after")
    def check_shape(self) -> Self:
        if self.animal:
            if self.question:
                raise ValueError(
                    f"record for {self.animal!r} has both an animal and a question"
                )
            if self.no is not None or self.yes is not None:
                raise ValueError(f"leaf record {self.animal!r} has children")
            inferred = NodeKind.leaf
        else:
            if not self.question:
                raise ValueError("record has neither an animal nor a question")
            if self.no is None or self.yes is None:
                raise ValueError(
                    f"question record {self.question!r} is missing a child"
                )
            inferred = NodeKind.question

        if self.kind is not None and self.kind != inferred:
            raise ValueError(
                f"record is tagged {self.kind.value!r} but shaped like a {inferred.value}"
            )
        self.kind = inferred
        return self


def _validate(data: Any, location: str) -> NodeRecord:
    try:
        return NodeRecord.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        reason = f"{field}: {first['msg']}" if field else first["msg"]
        raise InvalidRecordError(location, reason) from e


def node_from_data(data: Any) -> Node:
    """
    Build a Node tree from decoded JSON records.

    Raises:
        InvalidRecordError: On the first malformed record (pre-order), or
            when the tree is deeper than MAX_DEPTH.
    """
    records: list[NodeRecord] = []
    children: list[tuple[int, int] | None] = []
    # (raw record, location, parent index, is the parent's yes child, depth)
    pending: list[tuple[Any, str, int, bool, int]] = [(data, "root", -1, False, 0)]
    while pending:
        raw, location, parent, is_yes, depth = pending.pop()
        if depth > MAX_DEPTH:
            raise InvalidRecordError(location, f"tree is deeper than {MAX_DEPTH}")
        record = _validate(raw, location)

        index = len(records)
        records.append(record)
        children.append(None)
        if parent >= 0:
            no_index, yes_index = children[parent] or (-1, -1)
            children[parent] = (no_index, index) if is_yes else (index, yes_index)

        if record.kind == NodeKind.question:
            pending.append((record.yes, f"{location}.Yes", index, True, depth + 1))
            pending.append((record.no, f"{location}.No", index, False, depth + 1))

    # Children always come after their parent, so build back to front.
    nodes: list[Node | None] = [None] * len(records)
    for index in range(len(records) - 1, -1, -1):
        record = records[index]
        if record.kind == NodeKind.leaf:
            nodes[index] = Node(Leaf(record.animal))
        else:
            no_index, yes_index = children[index]
            nodes[index] = Node(
                Question(record.question, no=nodes[no_index], yes=nodes[yes_index])
            )
    return nodes[0]


def tree_depth(root: Node) -> int:
    """Number of questions on the longest path from root to a leaf."""
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(node.content, Question):
            stack.append((node.content.no, depth + 1))
            stack.append((node.content.yes, depth + 1))
    return deepest


def dump_tree(root: Node, indent: int = 4) -> str:
    """Serialize a tree to JSON text, pretty-printed unless indent is 0."""
    newline = "\n" if indent else ""
    colon = ": " if indent else ":"

    def key(name: str, level: int) -> str:
        return f"{newline}{' ' * (indent * (level + 1))}{json.dumps(name)}{colon}"

    def text(value: str) -> str:
        return json.dumps(value, ensure_ascii=False)

    parts: list[str] = []
    stack: list[str | tuple[Node, int]] = [(root, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        node, level = item
        close = f"{newline}{' ' * (indent * level)}}}"
        content = node.content
        if isinstance(content, Leaf):
            parts.append(
                f"{{{key('Kind', level)}{text(NodeKind.leaf.value)},"
                f"{key('Animal', level)}{text(content.animal)},"
                f"{key('Question', level)}{text('')},"
                f"{key('No', level)}null,"
                f"{key('Yes', level)}null{close}"
            )
            continue

        parts.append(
            f"{{{key('Kind', level)}{text(NodeKind.question.value)},"
            f"{key('Animal', level)}{text('')},"
            f"{key('Question', level)}{text(content.text)},"
            f"{key('No', level)}"
        )
        stack.append(close)
        stack.append((content.yes, level + 1))
        stack.append(f",{key('Yes', level)}")
        stack.append((content.no, level + 1))
    return "".join(parts)
