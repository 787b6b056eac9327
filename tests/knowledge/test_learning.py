"""Tests for knowledge/learning.py."""

import pytest

from knowledge.exceptions import InvalidMutationError
from knowledge.learning import learn
from knowledge.model import Node, Question


class TestLearn:
    def test_new_animal_on_yes_branch(self):
        leaf = Node.leaf("cat")
        learn(leaf, "dog", "Does it bark?", True)

        assert not leaf.is_leaf
        assert leaf.text == "Does it bark?"
        assert leaf.yes.animal == "dog"
        assert leaf.no.animal == "cat"

    def test_new_animal_on_no_branch(self):
        leaf = Node.leaf("cat")
        learn(leaf, "fish", "Does it have fur?", False)

        assert leaf.text == "Does it have fur?"
        assert leaf.no.animal == "fish"
        assert leaf.yes.animal == "cat"

    def test_identity_preserved_for_parent(self):
        child = Node.leaf("cat")
        parent = Node.question("Is it a pet?", no=Node.leaf("lion"), yes=child)

        learn(child, "dog", "Does it bark?", True)

        assert parent.yes is child
        assert parent.yes.text == "Does it bark?"
        assert parent.no.animal == "lion"

    def test_children_are_fresh_leaves(self):
        leaf = Node.leaf("cat")
        learn(leaf, "dog", "Does it bark?", True)

        assert isinstance(leaf.content, Question)
        assert leaf.no is not leaf
        assert leaf.yes is not leaf
        assert leaf.no.is_leaf and leaf.yes.is_leaf


class TestLearnPreconditions:
    def test_rejects_question_node(self):
        node = Node.question("Does it bark?", no=Node.leaf("cat"), yes=Node.leaf("dog"))
        with pytest.raises(InvalidMutationError, match="leaf"):
            learn(node, "cow", "Does it moo?", True)
        assert node.text == "Does it bark?"

    @pytest.mark.parametrize(
        "animal,question", [("", "Does it bark?"), ("dog", "")]
    )
    def test_rejects_empty_strings(self, animal, question):
        leaf = Node.leaf("cat")
        with pytest.raises(InvalidMutationError):
            learn(leaf, animal, question, True)
        assert leaf.animal == "cat"
