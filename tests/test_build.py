"""
Tests for tree construction: insert, from_list, random build and rebuild.
"""

import logging
import random

import pytest

from bstree.engine import (
    from_list,
    from_list_random,
    has_valid_parents,
    height,
    insert,
    is_bst,
    post_order,
    pre_order,
    rebuild,
    size,
    to_list,
)
from bstree.engine import build
from bstree.models import InvalidKeyError, InvalidSequenceError


class TestInsert:
    """Tests for insert."""

    def test_insert_into_empty(self):
        """Test that the first key becomes the root."""
        root = insert(None, 5)
        assert root.key == 5
        assert root.parent is None

    def test_insert_returns_same_root(self):
        """Test that inserting into a non-empty tree keeps the root."""
        root = insert(None, 5)
        assert insert(root, 3) is root
        assert insert(root, 8) is root

        assert root.left.key == 3
        assert root.right.key == 8
        assert root.left.parent is root
        assert root.right.parent is root

    def test_insert_value(self):
        """Test satellite data is stored with the key."""
        root = insert(None, 5, "five")
        assert root.value == "five"

    def test_duplicate_goes_right(self):
        """Test an equal key is stored in the right subtree."""
        root = from_list([5, 5])
        assert root.left is None
        assert root.right.key == 5
        assert root.right.parent is root

    def test_worked_example_shape(self, sample_tree):
        """Test the shape of the worked example tree."""
        assert sample_tree.key == 4
        assert sample_tree.left.key == 3
        assert sample_tree.left.left.key == 1
        assert sample_tree.left.left.right.key == 2
        assert sample_tree.right.key == 8
        assert sample_tree.right.left.key == 7
        assert sample_tree.right.right.key == 16
        assert sample_tree.right.right.left.key == 10
        assert list(pre_order(sample_tree)) == [4, 3, 1, 2, 8, 7, 16, 10, 9, 14]
        assert list(post_order(sample_tree)) == [2, 1, 3, 7, 9, 14, 10, 16, 8, 4]

    def test_invalid_key_leaves_tree_unchanged(self, sample_tree):
        """Test that a rejected key does not touch the tree."""
        with pytest.raises(InvalidKeyError):
            insert(sample_tree, "5")

        assert size(sample_tree) == 10
        assert has_valid_parents(sample_tree)

    def test_logs_child_slot(self, caplog):
        """Test each insert records where the key was linked."""
        with caplog.at_level(logging.DEBUG, logger="bstree.engine.build"):
            from_list([5, 3, 8])

        assert "Insert 5 as root" in caplog.text
        assert "Insert 3 as left child of 5" in caplog.text
        assert "Insert 8 as right child of 5" in caplog.text


class TestFromList:
    """Tests for from_list."""

    def test_empty(self):
        """Test that an empty sequence yields an empty tree."""
        assert from_list([]) is None
        assert from_list(()) is None

    def test_sequences(self):
        """Test that lists, tuples and ranges are accepted."""
        assert to_list(from_list([3, 1, 2])) == [1, 2, 3]
        assert to_list(from_list((3, 1, 2))) == [1, 2, 3]
        assert to_list(from_list(range(5, 0, -1))) == [1, 2, 3, 4, 5]

    def test_insertion_order(self):
        """Test that the first element becomes the root."""
        root = from_list([7, 3, 9])
        assert root.key == 7
        assert is_bst(root)
        assert has_valid_parents(root)

    def test_input_not_modified(self):
        """Test that the input list is left as is."""
        keys = [3, 1, 2]
        from_list(keys)
        assert keys == [3, 1, 2]

    @pytest.mark.parametrize("value", ["312", b"312", {3, 1, 2}, {3: 1}, 3, None, iter([1])])
    def test_not_a_sequence(self, value):
        """Test that non-sequences are rejected."""
        with pytest.raises(InvalidSequenceError):
            from_list(value)

    def test_invalid_element(self):
        """Test that one bad key rejects the whole sequence."""
        with pytest.raises(InvalidKeyError):
            from_list([1, 2, "3"])

    def test_sorted_input_is_degenerate(self):
        """Test sorted input builds a chain without hitting recursion limits."""
        keys = list(range(2000))
        root = from_list(keys)

        assert height(root) == 2000
        assert to_list(root) == keys
        assert is_bst(root)


class TestFromListRandom:
    """Tests for randomized construction."""

    def test_same_keys(self):
        """Test the random build holds the same keys."""
        keys = list(range(200))
        root = from_list_random(keys, random.Random(42))

        assert to_list(root) == keys
        assert keys == list(range(200))
        assert has_valid_parents(root)

    def test_reduces_height(self):
        """Test that shuffling avoids the degenerate chain."""
        root = from_list_random(list(range(200)), random.Random(7))
        assert height(root) < 60

    def test_reproducible(self):
        """Test that the same seed builds the same tree."""
        keys = list(range(50))
        first = from_list_random(keys, random.Random(3))
        second = from_list_random(keys, random.Random(3))
        assert list(pre_order(first)) == list(pre_order(second))

    def test_not_a_sequence(self):
        """Test that input is validated."""
        with pytest.raises(InvalidSequenceError):
            from_list_random({1, 2})

    def test_invalid_element(self):
        """Test a bad key is rejected before anything is built."""
        with pytest.raises(InvalidKeyError):
            from_list_random([1, 2, "3"])

    def test_validates_once(self, monkeypatch):
        """Test the input sequence is checked a single time."""
        calls = []
        check = build.check_sequence
        monkeypatch.setattr(build, "check_sequence", lambda keys: calls.append(keys) or check(keys))

        from_list_random([3, 1, 2], random.Random(0))
        assert len(calls) == 1


class TestRebuild:
    """Tests for rebuilding a tree from traversals."""

    def test_rebuild(self):
        """Test reconstruction gives the expected post-order."""
        root = rebuild([1, 2, 4, 3, 5, 6], [4, 2, 1, 5, 3, 6])

        assert list(post_order(root)) == [4, 2, 5, 6, 3, 1]
        assert has_valid_parents(root)

    def test_rebuild_bst(self, sample_tree):
        """Test a BST round-trips through its traversals."""
        root = rebuild(list(pre_order(sample_tree)), to_list(sample_tree))

        assert list(pre_order(root)) == list(pre_order(sample_tree))
        assert is_bst(root)

    def test_empty(self):
        """Test empty traversals rebuild the empty tree."""
        assert rebuild([], []) is None

    def test_length_mismatch(self):
        """Test traversals of different sizes are rejected."""
        with pytest.raises(ValueError):
            rebuild([1, 2], [1])

    def test_duplicate_keys(self):
        """Test repeated keys are rejected."""
        with pytest.raises(ValueError):
            rebuild([1, 1], [1, 1])

    def test_inconsistent(self):
        """Test traversals of different trees are rejected."""
        with pytest.raises(ValueError):
            rebuild([1, 2], [1, 3])
        with pytest.raises(ValueError):
            rebuild([1, 1, 2], [1, 2, 3])

    def test_missing_key(self):
        """Test a pre-order key absent from the in-order traversal is rejected."""
        with pytest.raises(ValueError):
            rebuild([1, 2, 3], [1, 2, 4])

    def test_degenerate(self):
        """Test a chain deeper than the recursion limit is rebuilt."""
        keys = list(range(3000))
        chain = from_list(keys)
        root = rebuild(list(pre_order(chain)), keys)

        assert height(root) == 3000
        assert list(pre_order(root)) == keys
        assert has_valid_parents(root)
