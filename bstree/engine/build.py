"""
Tree construction: insertion and building trees from key sequences.
"""

import logging
import random
from collections.abc import Sequence
from typing import Any

from bstree.models.exceptions import InvalidSequenceError
from bstree.models.node import Node, check_key

logger = logging.getLogger(__name__)


def insert(tree: Node | None, key: Any, value: Any = None) -> Node:
    """
    Insert key into the tree. O(h)

    Keys smaller than a visited node go left, all others go right, so an
    equal key is stored to the right of the existing one.

    Args:
        tree: Root of the tree, or None for an empty tree.
        key: Numeric key to insert.
        value: Optional satellite data stored with the key.

    Returns:
        Root of the resulting tree (the new node if tree was empty).

    Raises:
        InvalidKeyError: If key is not an orderable number.
    """
    return insert_node(tree, Node(key=key, value=value))


def insert_node(tree: Node | None, node: Node) -> Node:
    """Link a detached node into the tree and return the root."""
    parent = None
    current = tree

    while current is not None:
        parent = current
        if node.key < current.key:
            current = current.left
        else:
            current = current.right

    node.parent = parent
    if parent is None:
        logger.debug(f"Insert {node.key!r} as root")
        return node

    if node.key < parent.key:
        parent.left = node
        side = "left"
    else:
        parent.right = node
        side = "right"
    logger.debug(f"Insert {node.key!r} as {side} child of {parent.key!r}")
    return tree


def check_sequence(keys: Any) -> None:
    """
    Ensure keys is a sequence of valid keys.

    Raises:
        InvalidSequenceError: If keys is not a sequence (strings and bytes
            are not accepted).
        InvalidKeyError: If any element is not a valid key.
    """
    if isinstance(keys, (str, bytes, bytearray)) or not isinstance(keys, Sequence):
        raise InvalidSequenceError(keys)
    for key in keys:
        check_key(key)


def from_list(keys: Sequence[Any]) -> Node | None:
    """
    Build a tree by inserting every key, in order, into an empty tree.

    Every key is validated before the first insertion.

    Args:
        keys: Sequence of numeric keys.

    Returns:
        Root of the tree, or None for an empty sequence.
    """
    check_sequence(keys)

    tree = None
    for key in keys:
        tree = insert(tree, key)
    return tree


def from_list_random(keys: Sequence[Any], rng: random.Random | None = None) -> Node | None:
    """
    Build a tree from a shuffled copy of keys.

    Randomizing the insertion order keeps the expected height O(log n) even
    for sorted input. The input sequence is not modified.

    Args:
        keys: Sequence of numeric keys.
        rng: Random source, for reproducible builds.
    """
    check_sequence(keys)

    shuffled = list(keys)
    (rng or random.Random()).shuffle(shuffled)

    tree = None
    for key in shuffled:
        tree = insert(tree, key)
    return tree
