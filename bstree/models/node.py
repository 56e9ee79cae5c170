"""
Node of an unbalanced binary search tree.
"""

import math
from dataclasses import KW_ONLY, dataclass
from enum import IntEnum
from numbers import Real
from typing import Any

from bstree.models.exceptions import InvalidKeyError


class Replacement(IntEnum):
    """Neighbour used to fill a node with two children on deletion."""

    SUCCESSOR = 0  # Minimum of the right subtree
    PREDECESSOR = 1  # Maximum of the left subtree


def check_key(key: Any) -> None:
    """
    Reject keys that cannot be ordered as numbers.

    Args:
        key: Candidate key.

    Raises:
        InvalidKeyError: If key is not a real number, is a bool, or is NaN.
    """
    if isinstance(key, bool) or not isinstance(key, Real):
        raise InvalidKeyError(key)
    if isinstance(key, float) and math.isnan(key):
        raise InvalidKeyError(key)


@dataclass(eq=False)
class Node:
    """
    Node in the binary search tree.

    A node owns its children. ``parent`` is a back-reference only; it is kept
    consistent by the imperative insert/delete operations and never set by the
    constructor, so building a node over subtrees shared with another tree
    leaves that tree's links intact.

    Children may be passed positionally, as in ``Node(5, left, right)``;
    ``value`` and ``parent`` are keyword-only.
    """

    key: Any
    left: "Node | None" = None
    right: "Node | None" = None
    _: KW_ONLY
    value: Any = None
    parent: "Node | None" = None

    def __post_init__(self) -> None:
        check_key(self.key)

    def __repr__(self) -> str:
        return f"Node({self.key!r})"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def detach(self) -> None:
        """Clear the links of this node and of every node below it."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
            node.left = None
            node.right = None
            node.parent = None
