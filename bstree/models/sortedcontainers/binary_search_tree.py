"""
Unbalanced binary search tree implementation of SortedContainer.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from bstree.engine.build import insert
from bstree.engine.deletion import delete_node
from bstree.engine.query import maximum, minimum, pred, search, succ
from bstree.engine.traversal import range_nodes
from bstree.engine.validation import has_valid_parents, is_bst
from bstree.interfaces.sorted_container import SortedContainer
from bstree.models.node import Node, Replacement, check_key

logger = logging.getLogger(__name__)


class BinarySearchTree(SortedContainer):
    """
    Keyed container over the imperative BST engine.

    No rebalancing is done: operations are O(h), which degrades to O(N) for
    keys inserted in sorted order.
    """

    def __init__(
        self,
        items: Iterable[tuple[Any, Any]] | None = None,
        replacement: Replacement = Replacement.SUCCESSOR,
    ) -> None:
        """
        Initialize the tree.

        Args:
            items: Optional (key, value) pairs to put, in order.
            replacement: Neighbour that fills a deleted node with two children.
        """
        self._root: Node | None = None
        self._size: int = 0
        self._replacement = replacement

        if items is not None:
            for key, value in items:
                self.put(key, value)

    @property
    def root(self) -> Node | None:
        return self._root

    def put(self, key: Any, value: Any = None) -> None:
        """Insert or update a key-value pair. O(h)"""
        check_key(key)

        node = search(self._root, key)
        if node is not None:
            node.value = value
            return

        self._root = insert(self._root, key, value)
        self._size += 1

    def get(self, key: Any) -> Any | None:
        node = search(self._root, key)
        return node.value if node else None

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(h)"""
        node = search(self._root, key)
        if node is None:
            return False

        logger.debug(f"Delete {key!r} ({self._size} entries)")
        self._root = delete_node(self._root, node, self._replacement)
        self._size -= 1
        return True

    def has(self, key: Any) -> bool:
        return search(self._root, key) is not None

    def size(self) -> int:
        return self._size

    def min_key(self) -> Any | None:
        return minimum(self._root)

    def max_key(self) -> Any | None:
        return maximum(self._root)

    def successor(self, key: Any) -> Any | None:
        node = self._find_node(key)
        following = succ(node)
        return following.key if following else None

    def predecessor(self, key: Any) -> Any | None:
        node = self._find_node(key)
        preceding = pred(node)
        return preceding.key if preceding else None

    def keys(self) -> list[Any]:
        return [key for key, _ in self]

    def values(self) -> list[Any]:
        return [value for _, value in self]

    def items(self) -> list[tuple[Any, Any]]:
        return list(self)

    def clear(self) -> None:
        """Remove every entry, detaching all nodes."""
        if self._root is not None:
            self._root.detach()
        self._root = None
        self._size = 0

    def validate(self) -> bool:
        """Check the ordering and parent-link invariants."""
        return is_bst(self._root) and has_valid_parents(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(self, low: Any = None, high: Any = None) -> Iterator[tuple[Any, Any]]:
        return ((node.key, node.value) for node in range_nodes(self._root, low, high))

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.items()!r})"

    def _find_node(self, key: Any) -> Node:
        node = search(self._root, key)
        if node is None:
            raise KeyError(key)
        return node
