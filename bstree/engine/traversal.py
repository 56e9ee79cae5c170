"""
Tree traversals.

All walks use an explicit stack, so a degenerate tree (built from sorted
input) is walked without touching the recursion limit. Every generator
returned here is lazy and can be restarted by calling the function again.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from bstree.engine.build import check_sequence, from_list
from bstree.engine.query import min_node, succ
from bstree.models.exceptions import InvalidVisitorError
from bstree.models.node import Node


class _InOrderIterator(Iterator[Node]):
    """Ascending node iterator, optionally bounded to low <= key <= high."""

    def __init__(self, root: Node | None, low: Any = None, high: Any = None) -> None:
        self._stack: list[Node] = []
        self._high = high

        # Stack holds the unvisited ancestors with keys >= low, smallest on top
        self._push_left_path(root, low)

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        if self._high is not None and node.key > self._high:
            self._stack.clear()
            raise StopIteration

        # Successors of node not yet stacked live in its right subtree
        self._push_left_path(node.right, None)

        return node

    def _push_left_path(self, node: Node | None, low: Any) -> None:
        """Push leftmost path to stack, skipping subtrees below low."""
        while node:
            if low is not None and node.key < low:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


def in_order_nodes(tree: Node | None) -> Iterator[Node]:
    """Iterate over nodes in ascending key order."""
    return _InOrderIterator(tree)


def in_order(tree: Node | None) -> Iterator[Any]:
    """Iterate over keys in ascending order."""
    return (node.key for node in _InOrderIterator(tree))


def in_order_walk(tree: Node | None, visit: Callable[[Any], Any]) -> None:
    """
    Call visit once per key, in ascending key order.

    Raises:
        InvalidVisitorError: If visit is not callable. Nothing is visited.
    """
    if not callable(visit):
        raise InvalidVisitorError(visit)

    for key in in_order(tree):
        visit(key)


def to_list(tree: Node | None) -> list[Any]:
    """Return the keys of the tree as an ascending list."""
    return list(in_order(tree))


def tree_sort(keys: Sequence[Any]) -> list[Any]:
    """Sort keys by building a tree and reading it back in order."""
    return to_list(from_list(keys))


def range_walk(tree: Node | None, low: Any = None, high: Any = None) -> Iterator[Any]:
    """
    Iterate over keys k with low <= k <= high, in ascending order.

    Subtrees entirely outside the range are not visited. A bound of None
    leaves that side open.
    """
    return (node.key for node in _InOrderIterator(tree, low, high))


def range_nodes(tree: Node | None, low: Any = None, high: Any = None) -> Iterator[Node]:
    """Node variant of range_walk()."""
    return _InOrderIterator(tree, low, high)


def pre_order(tree: Node | None) -> Iterator[Any]:
    """Iterate over keys in pre-order: node, left subtree, right subtree."""
    stack = [tree] if tree else []
    while stack:
        node = stack.pop()
        yield node.key
        if node.right:
            stack.append(node.right)
        if node.left:
            stack.append(node.left)


def _post_order_nodes(tree: Node | None) -> Iterator[Node]:
    stack: list[Node] = []
    last = None
    node = tree

    while stack or node:
        if node:
            stack.append(node)
            node = node.left
            continue

        top = stack[-1]
        if top.right and last is not top.right:
            node = top.right
        else:
            last = stack.pop()
            yield last


def post_order(tree: Node | None) -> Iterator[Any]:
    """Iterate over keys in post-order: left subtree, right subtree, node."""
    return (node.key for node in _post_order_nodes(tree))


def iter_by_successor(tree: Node | None) -> Iterator[Node]:
    """
    Iterate over nodes in ascending order using only min_node() and succ().

    Each step is O(h) in the worst case but the whole walk is O(n), as every
    edge is crossed twice. Requires valid parent links.
    """
    node = min_node(tree)
    while node is not None:
        yield node
        node = succ(node)


def map_tree(fn: Callable[[Any], Any], tree: Node | None) -> Node | None:
    """
    Build a tree of the same shape whose keys are fn(key).

    The source tree is not modified and the new tree has valid parent links.
    If fn is not monotonically increasing the result may not be a valid BST.

    Raises:
        InvalidVisitorError: If fn is not callable.
        InvalidKeyError: If fn returns something that is not a valid key.
    """
    if not callable(fn):
        raise InvalidVisitorError(fn)

    copies: dict[int, Node] = {}
    for node in _post_order_nodes(tree):
        copy = Node(key=fn(node.key), value=node.value)
        if node.left:
            copy.left = copies.pop(id(node.left))
            copy.left.parent = copy
        if node.right:
            copy.right = copies.pop(id(node.right))
            copy.right.parent = copy
        copies[id(node)] = copy

    return copies.pop(id(tree)) if tree else None


def rebuild(pre_order_keys: Sequence[Any], in_order_keys: Sequence[Any]) -> Node | None:
    """
    Reconstruct a binary tree from its pre-order and in-order traversals.

    The result is the unique binary tree with those traversals; it need not
    satisfy the BST property. Parent links are set. Built with an explicit
    stack of nodes still waiting for a right child, so chains of any depth
    are handled.

    Args:
        pre_order_keys: Keys in pre-order (node, left, right).
        in_order_keys: Keys in in-order (left, node, right).

    Returns:
        Root of the reconstructed tree.

    Raises:
        ValueError: If keys repeat or the traversals do not describe the
            same tree.
    """
    check_sequence(pre_order_keys)
    check_sequence(in_order_keys)

    if len(pre_order_keys) != len(in_order_keys):
        raise ValueError("Traversals have different lengths")

    positions = {key: i for i, key in enumerate(in_order_keys)}
    if len(positions) != len(in_order_keys):
        raise ValueError("Keys must be unique to rebuild a tree")

    if not pre_order_keys:
        return None

    root = None
    stack: list[Node] = []
    for key in pre_order_keys:
        index = positions.get(key)
        if index is None:
            raise ValueError(f"Key {key!r} is missing from the in-order traversal")

        node = Node(key=key)
        if root is None:
            root = node
        elif index < positions[stack[-1].key]:
            node.parent = stack[-1]
            stack[-1].left = node
        elif index == positions[stack[-1].key]:
            raise ValueError(f"Key {key!r} repeats in the pre-order traversal")
        else:
            # Attach as right child of the last ancestor that precedes it in order
            while stack and index > positions[stack[-1].key]:
                node.parent = stack.pop()
            node.parent.right = node
        stack.append(node)

    if list(pre_order(root)) != list(pre_order_keys) or list(in_order(root)) != list(in_order_keys):
        raise ValueError("Traversals do not describe the same tree")
    return root
