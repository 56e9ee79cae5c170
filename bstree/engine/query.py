"""
Read-only queries on a binary search tree: lookup, min/max, successor/predecessor.

All functions take the root of a tree (``None`` for the empty tree) and run
in O(h) for a tree of height h. A result of ``None`` means "absent"; it is
never an error.
"""

from typing import Any

from bstree.models.node import Node


def lookup(tree: Node | None, value: Any) -> Node | None:
    """
    Find the node holding value by recursive descent.

    Returns the same node as search() for any tree shallower than the
    interpreter recursion limit (sys.getrecursionlimit(), 1000 by default).
    Deeper trees, such as chains built from sorted input, raise
    RecursionError; use search() for those.

    Args:
        tree: Root of the tree to search.
        value: Key to look for.

    Returns:
        The shallowest node whose key equals value, or None.
    """
    if tree is None:
        return None
    if tree.key == value:
        return tree
    if value < tree.key:
        return lookup(tree.left, value)
    return lookup(tree.right, value)


def search(tree: Node | None, value: Any) -> Node | None:
    """Loop-based equivalent of lookup()."""
    while tree is not None and tree.key != value:
        if value < tree.key:
            tree = tree.left
        else:
            tree = tree.right
    return tree


def min_node(tree: Node | None) -> Node | None:
    """Return the leftmost node."""
    if tree is None:
        return None
    while tree.left is not None:
        tree = tree.left
    return tree


def max_node(tree: Node | None) -> Node | None:
    """Return the rightmost node."""
    if tree is None:
        return None
    while tree.right is not None:
        tree = tree.right
    return tree


def minimum(tree: Node | None) -> Any | None:
    """Return the smallest key, or None for an empty tree."""
    node = min_node(tree)
    return node.key if node else None


def maximum(tree: Node | None) -> Any | None:
    """Return the largest key, or None for an empty tree."""
    node = max_node(tree)
    return node.key if node else None


def succ(node: Node) -> Node | None:
    """
    Return the in-order successor of node.

    Relies on parent links, so node must come from a tree built by the
    imperative insert/delete_node path, not from delete_value().

    Args:
        node: Starting node (must not be None).

    Returns:
        The node with the next larger key, or None if node is the maximum.
    """
    if node.right is not None:
        return min_node(node.right)

    parent = node.parent
    while parent is not None and node is parent.right:
        node = parent
        parent = parent.parent
    return parent


def pred(node: Node) -> Node | None:
    """Mirror image of succ(): the node with the next smaller key, or None."""
    if node.left is not None:
        return max_node(node.left)

    parent = node.parent
    while parent is not None and node is parent.left:
        node = parent
        parent = parent.parent
    return parent
