"""
Deletion from a binary search tree.

Two distinct operations with different guarantees:

- delete_value(): persistent. Returns a new tree that shares every subtree
  off the search path with the input, which is left untouched. The result
  does NOT have valid parent links; do not call succ()/pred() on it.
- delete_node(): in place. Splices a given node out of the tree and keeps
  every remaining parent link consistent.
"""

import logging
from typing import Any

from bstree.engine.query import max_node, min_node
from bstree.models.node import Node, Replacement

logger = logging.getLogger(__name__)


def delete_value(tree: Node | None, key: Any) -> Node | None:
    """
    Return a new tree without key. O(h)

    Nodes on the path from the root to key are copied; all other subtrees
    are shared with the input. Deleting a missing key returns a copy with
    identical structure. With duplicate keys, the shallowest one is removed.

    Args:
        tree: Root of the tree.
        key: Key to remove.

    Returns:
        Root of the new tree.
    """
    path: list[tuple[Node, bool]] = []
    current = tree

    while current is not None and key != current.key:
        went_left = key < current.key
        path.append((current, went_left))
        current = current.left if went_left else current.right

    if current is None:
        subtree = None
    elif current.left is None:
        subtree = current.right
    elif current.right is None:
        subtree = current.left
    else:
        # Two children: promote the minimum of the right subtree
        smallest = min_node(current.right)
        subtree = Node(
            key=smallest.key,
            value=smallest.value,
            left=current.left,
            right=delete_value(current.right, smallest.key),
        )

    # Rebuild the search path bottom-up
    for node, went_left in reversed(path):
        if went_left:
            subtree = Node(key=node.key, value=node.value, left=subtree, right=node.right)
        else:
            subtree = Node(key=node.key, value=node.value, left=node.left, right=subtree)

    return subtree


def delete_node(
    tree: Node | None,
    node: Node | None,
    replacement: Replacement = Replacement.SUCCESSOR,
) -> Node | None:
    """
    Remove node from the tree in place. O(h)

    A node with at most one child is spliced out. A node with two children
    keeps its identity and takes the key and value of its neighbour (the
    minimum of the right subtree, or with Replacement.PREDECESSOR the
    maximum of the left subtree), which is then spliced out instead. If the
    maximum of the left subtree is a duplicated key, the successor is used.

    Args:
        tree: Root of the tree containing node.
        node: Node to remove. None is a no-op.
        replacement: Neighbour used for the two-children case.

    Returns:
        Root of the resulting tree. It differs from tree only when the root
        itself was spliced out.
    """
    if node is None:
        return tree

    if node.left is not None and node.right is not None:
        neighbour = None
        if replacement == Replacement.PREDECESSOR:
            neighbour = max_node(node.left)
            # Duplicates of the maximum would stay left of an equal key
            if neighbour.parent.key == neighbour.key:
                logger.debug(f"Predecessor {neighbour.key!r} is duplicated, using successor")
                neighbour = None
                replacement = Replacement.SUCCESSOR
        if neighbour is None:
            neighbour = min_node(node.right)

        logger.debug(f"Replace {node.key!r} with {replacement.name.lower()} {neighbour.key!r}")
        node.key = neighbour.key
        node.value = neighbour.value
        node = neighbour

    return _splice(tree, node)


def _splice(tree: Node | None, node: Node) -> Node | None:
    """Unlink a node with at most one child, attaching that child to its parent."""
    child = node.left if node.left is not None else node.right
    parent = node.parent

    if child is not None:
        child.parent = parent

    if parent is None:
        logger.debug(f"Splice out root {node.key!r}")
        tree = child
    elif node is parent.left:
        parent.left = child
    else:
        parent.right = child

    node.left = None
    node.right = None
    node.parent = None
    return tree
