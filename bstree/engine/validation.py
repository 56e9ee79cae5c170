"""
Structural checks and measurements used to verify tree invariants.
"""

from bstree.models.node import Node


def is_bst(tree: Node | None) -> bool:
    """
    Check the ordering invariant at every node.

    Every key in a left subtree must be strictly smaller than the node's key
    and every key in a right subtree must be greater or equal, since equal
    keys are inserted to the right.
    """
    # (node, lower bound inclusive, upper bound exclusive)
    stack = [(tree, None, None)] if tree else []
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.key < low:
            return False
        if high is not None and node.key >= high:
            return False
        if node.left:
            stack.append((node.left, low, node.key))
        if node.right:
            stack.append((node.right, node.key, high))
    return True


def has_valid_parents(tree: Node | None) -> bool:
    """Check that the root has no parent and every child points back to its parent."""
    if tree is None:
        return True
    if tree.parent is not None:
        return False

    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                return False
            stack.append(child)
    return True


def size(tree: Node | None) -> int:
    """Number of nodes in the tree."""
    count = 0
    stack = [tree] if tree else []
    while stack:
        node = stack.pop()
        count += 1
        if node.left:
            stack.append(node.left)
        if node.right:
            stack.append(node.right)
    return count


def height(tree: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    deepest = 0
    stack = [(tree, 1)] if tree else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if node.left:
            stack.append((node.left, depth + 1))
        if node.right:
            stack.append((node.right, depth + 1))
    return deepest
