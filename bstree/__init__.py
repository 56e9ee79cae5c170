"""
Unbalanced binary search trees.

This package provides:
- Node construction with numeric key validation
- insert / from_list - build trees, O(h) per key
- in_order_walk / to_list - ascending traversal (tree sort)
- lookup / search / minimum / maximum / succ / pred - queries, O(h)
- delete_value - persistent deletion with structural sharing
- delete_node - in-place deletion keeping parent links valid
- BinarySearchTree - keyed SortedContainer over the same engine
"""

from bstree.engine import (
    delete_node,
    delete_value,
    from_list,
    in_order_walk,
    insert,
    lookup,
    maximum,
    minimum,
    pred,
    search,
    succ,
    to_list,
)
from bstree.models import Node, Replacement
from bstree.models.sortedcontainers import BinarySearchTree

__all__ = [
    "BinarySearchTree",
    "Node",
    "Replacement",
    "delete_node",
    "delete_value",
    "from_list",
    "in_order_walk",
    "insert",
    "lookup",
    "maximum",
    "minimum",
    "pred",
    "search",
    "succ",
    "to_list",
]
