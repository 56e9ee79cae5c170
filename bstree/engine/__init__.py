"""
Binary search tree engine: plain functions over a root ``Node`` (or ``None``).
"""

from bstree.engine.build import (
    check_sequence,
    from_list,
    from_list_random,
    insert,
    insert_node,
)
from bstree.engine.deletion import delete_node, delete_value
from bstree.engine.query import (
    lookup,
    max_node,
    maximum,
    min_node,
    minimum,
    pred,
    search,
    succ,
)
from bstree.engine.traversal import (
    in_order,
    in_order_nodes,
    in_order_walk,
    iter_by_successor,
    map_tree,
    post_order,
    pre_order,
    range_nodes,
    range_walk,
    rebuild,
    to_list,
    tree_sort,
)
from bstree.engine.validation import has_valid_parents, height, is_bst, size

__all__ = [
    "check_sequence",
    "delete_node",
    "delete_value",
    "from_list",
    "from_list_random",
    "has_valid_parents",
    "height",
    "in_order",
    "in_order_nodes",
    "in_order_walk",
    "insert",
    "insert_node",
    "is_bst",
    "iter_by_successor",
    "lookup",
    "map_tree",
    "max_node",
    "maximum",
    "min_node",
    "minimum",
    "post_order",
    "pre_order",
    "pred",
    "range_nodes",
    "range_walk",
    "rebuild",
    "search",
    "size",
    "succ",
    "to_list",
    "tree_sort",
]
