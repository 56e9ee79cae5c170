"""
Sorted container implementations backed by the BST engine.
"""

from bstree.models.sortedcontainers.binary_search_tree import BinarySearchTree

__all__ = ["BinarySearchTree"]
