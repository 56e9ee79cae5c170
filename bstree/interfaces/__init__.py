"""
Abstract base classes for sorted containers.
"""

from bstree.interfaces.ordered_iterable import OrderedIterable
from bstree.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
