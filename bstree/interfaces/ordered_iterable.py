"""
OrderedIterable protocol for containers that iterate in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that iterate over their entries by key.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(low, high)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in ascending key order."""
        pass

    @abstractmethod
    def iterator(self, low: Any = None, high: Any = None) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs in the specified range.

        Args:
            low: Lowest key (inclusive). If None, starts from the beginning.
            high: Highest key (inclusive). If None, iterates to the end.

        Returns:
            Iterator yielding (key, value) tuples in ascending key order.
        """
        pass
