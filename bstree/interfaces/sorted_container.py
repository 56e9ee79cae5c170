"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from bstree.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted key-value containers.

    Keys are unique: putting an existing key replaces its value.

    Implementations:
    - BinarySearchTree: unbalanced, O(h) operations
    """

    @abstractmethod
    def put(self, key: Any, value: Any = None) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any | None:
        """
        Retrieve the value for a given key.

        Returns:
            The value if found, None otherwise.
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Returns:
            True if the key was found and removed, False otherwise.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """Check if a key exists."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def min_key(self) -> Any | None:
        """Return the smallest key, or None if the container is empty."""
        pass

    @abstractmethod
    def max_key(self) -> Any | None:
        """Return the largest key, or None if the container is empty."""
        pass

    @abstractmethod
    def successor(self, key: Any) -> Any | None:
        """
        Return the next larger key.

        Returns:
            The key following key, or None if key is the largest.

        Raises:
            KeyError: If key is not in the container.
        """
        pass

    @abstractmethod
    def predecessor(self, key: Any) -> Any | None:
        """
        Return the next smaller key.

        Returns:
            The key preceding key, or None if key is the smallest.

        Raises:
            KeyError: If key is not in the container.
        """
        pass
