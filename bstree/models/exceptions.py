"""
Custom exceptions for the binary search tree engine.
"""


class BSTError(Exception):
    """Base class for binary search tree errors."""


class InvalidKeyError(BSTError, TypeError):
    """
    Raised when a node is constructed with a key that is not an orderable number.

    This is a fail-fast error: no tree structure is touched.
    """

    def __init__(self, key: object):
        """
        Initialize key error.

        Args:
            key: The rejected key.
        """
        self.key = key
        super().__init__(
            f"Key must be a real, non-NaN number, got {type(key).__name__}: {key!r}"
        )


class InvalidSequenceError(BSTError, TypeError):
    """Raised when a sequence of keys is expected but something else was given."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Expected a sequence of keys, got {type(value).__name__}")


class InvalidVisitorError(BSTError, TypeError):
    """Raised when a traversal is given a visitor that is not callable."""

    def __init__(self, visitor: object):
        self.visitor = visitor
        super().__init__(f"Visitor must be callable, got {type(visitor).__name__}")
