"""
Data models for the binary search tree engine.
"""

from bstree.models.exceptions import (
    BSTError,
    InvalidKeyError,
    InvalidSequenceError,
    InvalidVisitorError,
)
from bstree.models.node import Node, Replacement, check_key

__all__ = [
    "BSTError",
    "InvalidKeyError",
    "InvalidSequenceError",
    "InvalidVisitorError",
    "Node",
    "Replacement",
    "check_key",
]
