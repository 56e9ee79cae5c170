"""
Shared pytest fixtures for binary search tree tests.
"""

import pytest

from bstree.engine import from_list
from bstree.models.sortedcontainers import BinarySearchTree


@pytest.fixture
def sample_keys():
    """Keys of the worked example tree (root 4)."""
    return [4, 3, 8, 1, 7, 16, 2, 10, 9, 14]


@pytest.fixture
def sample_tree(sample_keys):
    """Provide the worked example tree built by repeated insert."""
    return from_list(sample_keys)


@pytest.fixture
def container(sample_keys):
    """Provide a BinarySearchTree holding the sample keys with string values."""
    return BinarySearchTree((k, str(k)) for k in sample_keys)
