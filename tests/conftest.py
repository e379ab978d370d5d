"""
Shared pytest fixtures for the exercise tests.
"""

import random

import pytest

from exercises.models.sortedcontainers import BinarySearchTree


@pytest.fixture
def empty_tree():
    """Provide a fresh, empty BinarySearchTree."""
    return BinarySearchTree()


@pytest.fixture
def sample_tree():
    """Provide a tree built from 5, 3, 7, 2, 4 in that order."""
    tree = BinarySearchTree()
    for key in (5, 3, 7, 2, 4):
        tree.insert(key)
    return tree


@pytest.fixture
def shuffled_keys():
    """Provide 500 distinct keys in a reproducible shuffled order."""
    keys = list(range(500))
    random.Random(42).shuffle(keys)
    return keys
