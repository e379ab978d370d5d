"""
Algorithm exercises.

This package provides two independent, in-memory exercises:
- sort(sequence) - In-place selection sort, O(n^2)
- BinarySearchTree.insert(key) - Unbalanced insert, duplicates ignored
- BinarySearchTree.search(key) - Membership test by descent from the root
"""

from exercises.algorithms import sort
from exercises.models.sortedcontainers import BinarySearchTree

__all__ = ["sort", "BinarySearchTree"]
