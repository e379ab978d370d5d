"""
Data models for the exercises.
"""

from exercises.models.exceptions import IncomparableKeyError
from exercises.models.sortedcontainers import BinarySearchTree, Node

__all__ = [
    "IncomparableKeyError",
    "BinarySearchTree",
    "Node",
]
