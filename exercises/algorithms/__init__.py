"""
Sorting algorithms over mutable sequences.
"""

from exercises.algorithms.selection_sort import sort

__all__ = ["sort"]
