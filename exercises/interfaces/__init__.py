"""
Abstract base classes for the exercise data structures.
"""

from exercises.interfaces.range_iterable import RangeIterable
from exercises.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
