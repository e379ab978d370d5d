"""
In-place selection sort over a mutable sequence.

O(n^2) comparisons on every input, including sorted input, and at most
n - 1 non-trivial swaps. Not stable.
"""

import logging
from collections.abc import Callable, MutableSequence
from typing import Any

logger = logging.getLogger(__name__)


def sort(
    sequence: MutableSequence[Any],
    key: Callable[[Any], Any] | None = None,
    reverse: bool = False,
) -> None:
    """
    Sort sequence in place.

    For each position i, the suffix starting at i is scanned for its
    minimum (maximum when reverse is set) and swapped into position i.
    Ties keep the earliest index, since only a strictly smaller (or
    larger) element replaces the current pick.

    Args:
        sequence: Any mutable, indexable sequence of mutually orderable elements.
        key: Optional one-argument function; elements are compared by key(element).
        reverse: Produce non-increasing order instead.

    Raises:
        TypeError: If key is given but not callable, or if two elements
            cannot be compared.
    """
    if key is not None and not callable(key):
        raise TypeError(f"key must be callable, got {type(key).__name__}")

    n = len(sequence)
    logger.debug(f"Selection sort over {n} elements (reverse={reverse})")

    for i in range(n):
        index = i
        best = sequence[i] if key is None else key(sequence[i])

        for j in range(i + 1, n):
            candidate = sequence[j] if key is None else key(sequence[j])
            if (candidate > best) if reverse else (candidate < best):
                index = j
                best = candidate

        sequence[i], sequence[index] = sequence[index], sequence[i]
