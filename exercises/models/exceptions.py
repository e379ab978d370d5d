"""
Custom exceptions for the exercise data structures.
"""

from typing import Any


class IncomparableKeyError(TypeError):
    """
    Raised when a key cannot be ordered against a key already stored.

    Subclasses TypeError so callers catching Python's native comparison
    error keep working.
    """

    def __init__(self, key: Any, stored_key: Any):
        """
        Initialize comparison error.

        Args:
            key: The key passed by the caller.
            stored_key: The stored key it was compared against.
        """
        self.key = key
        self.stored_key = stored_key
        super().__init__(
            f"cannot order {type(key).__name__} key {key!r} "
            f"against stored {type(stored_key).__name__} key {stored_key!r}"
        )
