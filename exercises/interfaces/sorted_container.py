"""
SortedContainer abstract base class for ordered key sets.
"""

from abc import abstractmethod
from typing import Any

from exercises.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for containers holding distinct, ordered keys.

    Keys must support a total order (<, >, ==). Inserting a key that is
    already present is a no-op.

    Implementations:
    - BinarySearchTree: unbalanced, insert-only
    """

    @abstractmethod
    def insert(self, key: Any) -> None:
        """
        Insert a key unless it is already present.

        Args:
            key: The key to insert.

        Time complexity: O(h), h being the tree height
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> bool:
        """
        Check whether a key is stored.

        Args:
            key: The key to look up.

        Returns:
            True if the key is present, False otherwise.

        Time complexity: O(h)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys.

        Time complexity: O(1)
        """
        pass

    def has(self, key: Any) -> bool:
        return self.search(key)

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __len__(self) -> int:
        return self.size()
