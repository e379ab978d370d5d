"""
Binary Search Tree implementation for ordered key storage.

Unbalanced and insert-only: nodes are never removed or rotated, so the
shape of the tree depends entirely on insertion order.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from exercises.interfaces.sorted_container import SortedContainer
from exercises.models.exceptions import IncomparableKeyError

logger = logging.getLogger(__name__)


@dataclass(repr=False, eq=False)
class Node:
    """
    Node in the Binary Search Tree.

    A node with no key is empty; only the root of an empty tree is ever
    in that state. Each node owns its children exclusively.
    """

    key: Any = None
    left: "Node | None" = None
    right: "Node | None" = None

    def is_empty(self) -> bool:
        return self.key is None

    def __repr__(self) -> str:
        # Children by key only
        left = None if self.left is None else self.left.key
        right = None if self.right is None else self.right.key
        return f"Node(key={self.key!r}, left={left!r}, right={right!r})"


def _compare(key: Any, stored_key: Any) -> int:
    """
    Three-way comparison of key against stored_key.

    Keys that are neither less, greater, nor equal (NaN) are unordered
    and rejected like keys of an incompatible type.
    """
    try:
        if key < stored_key:
            return -1
        if key > stored_key:
            return 1
        if key == stored_key:
            return 0
    except TypeError as e:
        raise IncomparableKeyError(key, stored_key) from e
    raise IncomparableKeyError(key, stored_key)


class BinarySearchTree(SortedContainer):
    """
    Binary Search Tree implementation of SortedContainer.

    Properties maintained:
    1. Every key in a node's left subtree is strictly less than the node's key
    2. Every key in a node's right subtree is strictly greater
    3. No key is stored twice
    """

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        """
        Initialize the tree, inserting any initial keys in order.

        Args:
            keys: Keys to insert, in insertion order.
        """
        self._root: Node = Node()
        self._size: int = 0
        self._cursor: Iterator[Any] | None = None
        self._async_cursor: AsyncIterator[Any] | None = None

        for key in keys:
            self.insert(key)

    @property
    def root(self) -> Node:
        return self._root

    def is_empty(self) -> bool:
        return self._root.is_empty()

    def insert(self, key: Any) -> None:
        """Insert key unless already present. O(h)"""
        if key is None:
            raise ValueError("None cannot be stored as a key")

        node = self._root
        if node.is_empty():
            # Rejects keys not equal to themselves before they become the root
            _compare(key, key)
            node.key = key
            self._size = 1
            return

        while True:
            order = _compare(key, node.key)
            if order == 0:
                logger.debug(f"Ignoring duplicate key {key!r}")
                return

            if order < 0:
                if node.left is None:
                    node.left = self._new_node(key)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = self._new_node(key)
                    break
                node = node.right

        self._size += 1

    def search(self, key: Any) -> bool:
        """Check whether key is stored. O(h)"""
        if key is None:
            return False

        node = self._root
        if node.is_empty():
            return False

        while node is not None:
            order = _compare(key, node.key)
            if order == 0:
                return True
            # Stored key greater than the probe: the probe can only be on the left
            node = node.left if order < 0 else node.right
        return False

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self.is_empty():
            return 0

        height = 0
        level = [self._root]
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def __next__(self) -> Any:
        """Advance the tree-held cursor over all keys."""
        if self._cursor is None:
            self._cursor = self.iterator()
        try:
            return next(self._cursor)
        except StopIteration:
            self._cursor = None
            raise

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        self._validate_range(start, end)
        return _RangeIterator(self._root_or_none(), start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    async def __anext__(self) -> Any:
        """Advance the tree-held async cursor over all keys."""
        if self._async_cursor is None:
            self._async_cursor = self.async_iterator()
        try:
            return await self._async_cursor.__anext__()
        except StopAsyncIteration:
            self._async_cursor = None
            raise

    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        self._validate_range(start, end)
        return _AsyncRangeIterator(self._root_or_none(), start, end)

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"

    def _new_node(self, key: Any) -> Node:
        """Create an empty node and populate it with key."""
        node = Node()
        node.key = key
        return node

    def _root_or_none(self) -> Node | None:
        return None if self.is_empty() else self._root

    @staticmethod
    def _validate_range(start: Any, end: Any) -> None:
        if start is None or end is None:
            return
        try:
            reversed_bounds = start > end
        except TypeError as e:
            raise TypeError(
                f"range bounds are not comparable, got start={start!r}, end={end!r}"
            ) from e
        if reversed_bounds:
            raise ValueError(f"start must not exceed end, got start={start!r}, end={end!r}")


class _RangeCursor:
    """In-order traversal state shared by the sync and async iterators."""

    def __init__(self, root: Node | None, start: Any, end: Any) -> None:
        self._stack: list[Node] = []
        self._start = start
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root)

    def _pop(self) -> Node | None:
        """Pop the next in-range node, or None once exhausted."""
        if not self._stack:
            return None

        node = self._stack.pop()
        if self._end is not None and _compare(node.key, self._end) >= 0:
            self._stack.clear()
            return None

        self._push_left_path(node.right)
        return node

    def _push_left_path(self, node: Node | None) -> None:
        while node is not None:
            if self._start is not None and _compare(node.key, self._start) < 0:
                # Whole left subtree is below start as well
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _RangeIterator(_RangeCursor, Iterator[Any]):
    """Iterator for range queries on the Binary Search Tree."""

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        node = self._pop()
        if node is None:
            raise StopIteration
        return node.key


class _AsyncRangeIterator(_RangeCursor, AsyncIterator[Any]):
    """Async iterator for range queries (in-memory, never suspends)."""

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        node = self._pop()
        if node is None:
            raise StopAsyncIteration
        return node.key
