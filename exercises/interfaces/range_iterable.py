"""
RangeIterable: ascending walks over the keys of an ordered container.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    An ordered container whose keys can be walked smallest first.

    A walk may be bounded to the half-open interval [start, end). Both a
    plain and an async form are provided; the async form exists for
    `async for` callers and never awaits anything itself.

    __next__ and __anext__ step a cursor owned by the container, so
    repeated next(container) calls continue one shared walk.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Start a fresh, unbounded walk."""

    @abstractmethod
    def __next__(self) -> Any:
        """Step the container's own cursor."""

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        """
        Walk the keys k with start <= k < end.

        A bound left as None is open on that side. Bounds in the wrong
        order raise ValueError.
        """

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Start a fresh, unbounded async walk."""

    @abstractmethod
    async def __anext__(self) -> Any:
        """Step the container's own async cursor."""

    @abstractmethod
    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        """Async counterpart of iterator(start, end)."""
