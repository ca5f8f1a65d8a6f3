"""Minimum and maximum priority queues."""

from __future__ import annotations

import heapq
from typing import Any, Generic, TypeVar

__all__ = ["MinHeap", "MaxHeap"]

T = TypeVar("T")


class MinHeap(Generic[T]):
    """A heap that pops its smallest item first."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def push(self, item: T) -> None:
        """Add an item."""
        heapq.heappush(self._data, item)

    def pop(self) -> T:
        """Remove and return the smallest item; IndexError if empty."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._data)

    def __len__(self) -> int:
        return len(self._data)


class _Descending:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: _Descending) -> bool:
        return other.value < self.value


class MaxHeap(Generic[T]):
    """A heap that pops its largest item first."""

    def __init__(self) -> None:
        self._data: list[_Descending] = []

    def push(self, item: T) -> None:
        """Add an item."""
        heapq.heappush(self._data, _Descending(item))

    def pop(self) -> T:
        """Remove and return the largest item; IndexError if empty."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._data).value

    def __len__(self) -> int:
        return len(self._data)