"""Fixed-capacity queue and stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class ContainerFullError(Exception):
    """Raised when an item is pushed onto a full container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class BoundedQueue(Generic[T]):
    """First-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: deque[T] = deque()
        for item in items:
            self.push(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> None:
        """Append ``item`` at the back; raise ``ContainerFullError`` when full."""
        if len(self._items) >= self._capacity:
            raise ContainerFullError(f"queue is full ({self._capacity} items)")
        self._items.append(item)

    def pop(self) -> None:
        """Drop the front item; does nothing on an empty queue."""
        if self._items:
            self._items.popleft()

    def get(self, index: int) -> T:
        """Return the item ``index`` places from the front."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"queue index {index} out of range")
        return self._items[index]

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


class BoundedStack(Generic[T]):
    """Last-in first-out stack holding at most ``capacity`` items.

    Pushing onto a full stack leaves it unchanged.
    """

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[T] = []
        for item in items:
            self.push(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> None:
        """Put ``item`` on top unless the stack is already full."""
        if len(self._items) < self._capacity:
            self._items.append(item)

    def pop(self) -> None:
        """Drop the top item; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def get(self, index: int) -> T:
        """Return the item ``index`` places up from the bottom."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"stack index {index} out of range")
        return self._items[index]

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)