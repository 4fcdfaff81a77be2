"""Fixed-capacity stack, circular queue and double-ended queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "ContainerFullError",
    "ContainerEmptyError",
    "BoundedStack",
    "CircularQueue",
    "ArrayDeque",
]


class ContainerFullError(OverflowError):
    """Raised when adding to a container that is at capacity."""


class ContainerEmptyError(IndexError):
    """Raised when removing from or inspecting an empty container."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if self.is_full():
            raise ContainerFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise ContainerEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise ContainerEmptyError("stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        """Iterate from bottom to top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class _Ring:
    """Fixed-size ring buffer shared by the queue and the deque."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def is_full(self) -> bool:
        return self._count >= self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def _require_room(self) -> None:
        if self.is_full():
            raise ContainerFullError(f"{type(self).__name__} is full")

    def _require_items(self) -> None:
        if self.is_empty():
            raise ContainerEmptyError(f"{type(self).__name__} is empty")

    def _push_back(self, value: Any) -> None:
        self._require_room()
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def _push_front(self, value: Any) -> None:
        self._require_room()
        self._front = (self._front - 1) % self.capacity
        self._slots[self._front] = value
        self._count += 1

    def _pop_front(self) -> Any:
        self._require_items()
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def _pop_back(self) -> Any:
        self._require_items()
        index = (self._front + self._count - 1) % self.capacity
        value = self._slots[index]
        self._slots[index] = None
        self._count -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        snapshot = [
            self._slots[(self._front + offset) % self.capacity] for offset in range(self._count)
        ]
        return iter(snapshot)

    def __len__(self) -> int:
        return self._count


class CircularQueue(_Ring):
    """A FIFO queue stored in a ring of ``size`` slots."""

    def __init__(self, size: int = 6) -> None:
        super().__init__(size)

    def enqueue(self, value: Any) -> None:
        self._push_back(value)

    def dequeue(self) -> Any:
        return self._pop_front()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class ArrayDeque(_Ring):
    """A double-ended queue stored in a ring of ``capacity`` slots."""

    def __init__(self, capacity: int = 7) -> None:
        super().__init__(capacity)

    def push_front(self, value: Any) -> None:
        self._push_front(value)

    def push_back(self, value: Any) -> None:
        self._push_back(value)

    def pop_front(self) -> Any:
        return self._pop_front()

    def pop_back(self) -> Any:
        return self._pop_back()

    def is_full(self) -> bool:
        return super().is_full()

    def is_empty(self) -> bool:
        return super().is_empty()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()