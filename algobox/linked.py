"""Singly linked lists with cycle handling, and a circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["Node", "LinkedList", "CircularList"]


@dataclass(eq=False)
class Node:
    """A list cell; nodes compare and hash by identity."""

    value: Any
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that may be made cyclic or joined to another list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __repr__(self) -> str:
        if self.has_cycle():
            return "LinkedList(<cyclic>)"
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _require_acyclic(self) -> None:
        if self.has_cycle():
            raise ValueError("list contains a cycle")

    def _node_at(self, position: int) -> Node:
        """Return the node at a 1-based position."""
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        self.head = Node(value, self.head)

    def append(self, value: Any) -> None:
        """Insert ``value`` after the current tail."""
        self._require_acyclic()
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        *_, tail = self._nodes()
        tail.next = node

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        return node.value

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        self._require_acyclic()
        return (node.value for node in self._nodes())

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        self._require_acyclic()
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"{value!r} not in list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._require_acyclic()
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_groups(self, k: int) -> None:
        """Reverse each consecutive run of ``k`` nodes in place."""
        if k <= 0:
            raise ValueError("group size must be positive")
        self._require_acyclic()
        new_head: Optional[Node] = None
        previous_tail: Optional[Node] = None
        current = self.head
        while current is not None:
            group_head = current
            previous: Optional[Node] = None
            for _ in range(k):
                if current is None:
                    break
                following = current.next
                current.next = previous
                previous = current
                current = following
            if previous_tail is None:
                new_head = previous
            else:
                previous_tail.next = previous
            previous_tail = group_head
        self.head = new_head

    def rotate(self, k: int) -> None:
        """Move the first ``k`` nodes (modulo the length) to the end."""
        self._require_acyclic()
        nodes = list(self._nodes())
        if not nodes:
            return
        k %= len(nodes)
        if k == 0:
            return
        nodes[k - 1].next = None
        nodes[-1].next = self.head
        self.head = nodes[k]

    def make_cycle(self, position: int) -> None:
        """Point the tail at the node at 1-based ``position``."""
        self._require_acyclic()
        target = self._node_at(position)
        *_, tail = self._nodes()
        tail.next = target

    def has_cycle(self) -> bool:
        """Floyd's tortoise and hare cycle test."""
        return self._cycle_start() is not None

    def _cycle_start(self) -> Optional[Node]:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                slow = self.head
                while slow is not fast:
                    slow = slow.next
                    fast = fast.next
                return slow
        return None

    def remove_cycle(self) -> bool:
        """Break a cycle if there is one; return whether one was removed."""
        start = self._cycle_start()
        if start is None:
            return False
        node = start
        while node.next is not start:
            node = node.next
        node.next = None
        return True

    def join_tail_to(self, other: "LinkedList", position: int) -> None:
        """Point this list's tail at the node of ``other`` at 1-based ``position``."""
        self._require_acyclic()
        other._require_acyclic()
        target = other._node_at(position)
        if self.head is None:
            self.head = target
            return
        *_, tail = self._nodes()
        tail.next = target

    def intersection_value(self, other: "LinkedList") -> Any:
        """Value of the first node shared with ``other``, or None if they never meet."""
        self._require_acyclic()
        other._require_acyclic()
        ours = set(self._nodes())
        for node in other._nodes():
            if node in ours:
                return node.value
        return None


class CircularList:
    """A circular singly linked list addressed through its last node."""

    def __init__(self) -> None:
        self._last: Optional[Node] = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the front, just after the last node."""
        node = Node(value)
        if self._last is None:
            node.next = node
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        node = self._last.next
        while True:
            yield node.value
            if node is self._last:
                return
            node = node.next

    def __len__(self) -> int:
        return self._size