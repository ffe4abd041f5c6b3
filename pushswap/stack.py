"""A doubly linked stack of integers, the data structure the puzzle works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack: its value, its rank within a chunk and its links."""

    nbr: int
    order: int = 0
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


class Stack:
    """Stack whose first node is the top; nodes keep their identity across moves."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self._append(Node(value))

    def _append(self, node: Node) -> None:
        node.next = None
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    @property
    def head(self) -> Optional[Node]:
        """The top node, or None when the stack is empty."""
        return self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def last(self) -> Optional[Node]:
        """The bottom node, or None when the stack is empty."""
        return self._tail

    def push_front(self, node: Node) -> None:
        """Put a node on top of the stack."""
        node.prev = None
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def pop_front(self) -> Node:
        """Take the top node off the stack."""
        node = self._head
        if node is None:
            raise IndexError("pop from empty stack")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        node.prev = None
        self._size -= 1
        return node

    def swap(self) -> None:
        """Exchange the two top nodes; does nothing with fewer than two."""
        if self._size < 2:
            return
        first = self._head
        second = first.next
        first.next = second.next
        if first.next is None:
            self._tail = first
        else:
            first.next.prev = first
        second.prev = None
        second.next = first
        first.prev = second
        self._head = second

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if self._size < 2:
            return
        first = self._head
        self._head = first.next
        self._head.prev = None
        first.next = None
        first.prev = self._tail
        self._tail.next = first
        self._tail = first

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if self._size < 2:
            return
        last = self._tail
        self._tail = last.prev
        self._tail.next = None
        last.prev = None
        last.next = self._head
        self._head.prev = last
        self._head = last

    def values(self) -> list[int]:
        """The numbers from top to bottom."""
        return [node.nbr for node in self]

    def is_sorted(self) -> bool:
        """True when the numbers never decrease from top to bottom."""
        numbers = self.values()
        return all(a <= b for a, b in zip(numbers, numbers[1:]))

    def biggest(self) -> Optional[Node]:
        """The first node holding the largest number, or None when empty."""
        result: Optional[Node] = None
        for node in self:
            if result is None or node.nbr > result.nbr:
                result = node
        return result