"""A singly linked stack that holds values of any type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`List`."""

    value: Any
    next: Optional["Node"] = None


class List:
    """A linked list where new values go in front of the head."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self._len = 0

    def push(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        self.head = Node(value, self.head)
        self._len += 1

    def pop(self) -> None:
        """Drop the head node; raise IndexError on an empty list."""
        if self.head is None:
            raise IndexError("pop from empty list")
        self._len -= 1
        self.head = self.head.next

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"List({list(self)!r})"