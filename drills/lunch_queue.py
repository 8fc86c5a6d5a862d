"""A lunch queue kept as a linked list, newest person first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Person:
    name: str
    discount: int
    next_person: Optional["Person"] = None


class Queue:
    """Linked queue: ``add`` puts people at the head, ``rm`` takes from the tail."""

    def __init__(self) -> None:
        self.node: Optional[Person] = None

    def __iter__(self) -> Iterator[Person]:
        person = self.node
        while person is not None:
            yield person
            person = person.next_person

    def __repr__(self) -> str:
        return f"Queue({self._entries()!r})"

    def _entries(self) -> list[tuple[str, int]]:
        return [(person.name, person.discount) for person in self]

    def _rebuild(self, entries: Iterable[tuple[str, int]]) -> None:
        head: Optional[Person] = None
        for name, discount in reversed(list(entries)):
            head = Person(name, discount, head)
        self.node = head

    def add(self, name: str, discount: int) -> None:
        """Put a new person at the head of the queue."""
        self.node = Person(name, discount, self.node)

    def invert_queue(self) -> None:
        """Reverse the order of the queue."""
        self._rebuild(self._entries()[::-1])

    def rm(self) -> Optional[tuple[str, int]]:
        """Remove the person who was added first and return their entry."""
        entries = self._entries()
        if not entries:
            return None
        removed = entries.pop()
        self._rebuild(entries)
        return removed

    def search(self, name: str) -> Optional[tuple[str, int]]:
        """Return the first entry with ``name``, or None."""
        return next(
            ((person.name, person.discount) for person in self if person.name == name),
            None,
        )