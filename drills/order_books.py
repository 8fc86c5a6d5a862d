"""Writers and their books, with ordering by title."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Book:
    title: str
    year: int


@dataclass
class Writer:
    first_name: str
    last_name: str
    books: list[Book] = field(default_factory=list)


def order_books(writer: Writer) -> None:
    """Sort the writer's books by title, in place."""
    writer.books.sort(key=lambda book: book.title)