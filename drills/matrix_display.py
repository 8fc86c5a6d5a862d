"""An integer matrix that prints one parenthesised row per line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class Matrix:
    """A matrix of integers stored as a list of rows."""

    rows: list[list[int]] = field(default_factory=list)

    def __init__(self, rows: Iterable[Iterable[int]] = ()) -> None:
        self.rows = [list(row) for row in rows]

    def __str__(self) -> str:
        return "\n".join(
            "(" + " ".join(str(x) for x in row) + ")" for row in self.rows
        )