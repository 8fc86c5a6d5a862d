"""Queens on a chess board and whether they can attack each other."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BOARD_SIZE = 8


@dataclass(frozen=True)
class ChessPosition:
    rank: int
    file: int

    @classmethod
    def create(cls, rank: int, file: int) -> Optional["ChessPosition"]:
        """Return the position if it lies on the board, else None."""
        if 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE:
            return cls(rank, file)
        return None


@dataclass(frozen=True)
class Queen:
    position: ChessPosition

    def can_attack(self, other: "Queen") -> bool:
        """Return True if the queens share a rank, a file or a diagonal."""
        dx = abs(self.position.rank - other.position.rank)
        dy = abs(self.position.file - other.position.file)
        return dx == 0 or dy == 0 or dx == dy