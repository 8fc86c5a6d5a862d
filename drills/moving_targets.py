"""A stack of targets on a shooting field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Target:
    size: int
    xp: int


class Field:
    """Targets stacked so that the last one pushed is the first one hit."""

    def __init__(self) -> None:
        self._targets: list[Target] = []

    def push(self, target: Target) -> None:
        """Put ``target`` on top."""
        self._targets.append(target)

    def pop(self) -> Optional[Target]:
        """Remove and return the top target, or None if the field is empty."""
        return self._targets.pop() if self._targets else None

    def peek(self) -> Optional[Target]:
        """Return the top target without removing it, or None."""
        return self._targets[-1] if self._targets else None

    def replace_top(self, target: Target) -> None:
        """Replace the top target; raise IndexError on an empty field."""
        if not self._targets:
            raise IndexError("no target to replace")
        self._targets[-1] = target

    def __len__(self) -> int:
        return len(self._targets)