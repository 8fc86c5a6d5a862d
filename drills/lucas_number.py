"""Lucas numbers: 2, 1, 3, 4, 7, 11, ..."""

from __future__ import annotations

FIRST_LUCAS = 2
SECOND_LUCAS = 1


def lucas_number(position: int) -> int:
    """Return the Lucas number at ``position``, counting from 0."""
    if position < 0:
        raise ValueError("position must not be negative")
    previous, current = FIRST_LUCAS, SECOND_LUCAS
    if position == 0:
        return previous
    for _ in range(position - 1):
        previous, current = current, previous + current
    return current