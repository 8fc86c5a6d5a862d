"""Sums of every prefix of a list, longest first."""

from __future__ import annotations

from typing import Sequence


def parts_sums(arr: Sequence[int]) -> list[int]:
    """Return the sums of ``arr[:n]``, ``arr[:n-1]``, ... down to the empty prefix."""
    total = sum(arr)
    parts = [total]
    for value in reversed(arr):
        total -= value
        parts.append(total)
    return parts