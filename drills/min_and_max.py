"""Smallest and largest of three numbers."""

from __future__ import annotations


def min_and_max(nb_1: int, nb_2: int, nb_3: int) -> tuple[int, int]:
    """Return ``(minimum, maximum)`` of the three numbers."""
    return min(nb_1, nb_2, nb_3), max(nb_1, nb_2, nb_3)