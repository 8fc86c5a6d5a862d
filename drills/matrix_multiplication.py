"""Scalar multiplication of a 2x2 matrix."""

from __future__ import annotations

from typing import NamedTuple


class Matrix(NamedTuple):
    """A 2x2 integer matrix given as two row pairs."""

    first: tuple[int, int]
    second: tuple[int, int]


def multiply(m: Matrix, multiplier: int) -> Matrix:
    """Return ``m`` with every entry multiplied by ``multiplier``."""
    (a, b), (c, d) = m
    return Matrix(
        (a * multiplier, b * multiplier),
        (c * multiplier, d * multiplier),
    )