"""Transposition of a 2x2 matrix."""

from __future__ import annotations

from typing import NamedTuple


class Matrix(NamedTuple):
    """A 2x2 matrix of non-negative integers given as two row pairs."""

    first: tuple[int, int]
    second: tuple[int, int]


def transpose(m: Matrix) -> Matrix:
    """Return the transpose of ``m``."""
    (a, b), (c, d) = m
    return Matrix((a, c), (b, d))