"""Determinant of a 3x3 integer matrix."""

from __future__ import annotations

from typing import Sequence


def matrix_determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Return the determinant of a 3x3 matrix using the rule of Sarrus."""
    if len(matrix) != 3 or any(len(row) != 3 for row in matrix):
        raise ValueError("matrix must be 3x3")
    (a, b, c), (d, e, f), (g, h, i) = matrix
    forward = a * e * i + b * f * g + c * d * h
    backward = c * e * g + b * d * i + a * f * h
    return forward - backward