"""One stage of insertion sort, for checking intermediate states."""

from __future__ import annotations

from typing import MutableSequence


def insertion_sort(values: MutableSequence[int], steps: int) -> None:
    """Sort the first ``steps + 1`` items of ``values`` in place."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    end = steps + 1
    if end > len(values):
        raise IndexError(f"steps {steps} out of range for length {len(values)}")
    values[:end] = sorted(values[:end])