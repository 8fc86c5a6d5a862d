"""Sideways pyramid of repeated strings."""

from __future__ import annotations


def inv_pyramid(v: str, i: int) -> list[str]:
    """Return ``2*i - 1`` lines growing to ``i`` copies of ``v`` and back."""
    if i < 0:
        raise ValueError("height must not be negative")
    rising = [" " * (j + 1) + v * (j + 1) for j in range(i)]
    return rising + rising[:-1][::-1]