"""Smallest value held in a mapping."""

from __future__ import annotations

from typing import Mapping

I32_MAX = 2**31 - 1


def smallest(mapping: Mapping[str, int]) -> int:
    """Return the smallest value, or the largest 32-bit integer if empty."""
    return min(mapping.values(), default=I32_MAX)