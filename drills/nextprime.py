"""Smallest prime at or above a number."""

from __future__ import annotations

from itertools import count
from math import isqrt


def _is_prime(n: int) -> bool:
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def next_prime(nbr: int) -> int:
    """Return the smallest prime that is at least ``nbr``."""
    if nbr <= 1:
        return 2
    return next(n for n in count(nbr) if _is_prime(n))