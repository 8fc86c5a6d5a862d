"""Largest prime strictly below a number."""

from __future__ import annotations

from math import isqrt


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def prev_prime(nbr: int) -> int:
    """Return the largest prime below ``nbr``, or 0 if there is none."""
    if nbr < 0:
        raise ValueError("number must not be negative")
    return next((n for n in range(nbr - 1, 1, -1) if is_prime(n)), 0)