"""Primality check that reports why a number is not prime."""

from __future__ import annotations

from math import isqrt
from typing import Optional


class PrimeError(Exception):
    """The number checked is not prime."""


class EvenError(PrimeError):
    """The number is even and greater than two."""

    def __init__(self) -> None:
        super().__init__("number is even")


class DividerError(PrimeError):
    """The number has an odd divider."""

    def __init__(self, divider: int) -> None:
        super().__init__(f"number is divisible by {divider}")
        self.divider = divider


def prime_checker(nb: int) -> Optional[int]:
    """Return ``nb`` if prime, None if below 2, else raise a PrimeError."""
    if nb <= 1:
        return None
    if nb == 2:
        return nb
    if nb % 2 == 0:
        raise EvenError()
    divider = next((i for i in range(3, isqrt(nb) + 1, 2) if nb % i == 0), None)
    if divider is not None:
        raise DividerError(divider)
    return nb