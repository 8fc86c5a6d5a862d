"""Spell whole numbers from zero to one million in English words."""

from __future__ import annotations

_SMALL = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)


def _small(n: int) -> str:
    return _SMALL[n - 1]


def _tens(n: int) -> str:
    if n < 20:
        return _small(n)
    tens, units = divmod(n, 10)
    prefix = _TENS[tens - 2]
    return f"{prefix}-{_small(units)}" if units else prefix


def _hundreds(n: int) -> str:
    hundreds, remainder = divmod(n, 100)
    prefix = f"{_small(hundreds)} hundred"
    return f"{prefix} {_tens(remainder)}" if remainder else prefix


def _thousands(n: int) -> str:
    thousands, remainder = divmod(n, 1000)
    prefix = f"{spell(thousands)} thousand"
    if remainder == 0:
        return prefix
    if remainder < 100:
        return f"{prefix} {_tens(remainder)}"
    return f"{prefix} {_hundreds(remainder)}"


def spell(n: int) -> str:
    """Spell ``n`` in words; raise ValueError outside 0..1,000,000."""
    if n < 0 or n > 1_000_000:
        raise ValueError("only numbers from zero to one million can be spelled")
    if n == 0:
        return "zero"
    if n < 20:
        return _small(n)
    if n < 100:
        return _tens(n)
    if n < 1000:
        return _hundreds(n)
    if n < 1_000_000:
        return _thousands(n)
    return "one million"