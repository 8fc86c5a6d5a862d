"""A number's digits reversed, followed by the digits themselves."""

from __future__ import annotations


def reverse_it(v: int) -> str:
    """Return the sign, the reversed digits, then the digits of ``v``."""
    sign = "-" if v < 0 else ""
    digits = str(abs(v))
    return f"{sign}{digits[::-1]}{digits}"