"""Spell out non-positive integers in English words."""

from __future__ import annotations

_WORDS = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
)


def _spell_under_1000(number: int) -> str:
    parts: list[str] = []
    hundreds, remainder = divmod(number, 100)
    if hundreds:
        parts += [_WORDS[hundreds], "hundred"]
    if remainder >= 20:
        tens, units = divmod(remainder, 10)
        parts.append(_TENS[tens] + (f"-{_WORDS[units]}" if units else ""))
    elif remainder > 0:
        parts.append(_WORDS[remainder])
    return " ".join(parts)


def negative_spell(n: int) -> str:
    """Spell ``n`` (zero or negative) in words; raise ValueError if positive."""
    if n > 0:
        raise ValueError("error: positive number")
    if n == 0:
        return "zero"

    number = -n
    parts = ["minus"]
    if number >= 1_000_000:
        parts.append("one million")
        number -= 1_000_000
    if number >= 1000:
        thousands, number = divmod(number, 1000)
        parts += [_spell_under_1000(thousands), "thousand"]
    if number > 0:
        parts.append(_spell_under_1000(number))
    return " ".join(parts)