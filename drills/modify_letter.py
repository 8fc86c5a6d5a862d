"""Remove or flip the case of one letter in a string."""

from __future__ import annotations


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


def _same_letter(c: str, letter: str) -> bool:
    return _ascii_lower(c) == _ascii_lower(letter)


def remove_letter_sensitive(s: str, letter: str) -> str:
    """Remove every exact occurrence of ``letter``."""
    return "".join(c for c in s if c != letter)


def remove_letter_insensitive(s: str, letter: str) -> str:
    """Remove ``letter`` in either ASCII case."""
    return "".join(c for c in s if not _same_letter(c, letter))


def swap_letter_case(s: str, letter: str) -> str:
    """Flip the case of every occurrence of ``letter``, in either ASCII case."""
    return "".join(
        (c.lower() if c.isupper() else c.upper()) if _same_letter(c, letter) else c
        for c in s
    )