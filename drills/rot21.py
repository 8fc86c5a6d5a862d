"""Rotate ASCII letters 21 places forward in the alphabet."""

from __future__ import annotations

import string

_SHIFT = 21
_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_TABLE = str.maketrans(
    _LOWER + _UPPER,
    _LOWER[_SHIFT:] + _LOWER[:_SHIFT] + _UPPER[_SHIFT:] + _UPPER[:_SHIFT],
)


def rot21(text: str) -> str:
    """Shift each ASCII letter 21 places, keeping case; leave the rest as is."""
    return text.translate(_TABLE)