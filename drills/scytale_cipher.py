"""Scytale transposition cipher."""

from __future__ import annotations


def scytale_cipher(message: str, wraps: int) -> str:
    """Write ``message`` in rows of ``wraps`` letters and read it by columns."""
    if wraps < 0:
        raise ValueError("wraps must not be negative")
    if not message or wraps == 0:
        return message
    rows = -(-len(message) // wraps)
    padded = message.ljust(rows * wraps)
    return "".join(padded[column::wraps] for column in range(wraps)).strip()