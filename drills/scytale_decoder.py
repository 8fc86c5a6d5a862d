"""Decoding of messages written around a scytale."""

from __future__ import annotations

from typing import Optional


def scytale_decoder(s: str, letters_per_turn: int) -> Optional[str]:
    """Undo a scytale wrapping; return None for empty input or zero turns."""
    if letters_per_turn < 0:
        raise ValueError("letters_per_turn must not be negative")
    if not s or letters_per_turn == 0:
        return None

    length = len(s)
    rows = -(-length // letters_per_turn)
    decoded = [" "] * length
    for i in range(letters_per_turn):
        for j in range(rows):
            source = i + j * letters_per_turn
            if source >= length:
                continue
            target = j + i * rows
            if target >= length:
                raise ValueError(
                    f"message of length {length} cannot be decoded "
                    f"with {letters_per_turn} letters per turn"
                )
            decoded[target] = s[source]
    return "".join(decoded)