"""Roman numerals in subtractive notation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RomanDigit(Enum):
    NULLA = "Nulla"
    I = "I"  # noqa: E741
    V = "V"
    X = "X"
    L = "L"
    C = "C"
    D = "D"
    M = "M"


_D = RomanDigit
_STEPS: tuple[tuple[int, tuple[RomanDigit, ...]], ...] = (
    (1000, (_D.M,)),
    (900, (_D.C, _D.M)),
    (500, (_D.D,)),
    (400, (_D.C, _D.D)),
    (100, (_D.C,)),
    (90, (_D.X, _D.C)),
    (50, (_D.L,)),
    (40, (_D.X, _D.L)),
    (10, (_D.X,)),
    (9, (_D.I, _D.X)),
    (5, (_D.V,)),
    (4, (_D.I, _D.V)),
    (1, (_D.I,)),
)


@dataclass(frozen=True)
class RomanNumber:
    digits: tuple[RomanDigit, ...]

    @classmethod
    def from_int(cls, value: int) -> "RomanNumber":
        """Build the numeral for a non-negative integer; 0 becomes Nulla."""
        if value < 0:
            raise ValueError("value must not be negative")
        if value == 0:
            return cls((RomanDigit.NULLA,))
        digits: list[RomanDigit] = []
        for amount, symbols in _STEPS:
            count, value = divmod(value, amount)
            digits.extend(symbols * count)
        return cls(tuple(digits))

    def __str__(self) -> str:
        return "".join(digit.value for digit in self.digits)