"""Nested optional layers read down to the innermost value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Four:
    fourth_layer: Optional[int] = None


@dataclass(frozen=True)
class Three:
    third_layer: Optional[Four] = None


@dataclass(frozen=True)
class Two:
    second_layer: Optional[Three] = None


@dataclass(frozen=True)
class One:
    first_layer: Optional[Two] = None

    def get_fourth_layer(self) -> Optional[int]:
        """Return the innermost value, or None if any layer is missing."""
        two = self.first_layer
        if two is None:
            return None
        three = two.second_layer
        if three is None:
            return None
        four = three.third_layer
        if four is None:
            return None
        return four.fourth_layer