"""A two-bay garage whose contents can be pushed to one side."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Garage:
    left: Optional[Any] = None
    right: Optional[Any] = None

    def move_to_right(self) -> None:
        """Merge both bays into the right one and empty the left."""
        if self.left is not None and self.right is not None:
            self.right = self.left + self.right
        self.left = None

    def move_to_left(self) -> None:
        """Merge both bays into the left one and empty the right."""
        if self.left is not None and self.right is not None:
            self.left = self.right + self.left
        self.right = None