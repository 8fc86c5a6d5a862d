"""Office workers parsed from ``name,age,role`` records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WorkerRole(Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"

    @classmethod
    def parse(cls, value: str) -> "WorkerRole":
        """Return the role named by ``value``; raise ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Invalid role") from None


@dataclass(frozen=True)
class OfficeWorker:
    name: str
    age: int
    role: WorkerRole

    @classmethod
    def parse(cls, value: str) -> "OfficeWorker":
        """Build a worker from a ``name,age,role`` string."""
        parts = value.split(",")
        if len(parts) < 3:
            raise ValueError(f"expected 'name,age,role', got {value!r}")
        name, age_text, role_text = parts[0], parts[1], parts[2]
        if not age_text.isdigit():
            raise ValueError(f"invalid age: {age_text!r}")
        return cls(name=name, age=int(age_text), role=WorkerRole.parse(role_text))