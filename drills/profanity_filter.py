"""Reject empty or insulting chat messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_BANNED_WORD = "stupid"
_ILLEGAL = "ERROR: illegal"


@dataclass
class Message:
    content: str
    user: str

    def send_ms(self) -> Optional[str]:
        """Return the content if it may be sent, else None."""
        if not self.content or _BANNED_WORD in self.content:
            return None
        return self.content


def check_ms(ms: Message) -> tuple[bool, str]:
    """Return ``(True, content)`` for a sendable message, else ``(False, error)``."""
    content = ms.send_ms()
    if content is None:
        return False, _ILLEGAL
    return True, content