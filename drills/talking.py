"""Canned replies depending on how something is said."""

from __future__ import annotations

EMPTY_REPLY = "Just say something!"
YELL_REPLY = "There is no need to yell, calm down!"
YELLED_QUESTION_REPLY = "Quiet, I am thinking!"
QUESTION_REPLY = "Sure."
DEFAULT_REPLY = "Interesting"


def talking(text: str) -> str:
    """Return the reply to ``text``."""
    if not text.strip():
        return EMPTY_REPLY

    letters = [c for c in text if c.isalpha()]
    yelling = bool(letters) and all("A" <= c <= "Z" for c in letters)
    question = text.endswith("?")

    if yelling:
        return YELLED_QUESTION_REPLY if question else YELL_REPLY
    if question:
        return QUESTION_REPLY
    return DEFAULT_REPLY