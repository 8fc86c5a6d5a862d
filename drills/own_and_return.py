"""Reading a film's name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Film:
    name: str


def read_film_name(film: Film) -> str:
    """Return the film's name, leaving the film usable."""
    return film.name


def take_film_name(film: Film) -> str:
    """Return the film's name; the caller is done with the film."""
    return film.name