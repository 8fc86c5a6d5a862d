"""Follow a chain of offices to reach a document id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

_T = TypeVar("_T")


class OfficeError(Exception):
    """An office along the chain could not pass the request on."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.code == other.code  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.code))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code})"


class OfficeClosed(OfficeError):
    """The office is closed."""


class OfficeNotFound(OfficeError):
    """The office does not exist."""


class OfficeFull(OfficeError):
    """The office is full."""


def _unwrap(step: Union[_T, OfficeError]) -> _T:
    if isinstance(step, OfficeError):
        raise step
    return step


@dataclass(frozen=True)
class OfficeFour:
    document_id: Union[int, OfficeError]


@dataclass(frozen=True)
class OfficeThree:
    next_office: Union[OfficeFour, OfficeError]


@dataclass(frozen=True)
class OfficeTwo:
    next_office: Union[OfficeThree, OfficeError]


@dataclass(frozen=True)
class OfficeOne:
    next_office: Union[OfficeTwo, OfficeError]

    def get_document_id(self) -> int:
        """Return the document id, raising the first office error met."""
        two = _unwrap(self.next_office)
        three = _unwrap(two.next_office)
        four = _unwrap(three.next_office)
        return _unwrap(four.document_id)