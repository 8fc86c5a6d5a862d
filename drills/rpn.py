"""Evaluate integer expressions in reverse Polish notation."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, Sequence

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_NUMBER = re.compile(r"[+-]?[0-9]+")


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ValueError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncating_mod(left: int, right: int) -> int:
    if right == 0:
        raise ValueError("division by zero")
    return left - right * _truncating_div(left, right)


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_div,
    "%": _truncating_mod,
}


def _parse_number(token: str) -> int:
    if not _NUMBER.fullmatch(token):
        raise ValueError(f"invalid token: {token!r}")
    value = int(token)
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"number out of range: {token!r}")
    return value


def rpn(expression: str) -> int:
    """Evaluate ``expression``; raise ValueError if it is malformed."""
    stack: list[int] = []
    for token in expression.split():
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(_parse_number(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {token!r}")
        right = stack.pop()
        left = stack.pop()
        result = operator(left, right)
        if not _I64_MIN <= result <= _I64_MAX:
            raise ValueError("arithmetic overflow")
        stack.append(result)
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the value of the expression given as arguments, or ``Error``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        print(rpn(" ".join(args)))
    except ValueError:
        print("Error")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())