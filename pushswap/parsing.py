"""Checking and converting the command-line numbers."""

from __future__ import annotations

import re
from typing import Iterable

_INT_MIN = -2147483648
_INT_MAX = 2147483647

_ATOL = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]*)([0-9]*)")
_SYNTAX = re.compile(r"[+-]?[0-9]*")


class ParseError(ValueError):
    """The arguments are not a list of distinct integers."""


def atol(text: str) -> int:
    """Read a leading integer after blanks and at most one sign; 0 if none."""
    sign, digits = _ATOL.match(text).groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Read a leading integer as a 32-bit int; two or more signs give 0."""
    signs, digits = _ATOI.match(text).groups()
    if len(signs) >= 2:
        return 0
    value = int(digits) if digits else 0
    if signs == "-":
        value = -value
    return (value - _INT_MIN) % (1 << 32) + _INT_MIN


def valid_syntax(args: Iterable[str]) -> bool:
    """True when every argument is non-empty, an optional sign and digits."""
    return all(arg and _SYNTAX.fullmatch(arg) for arg in args)


def has_duplicates(args: Iterable[str]) -> bool:
    """True when two arguments read as the same 32-bit integer."""
    numbers = [atoi(arg) for arg in args]
    return len(set(numbers)) != len(numbers)


def fits_int(args: Iterable[str]) -> bool:
    """True when every argument lies within the 32-bit signed range."""
    return all(_INT_MIN <= atol(arg) <= _INT_MAX for arg in args)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate the arguments and return them as integers, top first."""
    args = list(args)
    if not valid_syntax(args) or has_duplicates(args) or not fits_int(args):
        raise ParseError("Error")
    return [atol(arg) for arg in args]