"""Reading and checking the numbers a run starts from."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def is_valid_number(arg: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    return bool(arg) and _NUMBER.fullmatch(arg) is not None


def split_words(text: str, separator: str) -> list[str]:
    """The non-empty pieces of text between runs of the separator."""
    return [word for word in text.split(separator) if word]


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Convert the arguments to integers, rejecting bad syntax, range and repeats."""
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not is_valid_number(arg):
            raise InputError(f"not a number: {arg!r}")
        number = int(arg)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"out of range: {arg!r}")
        if number in seen:
            raise InputError(f"duplicate: {arg!r}")
        seen.add(number)
        numbers.append(number)
    return numbers