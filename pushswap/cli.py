"""Command line entry: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_numbers, split_words
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on the arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    if len(args) == 1:
        if args[0] == "":
            sys.stderr.write("Error\n")
            return 0
        words = split_words(args[0], " ")
        if not words:
            return 1
    else:
        words = args
    try:
        numbers = parse_numbers(words)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in solve(numbers):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())