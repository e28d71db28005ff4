"""Command-line front end for binary search."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from labkit.binary_search import find

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN, _INT_MAX = -(1 << 31), (1 << 31) - 1

_LOGO = "\n".join(
    (
        "#####################################################################",
        "#   ____  _                                                  _      #",
        "#  | __ )(_)_ __   __ _ _ __ _   _   ___  ___  __ _ _ __ ___| |__   #",
        r"#  |  _ \| | '_ \ / _` | '__| | | | / __|/ _ \/ _` | '__/ __| '_ \  #",
        r"#  | |_) | | | | | (_| | |  | |_| | \__ \  __/ (_| | | | (__| | | | #",
        r"#  |____/|_|_| |_|\__,_|_|   \__, | |___/\___|\__,_|_|  \___|_| |_| #",
        "#                            |___/                                  #",
        "#####################################################################",
    )
)


def _stoi(value: str) -> int:
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ValueError("no digits")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError("out of range")
    return number


def _help(prog: str) -> str:
    return (
        f"{_LOGO}\n\n"
        "This is a binary search application\n"
        "Use this application if you want to find element index in sorted array.\n\n"
        "Please provide arguments in the following format:\n\n"
        f"\t$ {prog} <search element> <array size> <array element> ... <array element>\n\n"
        "Where <array size> is a positive integer and others arguments are integers\n"
    )


def _see_help(prog: str) -> str:
    return f"Type `$ {prog}` to see help"


def parse_int(value: str) -> int:
    """Parse an integer prefix; raises ValueError when there is none."""
    try:
        return _stoi(value)
    except ValueError:
        raise ValueError("Expected integer") from None


def parse_uint(value: str) -> int:
    """Parse a non-negative integer prefix; raises ValueError otherwise."""
    try:
        number = _stoi(value)
    except ValueError:
        raise ValueError("Expected positive integer") from None
    if number < 0:
        raise ValueError("Expected positive integer")
    return number


def run(argv: Sequence[str]) -> str:
    """Return the program's output for a full command line, program name first."""
    prog, *args = argv
    if not args:
        return _help(prog)
    if len(args) < 3:
        return f"[ERROR] Should be at least 4 elements. {_see_help(prog)}"
    try:
        size = parse_uint(args[1])
    except ValueError as error:
        return f"[ERROR] Can't parse <array size>: {error}. {_see_help(prog)}"
    if size == 0:
        return f"[ERROR] Array must be not empty. {_see_help(prog)}"
    if size != len(args) - 2:
        return f"[ERROR] Elements count doesn't match <array size>. {_see_help(prog)}"

    try:
        target = parse_int(args[0])
    except ValueError as error:
        return f"[ERROR] Can't parse <search element>: {error}. {_see_help(prog)}"
    try:
        array = [parse_int(arg) for arg in args[2:]]
    except ValueError as error:
        return f"[ERROR] Can't parse <array element>: {error}. {_see_help(prog)}"

    if any(b < a for a, b in zip(array, array[1:])):
        return f"[ERROR] Array is not sorted. {_see_help(prog)}"

    index = find(array, target)
    if index == -1:
        return "Element not found"
    return f"Find element at {index}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output for ``argv`` (defaults to ``sys.argv``)."""
    print(run(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())