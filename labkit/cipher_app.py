"""Command-line front end for the Caesar cipher."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from labkit.caesar_cipher import CaesarCipher

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN, _INT_MAX = -(1 << 31), (1 << 31) - 1


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
        "This is a caesar cipher application.\n\n"
        "Please provide arguments in the following format:\n\n"
        f"\t$ {prog} <op type> <number of words> <words>\n\n"
        'Where <op_type> may be "d" or "e"\n\n'
        "(decoding and encoding respectively)"
        "<number of words> is an integer\n\n"
        "<words> is a string"
    )


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
        return f"[ERROR] Should be at least 4 elements. Type `$ {prog}` to see help"
    op = args[0]
    if op not in ("d", "e"):
        return f'[ERROR] <op_type> must be only "d" or "e"Type `$ {prog}` to see help'
    try:
        size = parse_uint(args[1])
    except ValueError as error:
        return (
            f"[ERROR] Can't parse <number of words>: {error}. "
            f"Type `$ {prog}` to see help"
        )
    words = args[2:]
    if size != len(words):
        return (
            "[ERROR] Elements count doesn't match <number of words>. "
            f"Type `$ {prog}` to see help"
        )
    text = " ".join(words)
    cipher = CaesarCipher()
    return cipher.decode(text) if op == "d" else cipher.encode(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output for ``argv`` (defaults to ``sys.argv``)."""
    print(run(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())