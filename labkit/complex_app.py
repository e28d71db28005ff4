"""Command-line calculator for two complex numbers."""

from __future__ import annotations

import operator
import re
import sys
from typing import Callable, Sequence

from labkit.complex_number import ComplexNumber

_WS = " \t\n\v\f\r"

_NUMBER = re.compile(
    r"""[ \t\n\v\f\r]*(?P<sign>[+-]?)(?:
        (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
        |(?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)
        |(?P<inf>inf(?:inity)?)
        |(?P<nan>nan(?:\([0-9a-z_]*\))?)
    )""",
    re.IGNORECASE | re.VERBOSE,
)

_OPERATIONS: dict[str, Callable[[ComplexNumber, ComplexNumber], ComplexNumber]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _help(prog: str, message: str = "") -> str:
    return (
        f"{message}"
        "This is a complex number calculator application.\n\n"
        "Please provide arguments in the following format:\n\n"
        f"  $ {prog} <z1_real> <z1_imaginary> <z2_real> <z2_imaginary> <operation>\n\n"
        "Where all arguments are double-precision numbers, "
        "and <operation> is one of '+', '-', '*', '/'.\n"
    )


def parse_double(arg: str) -> float:
    """Parse ``arg`` as a whole floating-point number.

    Raises ValueError when anything but the number is left over.
    """
    if arg == "":
        return 0.0
    match = _NUMBER.fullmatch(arg)
    if match is None:
        raise ValueError("Wrong number format!")
    sign = match.group("sign")
    if match.group("hex"):
        return float.fromhex(sign + match.group("hex"))
    if match.group("nan"):
        return float(sign + "nan")
    if match.group("inf"):
        return float(sign + "inf")
    return float(sign + match.group("dec"))


def parse_operation(arg: str) -> str:
    """Return the operation symbol; raises ValueError for an unknown one."""
    if arg not in _OPERATIONS:
        raise ValueError("Wrong operation format!")
    return arg


def run(argv: Sequence[str]) -> str:
    """Return the program's output for a full command line, program name first."""
    prog, *args = argv
    if not args:
        return _help(prog)
    if len(args) != 5:
        return _help(prog, "ERROR: Should be 5 arguments.\n\n")
    try:
        z1_re, z1_im, z2_re, z2_im = (parse_double(arg) for arg in args[:4])
        op = parse_operation(args[4])
    except ValueError as error:
        return str(error)

    try:
        z = _OPERATIONS[op](ComplexNumber(z1_re, z1_im), ComplexNumber(z2_re, z2_im))
    except ZeroDivisionError as error:
        return str(error)
    return f"Real = {z.re:g} Imaginary = {z.im:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output for ``argv`` (defaults to ``sys.argv``)."""
    print(run(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())