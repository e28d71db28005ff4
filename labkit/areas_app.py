"""Command-line front end that prints the area of a sphere, cylinder or box."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from labkit.areas import Cylinder, Parallelepiped, Sphere

_FLOAT_PREFIX = re.compile(
    r"""\s*(?P<num>[+-]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
        |(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
        |inf(?:inity)?
        |nan
    ))""",
    re.IGNORECASE | re.VERBOSE,
)

_FIGURES = {
    1: ("Sphere", Sphere),
    2: ("Cylinder", Cylinder),
    3: ("Parallelepiped", Parallelepiped),
}


def _help(prog: str) -> str:
    return (
        "This application is used to find the areas of figures"
        " such as a Parallelepiped, a Sphere and a Cylinder.\n\n"
        "Use the following examples to find the area of a given figure:\n\n"
        f"$ {prog} <radius> - to find Sphere area\n\n"
        f"  $ {prog} <radius> <height> - to find Cylinder area\n\n"
        f"  $ {prog} <width> <height> <length> - to find Parallelepiped area\n\n"
        "Where all values are double.\n "
    )


def parse_double(arg: str) -> float:
    """Parse the leading number of ``arg``; a result of zero is an error."""
    match = _FLOAT_PREFIX.match(arg)
    value = 0.0
    if match:
        text = match.group("num")
        value = float.fromhex(text) if "x" in text.lower() else float(text)
    if value == 0.0:
        raise ValueError("Invalid argument format!")
    return value


def run(argv: Sequence[str]) -> str:
    """Return the program's output for a full command line, program name first."""
    prog, *args = argv
    if not args:
        return _help(prog)
    if len(args) > 3:
        return "Input must contain no more than three arguments!"
    try:
        values = [parse_double(arg) for arg in args]
    except ValueError as error:
        return f"Parsing is failed. {error}\n"
    for value in values:
        if value <= 0:
            return f"Argument is negative or zero: {value:.6f}\n"
    name, figure = _FIGURES[len(values)]
    return f"{name} area is {figure(*values).area():.6f}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output for ``argv`` (defaults to ``sys.argv``)."""
    print(run(sys.argv if argv is None else argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())