"""Arithmetic on numbers written in different positional bases, and base conversion.

Digits above nine are the letters ``A``-``F`` (``a``-``f`` are accepted on input).
Results are written with upper-case letters.
"""

from __future__ import annotations

import re
from itertools import dropwhile
from typing import Callable

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN, _INT_MAX = -(1 << 31), (1 << 31) - 1


def _cdivmod(a: int, b: int) -> tuple[int, int]:
    """Divide with the quotient truncated toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _lenient_digit(ch: str) -> int:
    """Value of a hexadecimal digit; anything else counts as zero."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    return 0


def _strict_digit(ch: str) -> int:
    """Value of a hexadecimal digit; raises ValueError for anything else."""
    if "0" <= ch <= "9" or "A" <= ch <= "F" or "a" <= ch <= "f":
        return _lenient_digit(ch)
    raise ValueError(f"invalid digit {ch!r}")


def _raw_digit(ch: str) -> int:
    """Value of a decimal digit, or the character's distance from ``A`` plus ten."""
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    return ord(ch) - ord("A") + 10


def _digit_char(digit: int) -> str:
    if 0 <= digit <= 9:
        return chr(digit + ord("0"))
    return chr((digit - 10 + ord("A")) % 256)


def _to_decimal(num: str, base: int, digit: Callable[[str], int]) -> int:
    value = 0
    for ch in num:
        value = value * base + digit(ch)
    return value


def _to_base(value: int, base: int) -> str:
    """Write a value in ``base``; a value that is not positive gives an empty string."""
    if value > 0 and base < 2:
        raise ValueError(f"cannot write a number in base {base}")
    digits: list[str] = []
    while value > 0:
        value, digit = _cdivmod(value, base)
        digits.append(_digit_char(digit))
    return "".join(reversed(digits))


def _stoi(value: str) -> int:
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"no integer in {value!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def add(num1: str, base1: int, num2: str, base2: int) -> str:
    """Return the sum, written in the larger of the two bases.

    Characters that are not digits count as zero.
    """
    total = _to_decimal(num1, base1, _lenient_digit) + _to_decimal(
        num2, base2, _lenient_digit
    )
    return _to_base(total, max(base1, base2)) or "0"


def subtract(num1: str, base1: int, num2: str, base2: int) -> str:
    """Return ``num1 - num2`` written in ``base1``.

    A negative result is ``-`` followed by ``num2 - num1`` written in ``base2``.
    Raises ValueError for a character that is not a digit.
    """
    difference = _to_decimal(num1, base1, _strict_digit) - _to_decimal(
        num2, base2, _strict_digit
    )
    if difference < 0:
        return "-" + subtract(num2, base2, num1, base1)
    return _to_base(difference, base1) or "0"


def multiply(num1: str, base1: int, num2: str, base2: int) -> str:
    """Multiply digit by digit in ``base1``, reading the digits of both numbers as is.

    ``base2`` takes no part. Letters are valued by their distance from ``A``,
    so lower-case letters give large digit values.
    """
    digits1 = [_raw_digit(ch) for ch in num1]
    digits2 = [_raw_digit(ch) for ch in num2]
    product = [0] * (len(digits1) + len(digits2))

    for i, digit1 in reversed(list(enumerate(digits1))):
        carry = 0
        for j, digit2 in reversed(list(enumerate(digits2))):
            partial = digit1 * digit2 + carry + product[i + j + 1]
            carry, product[i + j + 1] = _cdivmod(partial, base1)
        product[i] += carry

    significant = list(dropwhile(lambda d: d == 0, product))
    if not significant:
        return "0"
    return "".join(_digit_char(d) for d in significant)


def divide(num1: str, base1: int, num2: str, base2: int) -> str:
    """Return the integer quotient ``num1 / num2`` written in ``base1``.

    Either number may start with ``-``. Raises ZeroDivisionError for a zero
    divisor and ValueError for a character that is not a digit.
    """
    negative = False
    if num1.startswith("-"):
        negative = not negative
        num1 = num1[1:]
    if num2.startswith("-"):
        negative = not negative
        num2 = num2[1:]

    dividend = _to_decimal(num1, base1, _strict_digit)
    divisor = _to_decimal(num2, base2, _strict_digit)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient, _ = _cdivmod(dividend, divisor)

    text = "0" if quotient == 0 else _to_base(quotient, base1)
    return "-" + text if negative else text


def convert(num: str, base1: int, base2: int) -> str:
    """Rewrite ``num`` from ``base1`` into ``base2``.

    Decimal input is read like a C integer prefix and may be signed. A result
    that is zero or negative gives an empty string. Raises ValueError for
    input that cannot be read.
    """
    if base1 == 10:
        value = _stoi(num)
    else:
        value = _to_decimal(num, base1, _strict_digit)
    return _to_base(value, base2)