"""Euler's totient function."""

from __future__ import annotations

import operator


def euler_function(value: int) -> int:
    """Count the integers in [1, value] that are coprime with ``value``.

    Raises ValueError for a value that is not positive.
    """
    value = operator.index(value)
    if value <= 0:
        raise ValueError("value <= 0")

    result = 1
    number = 2
    while number * number <= value:
        if value % number == 0:
            power = 1
            while value % number == 0:
                value //= number
                power *= number
            result *= power - power // number
        number += 1 if number == 2 else 2
    if value > 1:
        result *= value - 1
    return result