"""Complex numbers whose equality tolerates rounding at machine epsilon."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

EPSILON = sys.float_info.epsilon


def _is_zero(re: float, im: float) -> bool:
    return -EPSILON < re < EPSILON and -EPSILON < im < EPSILON


@dataclass(eq=False)
class ComplexNumber:
    """A complex number with a real part ``re`` and an imaginary part ``im``."""

    re: float = 0.0
    im: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.re + other.re, self.im + other.im)

    def __sub__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.re - other.re, self.im - other.im)

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __truediv__(self, other: ComplexNumber) -> ComplexNumber:
        """Divide; raises ZeroDivisionError when the divisor is within epsilon of zero."""
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        if _is_zero(other.re, other.im):
            raise ZeroDivisionError("Can't divide by zero")
        denominator = 1.0 / (other.re * other.re + other.im * other.im)
        return ComplexNumber(
            denominator * self.re * other.re + denominator * self.im * other.im,
            denominator * self.im * other.re - denominator * self.re * other.im,
        )

    def __eq__(self, other: object) -> bool:
        """Equal when both parts differ by less than machine epsilon."""
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        diff = self - other
        return _is_zero(diff.re, diff.im)

    def magnitude(self) -> float:
        """Return the absolute value."""
        return math.sqrt(self.re * self.re + self.im * self.im)

    def argument(self) -> float:
        """Return the phase angle in radians."""
        return math.atan2(self.im, self.re)