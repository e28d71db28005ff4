"""Surface areas of a few solid figures."""

from __future__ import annotations

from dataclasses import dataclass

PI = 3.14


@dataclass
class Parallelepiped:
    """A rectangular box."""

    width: float
    height: float
    length: float

    def area(self) -> float:
        """Return the surface area, or 0 if any dimension is not positive."""
        if self.width <= 0 or self.height <= 0 or self.length <= 0:
            return 0.0
        return 2 * (
            self.length * self.width + self.length * self.height + self.width * self.height
        )


@dataclass
class Cylinder:
    """A closed right circular cylinder."""

    radius: float
    height: float

    def area(self) -> float:
        """Return the surface area, or 0 if any dimension is not positive."""
        if self.radius <= 0 or self.height <= 0:
            return 0.0
        return 2 * PI * self.radius * (self.height + self.radius)


@dataclass
class Sphere:
    """A sphere."""

    radius: float

    def area(self) -> float:
        """Return the surface area, or 0 if the radius is not positive."""
        if self.radius <= 0:
            return 0.0
        return 4 * PI * self.radius * self.radius