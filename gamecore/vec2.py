"""Two-dimensional vectors with floating point and integer components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: object) -> Vec2:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> Vec2:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec2(self.x / divisor, self.y / divisor)

    def normalize(self) -> Vec2:
        """Return the unit vector in this direction, or the zero vector."""
        length = math.hypot(self.x, self.y)
        if length == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)


@dataclass(frozen=True)
class IVec2:
    """A 2D vector of integers."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def to_vec2(self) -> Vec2:
        """Convert to a floating point vector."""
        return Vec2(float(self.x), float(self.y))

    def __neg__(self) -> IVec2:
        return IVec2(-self.x, -self.y)

    def __add__(self, other: object) -> IVec2:
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> IVec2:
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: object) -> IVec2 | Vec2:
        if isinstance(scale, int):
            return IVec2(self.x * scale, self.y * scale)
        if isinstance(scale, float):
            return Vec2(self.x * scale, self.y * scale)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> IVec2 | Vec2:
        if isinstance(divisor, int):
            if divisor == 0:
                raise ZeroDivisionError("integer vector division by zero")
            return IVec2(_trunc_div(self.x, divisor), _trunc_div(self.y, divisor))
        if isinstance(divisor, float):
            return Vec2(self.x / divisor, self.y / divisor)
        return NotImplemented