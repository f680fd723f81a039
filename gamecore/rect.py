"""Axis-aligned rectangles defined by two corner points."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec2 import IVec2, Vec2


@dataclass
class Rect:
    """A rectangle with floating point corners, in any order."""

    point_1: Vec2 = field(default_factory=Vec2)
    point_2: Vec2 = field(default_factory=Vec2)

    def left(self) -> float:
        return min(self.point_1.x, self.point_2.x)

    def right(self) -> float:
        return max(self.point_1.x, self.point_2.x)

    def bottom(self) -> float:
        return min(self.point_1.y, self.point_2.y)

    def top(self) -> float:
        return max(self.point_1.y, self.point_2.y)

    def size(self) -> Vec2:
        return Vec2(self.right() - self.left(), abs(self.top() - self.bottom()))


@dataclass
class IRect:
    """A rectangle with integer corners, in any order."""

    point_1: IVec2 = field(default_factory=IVec2)
    point_2: IVec2 = field(default_factory=IVec2)

    def left(self) -> int:
        return min(self.point_1.x, self.point_2.x)

    def right(self) -> int:
        return max(self.point_1.x, self.point_2.x)

    def bottom(self) -> int:
        return min(self.point_1.y, self.point_2.y)

    def top(self) -> int:
        return max(self.point_1.y, self.point_2.y)

    def size(self) -> IVec2:
        return IVec2(self.right() - self.left(), abs(self.top() - self.bottom()))