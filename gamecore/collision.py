"""Collision shapes attached to game objects."""

from __future__ import annotations

from abc import abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

from .component import Component
from .logger import Logger
from .rect import IRect, Rect
from .vec2 import IVec2, Vec2

if TYPE_CHECKING:
    from .gameobject import GameObject


class CollisionShape(Enum):
    """The geometric kind of a collider."""

    RECT = auto()
    CIRCLE = auto()


class Collision(Component):
    """A collider attached to a game object.

    ``is_colliding_with`` accepts either another game object or a point.
    """

    shape: CollisionShape

    def __init__(self, obj: GameObject, logger: Logger | None = None) -> None:
        self.object = obj
        self._logger = logger

    def _log_error(self, text: str) -> None:
        if self._logger is not None:
            self._logger.log_error(text)

    def is_colliding_with(self, other: Union[GameObject, Vec2, IVec2]) -> bool:
        """Test against another object's collider or against a point."""
        if isinstance(other, IVec2):
            other = other.to_vec2()
        if isinstance(other, Vec2):
            return self._contains_point(other)
        return self._collides_with_object(other)

    def _other_collider(self, other: GameObject, message: str) -> Collision | None:
        collider = other.get_component(Collision)
        if collider is None:
            return None
        if collider.shape is not self.shape:
            self._log_error(message)
            return None
        return collider

    @abstractmethod
    def _collides_with_object(self, other: GameObject) -> bool:
        """Whether this collider overlaps ``other``'s collider."""

    @abstractmethod
    def _contains_point(self, point: Vec2) -> bool:
        """Whether ``point`` lies inside this collider."""


class RectCollision(Collision):
    """An axis-aligned box given in the owning object's local space."""

    shape = CollisionShape.RECT

    def __init__(
        self, boundary: IRect, obj: GameObject, logger: Logger | None = None
    ) -> None:
        super().__init__(obj, logger)
        self.boundary = boundary

    def world_boundary(self) -> Rect:
        """Return the boundary transformed by the owning object's matrix."""
        matrix = self.object.matrix()
        return Rect(
            matrix * self.boundary.point_1.to_vec2(),
            matrix * self.boundary.point_2.to_vec2(),
        )

    def is_colliding_with(self, other: Union[GameObject, Vec2, IVec2]) -> bool:
        return super().is_colliding_with(other)

    def _collides_with_object(self, other: GameObject) -> bool:
        collider = self._other_collider(other, "Rect vs unsupported type")
        if collider is None:
            return False
        assert isinstance(collider, RectCollision)
        a = self.world_boundary()
        b = collider.world_boundary()
        return (
            a.left() < b.right()
            and a.right() > b.left()
            and a.bottom() < b.top()
            and a.top() > b.bottom()
        )

    def _contains_point(self, point: Vec2) -> bool:
        box = self.world_boundary()
        return (
            box.left() <= point.x <= box.right()
            and box.bottom() <= point.y <= box.top()
        )


class CircleCollision(Collision):
    """A circle centred on the owning object's position."""

    shape = CollisionShape.CIRCLE

    def __init__(
        self, radius: float, obj: GameObject, logger: Logger | None = None
    ) -> None:
        super().__init__(obj, logger)
        self._radius = radius

    def radius(self) -> float:
        """Return the radius scaled by the mean of the object's scale."""
        scale = self.object.scale
        return self._radius * (scale.x + scale.y) / 2.0

    def is_colliding_with(self, other: Union[GameObject, Vec2, IVec2]) -> bool:
        return super().is_colliding_with(other)

    def _collides_with_object(self, other: GameObject) -> bool:
        collider = self._other_collider(other, "Circle vs unsupported type")
        if collider is None:
            return False
        assert isinstance(collider, CircleCollision)
        reach = self.radius() + collider.radius()
        diff = self.object.position - other.position
        return diff.x * diff.x + diff.y * diff.y < reach * reach

    def _contains_point(self, point: Vec2) -> bool:
        r = self.radius()
        diff = self.object.position - point
        return diff.x * diff.x + diff.y * diff.y <= r * r