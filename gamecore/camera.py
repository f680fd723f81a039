"""A side-scrolling camera that follows a player within limits."""

from __future__ import annotations

from .component import Component
from .matrix import TransformationMatrix, translation_matrix
from .rect import IRect, Rect
from .vec2 import Vec2


class Camera(Component):
    """Keeps the player inside ``player_zone`` and the view inside ``limit``."""

    def __init__(self, player_zone: Rect) -> None:
        self.player_zone = player_zone
        self.position = Vec2(0.0, 0.0)
        self.limit = IRect()

    def update(self, player_position: Vec2) -> None:  # type: ignore[override]
        """Scroll horizontally to follow the player, then clamp to the limit."""
        x, y = self.position.x, self.position.y
        if player_position.x > self.player_zone.right() + x:
            x = player_position.x - self.player_zone.right()
        if player_position.x - x < self.player_zone.left():
            x = player_position.x - self.player_zone.left()

        x = min(max(x, self.limit.left()), self.limit.right())
        y = min(max(y, self.limit.bottom()), self.limit.top())
        self.position = Vec2(x, y)

    def matrix(self) -> TransformationMatrix:
        """Return the world-to-view translation."""
        return translation_matrix(-self.position)