"""A container that updates game objects and tests them for collisions."""

from __future__ import annotations

from typing import Iterator

from .component import Component
from .gameobject import GameObject
from .logger import Logger


class GameObjectManager(Component):
    """Owns the game objects of a state, in insertion order."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._objects: list[GameObject] = []
        self._logger = logger

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def add(self, obj: GameObject) -> None:
        self._objects.append(obj)

    def update_all(self, dt: float) -> None:
        """Update every object, then drop those that were destroyed."""
        for obj in self._objects:
            obj.update(dt)
        self._objects = [obj for obj in self._objects if not obj.destroyed()]

    def unload(self) -> None:
        self._objects.clear()

    def collision_test(self) -> None:
        """Let each object resolve collisions with the others it cares about."""
        for first in self._objects:
            for second in self._objects:
                if first is second:
                    continue
                if not first.can_collide_with(second.object_type):
                    continue
                if first.is_colliding_with(second):
                    if self._logger is not None:
                        self._logger.log_event(
                            f"Collision Detected: {first.type_name()} and "
                            f"{second.type_name()}"
                        )
                    first.resolve_collision(second)