"""Game objects: positioned, stateful entities carrying components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Callable, ClassVar, Mapping, Optional, TypeVar, Union

from .collision import Collision
from .component import Component, ComponentManager
from .matrix import (
    TransformationMatrix,
    rotation_matrix,
    scale_matrix,
    translation_matrix,
)
from .vec2 import IVec2, Vec2

T = TypeVar("T", bound=Component)


class GameObjectType(Enum):
    """Kinds of objects that collision rules can tell apart."""

    CAT = auto()
    ROBOT = auto()
    ASTEROID = auto()
    CRATES = auto()
    METEOR = auto()
    SHIP = auto()
    FLOOR = auto()
    PORTAL = auto()
    LASER = auto()
    PARTICLE = auto()
    PLAYER = auto()
    OTHER_CAR = auto()
    OTHER_CAR_MANAGER = auto()


class State(ABC):
    """One state of a game object's state machine."""

    name: str = ""

    @abstractmethod
    def enter(self, obj: GameObject) -> None:
        """Called when ``obj`` switches into this state."""

    @abstractmethod
    def update(self, obj: GameObject, dt: float) -> None:
        """Called every frame before the object moves."""

    @abstractmethod
    def check_exit(self, obj: GameObject) -> None:
        """Called every frame after the object moves and its components update."""


CollisionResponse = Callable[["GameObject", "GameObject"], None]


class GameObject(ABC):
    """An object in the world with a transform, a state and components."""

    #: Types of objects this kind of object reacts to touching.
    collides_with: ClassVar[frozenset[GameObjectType]] = frozenset()
    #: Reaction to touching an object of a given type: ``handler(self, other)``.
    collision_responses: ClassVar[Mapping[GameObjectType, CollisionResponse]] = {}

    def __init__(
        self,
        position: Vec2,
        rotation: float = 0.0,
        scale: Vec2 | None = None,
    ) -> None:
        self._position = position
        self._velocity = Vec2(0.0, 0.0)
        self._scale = Vec2(1.0, 1.0) if scale is None else scale
        self._rotation = float(rotation)
        self._matrix = TransformationMatrix()
        self._matrix_outdated = True
        self._destroyed = False
        self._components = ComponentManager()
        self.current_state: Optional[State] = None

    @property
    @abstractmethod
    def object_type(self) -> GameObjectType:
        """The kind of this object."""

    @abstractmethod
    def type_name(self) -> str:
        """A readable name for this kind of object."""

    @property
    def position(self) -> Vec2:
        return self._position

    @property
    def velocity(self) -> Vec2:
        return self._velocity

    @property
    def scale(self) -> Vec2:
        return self._scale

    @property
    def rotation(self) -> float:
        return self._rotation

    def is_colliding_with(self, other: Union[GameObject, Vec2, IVec2]) -> bool:
        """Test this object's collider against another object or a point."""
        collider = self.get_component(Collision)
        return collider is not None and collider.is_colliding_with(other)

    def can_collide_with(self, other_type: GameObjectType) -> bool:
        """Whether this object reacts to objects of ``other_type``."""
        return other_type in self.collides_with

    def resolve_collision(self, other: GameObject) -> None:
        """React to touching ``other`` with the response for its type, if any."""
        response = self.collision_responses.get(other.object_type)
        if response is not None:
            response(self, other)

    def update(self, dt: float) -> None:
        """Run the state, move by velocity, update components, check exits."""
        state = self.current_state
        if state is not None:
            state.update(self, dt)
        if self._velocity.x != 0 or self._velocity.y != 0:
            self.update_position(self._velocity * dt)
        self._components.update_all(dt)
        state = self.current_state
        if state is not None:
            state.check_exit(self)

    def change_state(self, new_state: State) -> None:
        self.current_state = new_state
        new_state.enter(self)

    def matrix(self) -> TransformationMatrix:
        """Return translation * rotation * scale, rebuilt only when stale."""
        if self._matrix_outdated:
            self._matrix = (
                translation_matrix(self._position)
                * rotation_matrix(self._rotation)
                * scale_matrix(self._scale)
            )
            self._matrix_outdated = False
        return self._matrix

    def set_position(self, new_position: Vec2) -> None:
        self._position = new_position
        self._matrix_outdated = True

    def update_position(self, delta: Vec2) -> None:
        self._position = self._position + delta
        self._matrix_outdated = True

    def set_velocity(self, new_velocity: Vec2) -> None:
        self._velocity = new_velocity

    def update_velocity(self, delta: Vec2) -> None:
        self._velocity = self._velocity + delta

    def set_scale(self, new_scale: Vec2) -> None:
        self._scale = new_scale
        self._matrix_outdated = True

    def update_scale(self, delta: Vec2) -> None:
        self._scale = self._scale + delta
        self._matrix_outdated = True

    def set_rotation(self, new_rotation: float) -> None:
        self._rotation = float(new_rotation)
        self._matrix_outdated = True

    def update_rotation(self, delta: float) -> None:
        self._rotation += delta
        self._matrix_outdated = True

    def get_component(self, kind: type[T]) -> T | None:
        return self._components.get(kind)

    def add_component(self, component: Component) -> None:
        self._components.add(component)

    def remove_component(self, kind: type[Component]) -> None:
        self._components.remove(kind)

    def clear_components(self) -> None:
        self._components.clear()

    def destroy(self) -> None:
        """Mark this object for removal by its manager."""
        self._destroyed = True

    def destroyed(self) -> bool:
        return self._destroyed