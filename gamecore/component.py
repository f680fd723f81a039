"""Components attached to game objects and game states."""

from __future__ import annotations

from typing import Iterator, TypeVar

T = TypeVar("T", bound="Component")


class Component:
    """Base class for anything that can be attached and updated each frame."""

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds; does nothing by default."""


class ComponentManager:
    """An ordered collection of components looked up by type."""

    def __init__(self) -> None:
        self._components: list[Component] = []

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def update_all(self, dt: float) -> None:
        for component in self._components:
            component.update(dt)

    def add(self, component: Component) -> None:
        self._components.append(component)

    def get(self, kind: type[T]) -> T | None:
        """Return the first component that is an instance of ``kind``."""
        return next((c for c in self._components if isinstance(c, kind)), None)

    def remove(self, kind: type[Component]) -> None:
        """Remove the first component that is an instance of ``kind``."""
        component = self.get(kind)
        if component is None:
            raise LookupError(f"no {kind.__name__} component to remove")
        self._components.remove(component)

    def clear(self) -> None:
        self._components.clear()


class Timer(Component):
    """Counts down to zero and toggles a blink flag every update."""

    def __init__(self, time_remaining: float) -> None:
        self._timer = 0.0
        self._timer_max = 0.0
        self._blink = False
        self.set(time_remaining)

    def set(self, time_remaining: float) -> None:
        self._timer_max = time_remaining
        self.reset()
        self._blink = False

    def reset(self) -> None:
        self._timer = self._timer_max

    def update(self, dt: float) -> None:
        if self._timer >= 0:
            self._timer = max(self._timer - dt, 0)
        self._blink = not self._blink

    def remaining(self) -> float:
        return self._timer

    def remaining_int(self) -> int:
        return int(self._timer)

    def tick_tock(self) -> bool:
        return self._blink


class Score(Component):
    """An accumulating integer score."""

    def __init__(self) -> None:
        self._score = 0

    def add(self, value: int) -> None:
        self._score += value

    def value(self) -> int:
        return self._score


class Gravity(Component):
    """Holds the downward acceleration of a game state."""

    def __init__(self, value: float) -> None:
        self.value = value