"""Game states and the manager that loads, runs and unloads them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum, auto
from typing import Callable, TypeVar

from .component import Component, ComponentManager
from .gameobject_manager import GameObjectManager
from .logger import Logger

T = TypeVar("T", bound=Component)


class StateId(IntEnum):
    """Indices of the game's states, in the order they are added."""

    SPLASH = 0
    MAIN_MENU = 1
    MODE1 = 2
    MODE2 = 3
    MODE3 = 4


class FontId(IntEnum):
    """Indices of the game's fonts."""

    SIMPLE = 0
    OUTLINED = 1


class Status(Enum):
    """Phases of the game state manager."""

    STARTING = auto()
    LOADING = auto()
    UPDATING = auto()
    UNLOADING = auto()
    STOPPING = auto()
    EXIT = auto()


class GameState(ABC):
    """One screen or mode of the game, owning its own components."""

    name: str = ""

    def __init__(self) -> None:
        self._components = ComponentManager()

    @abstractmethod
    def load(self) -> None:
        """Prepare the state before it starts running."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    @abstractmethod
    def unload(self) -> None:
        """Release what ``load`` set up."""

    @abstractmethod
    def draw(self) -> None:
        """Render the state."""

    def get_component(self, kind: type[T]) -> T | None:
        return self._components.get(kind)

    def add_component(self, component: Component) -> None:
        self._components.add(component)

    def update_components(self, dt: float) -> None:
        self._components.update_all(dt)

    def remove_component(self, kind: type[Component]) -> None:
        self._components.remove(kind)

    def clear_components(self) -> None:
        self._components.clear()


class GameStateManager:
    """Steps through loading, running and unloading the registered states."""

    def __init__(
        self,
        logger: Logger | None = None,
        on_unload: Callable[[], None] | None = None,
    ) -> None:
        self._logger = logger
        self._on_unload = on_unload
        self._gamestates: list[GameState] = []
        self._current: GameState | None = None
        self._next: GameState | None = None
        self._status = Status.STARTING

    @property
    def status(self) -> Status:
        return self._status

    @property
    def current_game_state(self) -> GameState | None:
        return self._current

    def add_game_state(self, gamestate: GameState) -> None:
        self._gamestates.append(gamestate)

    def set_next_game_state(self, index: int) -> None:
        """Switch to the state at ``index`` on a following update."""
        if not 0 <= index < len(self._gamestates):
            raise IndexError(f"no game state at index {index}")
        self._next = self._gamestates[index]

    def clear_next_game_state(self) -> None:
        """Ask the manager to stop once the current state is unloaded."""
        self._next = None

    def reload_state(self) -> None:
        """Unload the current state and load the next one again."""
        if self._current is None:
            raise RuntimeError("no game state is loaded")
        self._status = Status.UNLOADING

    def has_game_ended(self) -> bool:
        return self._status is Status.EXIT

    def get_component(self, kind: type[T]) -> T | None:
        """Look up a component of the running state."""
        if self._current is None:
            raise RuntimeError("no game state is loaded")
        return self._current.get_component(kind)

    def _log_event(self, text: str) -> None:
        if self._logger is not None:
            self._logger.log_event(text)

    def update(self, dt: float) -> None:
        """Advance the manager by one step of its state machine."""
        status = self._status
        if status is Status.STARTING:
            if self._gamestates:
                self._next = self._gamestates[0]
                self._status = Status.LOADING
            else:
                self._status = Status.STOPPING
        elif status is Status.LOADING:
            if self._next is None:
                raise RuntimeError("no game state to load")
            self._current = self._next
            self._log_event(f"Load {self._current.name}")
            self._current.load()
            self._log_event("Load Complete")
            self._status = Status.UPDATING
        elif status is Status.UPDATING:
            current = self._current
            assert current is not None
            if current is not self._next:
                self._status = Status.UNLOADING
                return
            if self._logger is not None:
                self._logger.log_verbose(current.name)
            current.update(dt)
            objects = current.get_component(GameObjectManager)
            if objects is not None:
                objects.collision_test()
            current.draw()
        elif status is Status.UNLOADING:
            current = self._current
            assert current is not None
            self._log_event(f"Unload {current.name}")
            current.unload()
            if self._on_unload is not None:
                self._on_unload()
            self._log_event("Unload Complete")
            self._status = Status.LOADING if self._next is not None else Status.STOPPING
        elif status is Status.STOPPING:
            self._status = Status.EXIT