import io

import pytest

from gamecore.collision import RectCollision
from gamecore.component import Timer
from gamecore.gameobject import GameObject, GameObjectType
from gamecore.gameobject_manager import GameObjectManager
from gamecore.gamestate import (
    FontId,
    GameState,
    GameStateManager,
    StateId,
    Status,
)
from gamecore.logger import Logger, Severity
from gamecore.rect import IRect
from gamecore.vec2 import IVec2, Vec2


class RecordingState(GameState):
    def __init__(self, name):
        super().__init__()
        self.name = name
        self.calls = []

    def load(self):
        self.calls.append("load")

    def update(self, dt):
        self.calls.append(("update", dt))

    def unload(self):
        self.calls.append("unload")

    def draw(self):
        self.calls.append("draw")


class Box(GameObject):
    def __init__(self, position):
        super().__init__(position)
        self.hits = []
        self.add_component(RectCollision(IRect(IVec2(0, 0), IVec2(10, 10)), self))

    @property
    def object_type(self):
        return GameObjectType.CRATES

    def type_name(self):
        return "Box"

    def can_collide_with(self, other_type):
        return True

    def resolve_collision(self, other):
        self.hits.append(other)


class BoxState(RecordingState):
    def load(self):
        super().load()
        self.first = Box(Vec2(0, 0))
        self.second = Box(Vec2(5, 5))
        objects = GameObjectManager()
        objects.add(self.first)
        objects.add(self.second)
        self.add_component(objects)


def make_logger():
    stream = io.StringIO()
    return Logger(Severity.VERBOSE, stream=stream, clock=lambda: 0.0), stream


def test_state_ids_index_the_registered_states():
    assert [s.value for s in StateId] == [0, 1, 2, 3, 4]
    assert (FontId.SIMPLE, FontId.OUTLINED) == (0, 1)
    states = [RecordingState(state_id.name) for state_id in StateId]
    manager = GameStateManager()
    for state in states:
        manager.add_game_state(state)
    manager.update(0.1)
    manager.update(0.1)
    assert manager.current_game_state is states[0]
    last = list(StateId)[-1]
    manager.set_next_game_state(last.value)
    manager.update(0.1)
    manager.update(0.1)
    manager.update(0.1)
    assert manager.current_game_state is states[last.value]
    assert states[last.value].name == last.name


def test_empty_manager_stops_then_exits():
    manager = GameStateManager()
    assert manager.status is Status.STARTING
    manager.update(0.1)
    assert manager.status is Status.STOPPING
    assert not manager.has_game_ended()
    manager.update(0.1)
    assert manager.status is Status.EXIT
    assert manager.has_game_ended()
    manager.update(0.1)
    assert manager.status is Status.EXIT


def test_full_lifecycle_of_one_state():
    state = RecordingState("Test")
    manager = GameStateManager()
    manager.add_game_state(state)

    manager.update(0.1)
    assert manager.status is Status.LOADING
    manager.update(0.1)
    assert manager.status is Status.UPDATING
    assert manager.current_game_state is state
    assert state.calls == ["load"]

    manager.update(0.25)
    assert state.calls == ["load", ("update", 0.25), "draw"]

    manager.clear_next_game_state()
    manager.update(0.1)
    assert manager.status is Status.UNLOADING
    manager.update(0.1)
    assert state.calls[-1] == "unload"
    assert manager.status is Status.STOPPING
    manager.update(0.1)
    assert manager.has_game_ended()


def test_switching_to_another_state():
    first = RecordingState("First")
    second = RecordingState("Second")
    manager = GameStateManager()
    manager.add_game_state(first)
    manager.add_game_state(second)
    manager.update(0.1)
    manager.update(0.1)
    manager.set_next_game_state(1)
    manager.update(0.1)
    manager.update(0.1)
    manager.update(0.1)
    assert first.calls == ["load", "unload"]
    assert second.calls == ["load"]
    assert manager.current_game_state is second
    assert manager.status is Status.UPDATING


def test_reload_state_loads_the_same_state_again():
    state = RecordingState("Again")
    manager = GameStateManager()
    manager.add_game_state(state)
    manager.update(0.1)
    manager.update(0.1)
    manager.reload_state()
    manager.update(0.1)
    manager.update(0.1)
    assert state.calls == ["load", "unload", "load"]
    assert manager.status is Status.UPDATING


def test_reload_without_state_raises():
    with pytest.raises(RuntimeError):
        GameStateManager().reload_state()


def test_set_next_out_of_range_raises():
    manager = GameStateManager()
    manager.add_game_state(RecordingState("Only"))
    with pytest.raises(IndexError):
        manager.set_next_game_state(1)
    with pytest.raises(IndexError):
        manager.set_next_game_state(-1)


def test_get_component_without_state_raises():
    with pytest.raises(RuntimeError):
        GameStateManager().get_component(Timer)


def test_updating_runs_collision_test_and_exposes_components():
    state = BoxState("Boxes")
    manager = GameStateManager()
    manager.add_game_state(state)
    manager.update(0.1)
    manager.update(0.1)
    manager.update(0.1)
    assert state.first.hits == [state.second]
    assert state.second.hits == [state.first]
    assert isinstance(manager.get_component(GameObjectManager), GameObjectManager)
    assert len(manager.get_component(GameObjectManager)) == 2


def test_on_unload_callback_and_log_messages():
    logger, stream = make_logger()
    unloads = []
    manager = GameStateManager(logger, on_unload=lambda: unloads.append(True))
    manager.add_game_state(RecordingState("Splash"))
    manager.update(0.1)
    manager.update(0.1)
    manager.clear_next_game_state()
    manager.update(0.1)
    manager.update(0.1)
    assert unloads == [True]
    lines = [line.split("\t", 2)[2] for line in stream.getvalue().splitlines()]
    assert lines == ["Load Splash", "Load Complete", "Unload Splash", "Unload Complete"]


def test_game_state_component_helpers():
    state = RecordingState("Parts")
    timer = Timer(2.0)
    state.add_component(timer)
    assert state.get_component(Timer) is timer
    state.update_components(0.5)
    assert timer.remaining() == pytest.approx(1.5)
    state.remove_component(Timer)
    assert state.get_component(Timer) is None
    state.add_component(Timer(1.0))
    state.clear_components()
    assert state.get_component(Timer) is None