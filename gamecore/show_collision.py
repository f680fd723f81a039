"""A toggle that decides whether collision shapes are drawn."""

from __future__ import annotations

from .component import Component
from .input import Input, Key


class ShowCollision(Component):
    """Flips on or off each time the Tab key is released."""

    def __init__(self, input_state: Input) -> None:
        self._input = input_state
        self._enabled = False

    def update(self, dt: float) -> None:
        if self._input.key_just_released(Key.TAB):
            self._enabled = not self._enabled

    def enabled(self) -> bool:
        return self._enabled