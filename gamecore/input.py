"""Keyboard state tracking with edge detection."""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum, auto

from .logger import Logger


class Key(Enum):
    """Keys the engine tracks."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    SPACE = auto()
    ENTER = auto()
    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    TAB = auto()
    LEFT_SHIFT = auto()


class Input:
    """Remembers which keys are held this frame and the frame before."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger
        self._down: set[Key] = set()
        self._previous: set[Key] = set()

    def update(self, held_keys: Collection[Key]) -> None:
        """Start a new frame in which exactly ``held_keys`` are held."""
        self._previous = set(self._down)
        for key in Key:
            self.set_key_down(key, key in held_keys)
            if self._logger is None:
                continue
            if self.key_just_pressed(key):
                self._logger.log_debug("Key Pressed")
            elif self.key_just_released(key):
                self._logger.log_debug("Key Released")

    def set_key_down(self, key: Key, value: bool) -> None:
        if value:
            self._down.add(key)
        else:
            self._down.discard(key)

    def key_down(self, key: Key) -> bool:
        return key in self._down

    def key_just_pressed(self, key: Key) -> bool:
        return key in self._down and key not in self._previous

    def key_just_released(self, key: Key) -> bool:
        return key not in self._down and key in self._previous