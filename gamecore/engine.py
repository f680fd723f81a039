"""The engine loop: frame pacing, input and game states."""

from __future__ import annotations

import random
import time
from collections.abc import Collection
from typing import Callable

from .gamestate import GameStateManager
from .input import Input, Key
from .logger import Logger, Severity


class Engine:
    """Runs game states at a fixed target frame rate."""

    TARGET_FPS = 30.0
    FPS_DURATION = 5
    FPS_TARGET_FRAMES = int(FPS_DURATION * TARGET_FPS)

    def __init__(
        self,
        logger: Logger | None = None,
        *,
        debug: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._clock = clock
        self._last_tick = clock()
        self._last_test = self._last_tick
        self._frame_count = 0
        self._closed = False
        if logger is None:
            level = Severity.DEBUG if debug else Severity.EVENT
            logger = Logger(level, debug, self._last_tick, clock=clock)
        self.logger = logger
        self.input = Input(logger)
        self.game_state_manager = GameStateManager(logger)

    def start(self) -> None:
        """Seed the random generator and begin timing frames."""
        self.logger.log_event("Engine Started")
        seed = int(self._clock())
        random.seed(seed)
        self.logger.log_event(str(seed))
        self._last_test = self._last_tick

    def stop(self) -> None:
        self.logger.log_event("Engine Stopped")

    def update(self, held_keys: Collection[Key] = ()) -> bool:
        """Run a frame if enough time has passed; return whether one ran."""
        self.logger.log_verbose("Engine Update")
        now = self._clock()
        dt = now - self._last_tick
        if dt < 1.0 / self.TARGET_FPS:
            return False
        self.logger.log_verbose("Engine Update")
        self._last_tick = now
        self._frame_count += 1
        if self._frame_count >= self.FPS_TARGET_FRAMES:
            actual_time = now - self._last_test
            self.logger.log_debug(f"FPS: {self._frame_count / actual_time:.6f}")
            self._frame_count = 0
            self._last_test = now
        self.game_state_manager.update(dt)
        self.input.update(held_keys)
        return True

    def request_close(self) -> None:
        """Ask the game to end, as closing its window would."""
        self._closed = True

    def has_game_ended(self) -> bool:
        return self.game_state_manager.has_game_ended() or self._closed