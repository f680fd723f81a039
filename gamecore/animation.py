"""Frame animations driven by a small command script.

An animation script is a whitespace separated list of commands:

``PlayFrame <frame> <seconds>``
    show ``frame`` for ``seconds``
``Loop <index>``
    jump back to the command at ``index``, which must be a ``PlayFrame``
``End``
    stop; the animation reports that it has ended
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence, Union

from .logger import Logger


@dataclass
class PlayFrame:
    """Show one frame for a fixed time."""

    frame: int
    target_time: float
    timer: float = 0.0

    def update(self, dt: float) -> None:
        self.timer += dt

    def ended(self) -> bool:
        return self.timer >= self.target_time

    def reset_time(self) -> None:
        self.timer = 0.0


@dataclass(frozen=True)
class Loop:
    """Jump to the command at ``loop_index``."""

    loop_index: int


@dataclass(frozen=True)
class End:
    """Mark the end of the animation."""


Command = Union[PlayFrame, Loop, End]


def _next_token(tokens: Iterator[str], command: str, source: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"{command} is missing an argument in {source}") from None


def _parse_number(kind: type, token: str, command: str, source: str):
    try:
        return kind(token)
    except ValueError:
        raise ValueError(f"bad argument {token!r} to {command} in {source}") from None


def parse_commands(
    text: str, source: str = "<string>", logger: Logger | None = None
) -> list[Command]:
    """Parse an animation script into a list of commands.

    Unknown commands are reported to ``logger`` as errors and skipped.
    """
    commands: list[Command] = []
    tokens = iter(text.split())
    for word in tokens:
        if word == "PlayFrame":
            frame = _parse_number(int, _next_token(tokens, word, source), word, source)
            target = _parse_number(
                float, _next_token(tokens, word, source), word, source
            )
            commands.append(PlayFrame(frame, target))
        elif word == "Loop":
            index = _parse_number(int, _next_token(tokens, word, source), word, source)
            commands.append(Loop(index))
        elif word == "End":
            commands.append(End())
        elif logger is not None:
            logger.log_error(f"{word} in {source}")
    return commands


class Animation:
    """Plays a sequence of animation commands over time."""

    def __init__(
        self, commands: Sequence[Command], logger: Logger | None = None
    ) -> None:
        self._commands = list(commands)
        if not self._commands or not isinstance(self._commands[0], PlayFrame):
            raise ValueError("an animation must start with a PlayFrame command")
        self._logger = logger
        self._index = 0
        self._ended = False
        self._frame: PlayFrame = self._commands[0]
        self.reset()

    @classmethod
    def from_file(cls, path: str | Path, logger: Logger | None = None) -> Animation:
        """Load an animation from a ``.anm`` file."""
        path = Path(path)
        name = path.as_posix()
        if path.suffix != ".anm":
            raise ValueError(f"{name} is not a .anm file")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as err:
            raise OSError(f"Failed to load {name}") from err
        return cls(parse_commands(text, name, logger), logger)

    @property
    def commands(self) -> list[Command]:
        return list(self._commands)

    def _command_at(self, index: int) -> Command:
        if index < 0:
            raise IndexError(f"command index {index} out of range")
        if index >= len(self._commands):
            return End()
        return self._commands[index]

    def update(self, dt: float) -> None:
        """Advance the animation by ``dt`` seconds."""
        self._frame.update(dt)
        if not self._frame.ended():
            return
        self._frame.reset_time()
        self._index += 1
        command = self._command_at(self._index)
        if isinstance(command, PlayFrame):
            self._frame = command
        elif isinstance(command, Loop):
            self._index = command.loop_index
            target = self._command_at(self._index)
            if isinstance(target, PlayFrame):
                self._frame = target
            else:
                if self._logger is not None:
                    self._logger.log_error("Loop does not go to PlayFrame")
                self.reset()
        else:
            self._ended = True

    def current_frame(self) -> int:
        return self._frame.frame

    def reset(self) -> None:
        """Restart from the first command."""
        self._index = 0
        self._ended = False
        self._frame = self._commands[0]
        self._frame.reset_time()

    def ended(self) -> bool:
        return self._ended