"""Command recording and replay.

A session is reproducible from the ordered list of commands the player
issued.  The persisted form is one canonical token per line::

    Up
    Left
    Undo
    Quit

``CommandLog`` has three modes, selected by its constructor:

* **inert** – nothing is recorded or saved, ``next()`` yields nothing.
* **recording** – every handled command is appended; ``save()`` writes
  the file.  A failed write is logged and otherwise ignored.
* **replaying** – commands are loaded up front (any bad line is fatal)
  and handed out FIFO by ``next()``.

Replay pacing belongs to the caller; ``ReplayPacer`` is the helper both
the GUI and tests use for it.
"""

import logging
from collections import deque
from enum import Enum
from typing import Optional

from PuzzleEnv import Direction

logger = logging.getLogger(__name__)


class Command(Enum):
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    UNDO = "Undo"
    RESET = "Reset"
    QUIT = "Quit"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, token):
        try:
            return cls(token)
        except ValueError:
            raise ReplayLoadError(f"Unknown command: {token!r}")

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}


class ReplayLoadError(ValueError):
    """Raised when a command log cannot be loaded for replay."""


class LogMode(Enum):
    INERT = "inert"
    RECORDING = "recording"
    REPLAYING = "replaying"


class CommandLog:
    def __init__(self, mode, path=None, commands=None):
        self.mode = mode
        self.path = path
        self._commands = deque(commands or [])

    # ── Constructors ─────────────────────────────────────────────────

    @classmethod
    def inert(cls):
        return cls(LogMode.INERT)

    @classmethod
    def recording(cls, path):
        logger.info("New run %s", path)
        return cls(LogMode.RECORDING, path)

    @classmethod
    def from_text(cls, text, path=None):
        commands = [Command.parse(line.rstrip('\r'))
                    for line in text.splitlines()]
        return cls(LogMode.REPLAYING, path, commands)

    @classmethod
    def replaying(cls, path):
        logger.info("Loading %s", path)
        try:
            with open(path, 'r') as f:
                text = f.read()
        except OSError as e:
            raise ReplayLoadError(f"Failure to load '{path}': {e}")
        try:
            return cls.from_text(text, path)
        except ReplayLoadError as e:
            raise ReplayLoadError(f"Failure to load '{path}': {e}")

    # ── Queries ──────────────────────────────────────────────────────

    def __len__(self):
        return len(self._commands)

    @property
    def commands(self):
        return list(self._commands)

    @property
    def is_recording(self):
        return self.mode == LogMode.RECORDING

    @property
    def is_replaying(self):
        return self.mode == LogMode.REPLAYING

    # ── Operations ───────────────────────────────────────────────────

    def record(self, command: Command):
        if self.is_recording:
            self._commands.append(command)

    def next(self) -> Optional[Command]:
        if self.is_replaying and self._commands:
            return self._commands.popleft()
        return None

    def dumps(self):
        return "".join(f"{cmd}\n" for cmd in self._commands)

    def save(self, path=None):
        """Write the recorded commands, overwriting the target file.

        Returns True on success.  Write failures are reported through the
        log and never raised: a lost recording must not affect the game.
        """
        if not self.is_recording:
            return False
        target = path or self.path
        try:
            with open(target, 'w') as f:
                f.write(self.dumps())
        except OSError as e:
            logger.error("Error while saving run to '%s': %s", target, e)
            return False
        logger.info("Saved %d commands to %s", len(self._commands), target)
        return True


class ReplayPacer:
    """Decides when the next replayed command is due.

    *now* is any monotonically increasing tick value (pygame ticks in the
    GUI); a command is due once *interval* ticks have elapsed since the
    previous one.  Only the command order is reproduced, not the recorded
    timing.
    """

    def __init__(self, interval, start=0):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.last_tick = start

    def due(self, now) -> bool:
        if now - self.last_tick >= self.interval:
            self.last_tick = now
            return True
        return False
