"""Command pipeline shared by the GUI and headless replay.

Every command, whether it comes from the keyboard or from a replayed
log, goes through ``GameSession.handle``: it is recorded (when the log
is recording), then dispatched to the ``Map``.  This keeps live play and
replay on the identical code path, which is what makes a recorded
session reproducible.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from command_log import Command, CommandLog
from puzzle_map import Map

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    QUIT = "quit"
    REPLAY_ENDED = "replay_ended"


@dataclass
class SessionResult:
    """Summary of a finished session.

    ``log_saved`` is None when nothing was recorded, otherwise whether
    the command log reached the disk.
    """
    status: SessionStatus
    commands_handled: int
    moves: int
    pushes: int
    undos: int
    resets: int
    final_player: Tuple[int, int]
    solved: bool
    goals_left: int
    history_depth: int
    log_saved: Optional[bool] = None

    @property
    def won(self):
        return self.status == SessionStatus.WON


class GameSession:
    """Drives one ``Map`` with a stream of commands.

    Usage::

        session = GameSession(game_map, CommandLog.recording("run.txt"))
        session.handle(Command.LEFT)
        ...
        result = session.finish()
    """

    def __init__(self, game_map: Map, command_log: Optional[CommandLog] = None):
        self.map = game_map
        self.log = command_log if command_log is not None else CommandLog.inert()
        self.status = SessionStatus.PLAYING
        self.commands_handled = 0
        self.moves = 0
        self.pushes = 0
        self.undos = 0
        self.resets = 0
        self.last_command = None
        self._result = None

    @property
    def over(self):
        return self.status != SessionStatus.PLAYING

    def handle(self, command: Command) -> SessionStatus:
        if self.over:
            logger.debug("Ignoring %s, session already %s",
                         command, self.status.value)
            return self.status

        self.log.record(command)
        self.commands_handled += 1
        self.last_command = command

        if command == Command.QUIT:
            self.status = SessionStatus.QUIT
        elif command == Command.UNDO:
            if self.map.undo():
                self.undos += 1
        elif command == Command.RESET:
            self.map.reset()
            self.resets += 1
        else:
            outcome = self.map.try_move(command.direction)
            if outcome.moved:
                self.moves += 1
            if outcome.pushed:
                self.pushes += 1
            if outcome.won:
                self.status = SessionStatus.WON
                logger.info("Puzzle solved after %d moves", self.moves)

        return self.status

    def next_replayed(self) -> Optional[Command]:
        """Pull the next command from a replaying log and handle it.

        Returns the command, or None once the log is exhausted (which
        ends the session).
        """
        command = self.log.next()
        if command is None:
            if not self.over:
                self.status = SessionStatus.REPLAY_ENDED
            return None
        self.handle(command)
        return command

    def finish(self) -> SessionResult:
        """End the session, persist the command log, and summarize."""
        if self._result is not None:
            return self._result
        if self.status == SessionStatus.PLAYING:
            self.status = SessionStatus.QUIT

        log_saved = None
        if self.log.is_recording:
            log_saved = self.log.save()

        self._result = SessionResult(
            status=self.status,
            commands_handled=self.commands_handled,
            moves=self.moves,
            pushes=self.pushes,
            undos=self.undos,
            resets=self.resets,
            final_player=self.map.player,
            solved=self.map.solved,
            goals_left=self.map.goals_left,
            history_depth=self.map.history_depth,
            log_saved=log_saved,
        )
        return self._result


def replay_session(game_map: Map, command_log: CommandLog) -> SessionResult:
    """Replay *command_log* against *game_map* without any pacing.

    Stops at the first win or Quit, or when the log runs out.
    """
    session = GameSession(game_map, command_log)
    while not session.over:
        session.next_replayed()
    result = session.finish()
    logger.info("Replay finished: %s after %d commands",
                result.status.value, result.commands_handled)
    return result
