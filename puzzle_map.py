"""The ``Map`` aggregate: a parsed puzzle plus its undo history.

This is the narrow surface consumed by the GUI, the session pipeline,
and headless replay.  It does NOT import pygame.
"""

import logging

from PuzzleEnv import Direction, MoveResult
from config import DEFAULT_CELL_SIZE, DEFAULT_UNDO_LEVEL
from history import StateHistory
from map_format import parse_map

logger = logging.getLogger(__name__)


class Map:
    """A puzzle board with bounded undo.

    Usage::

        game_map = Map(definition, cell_size=32, max_undo=16)
        won = game_map.update(Direction.LEFT)
        game_map.undo()
        game_map.reset()

    Raises MapLoadError if *definition* is malformed.
    """

    def __init__(self, definition, cell_size=DEFAULT_CELL_SIZE,
                 max_undo=DEFAULT_UNDO_LEVEL):
        self.definition = definition
        self.cell_size = cell_size
        self.width, self.height, initial = parse_map(definition)
        self.history = StateHistory(initial, max_undo)

    @property
    def max_undo(self):
        return self.history.max_undo

    @property
    def state(self):
        return self.history.current()

    @property
    def player(self):
        return self.state.player.position

    @property
    def goals_left(self):
        return self.state.goals_left

    @property
    def solved(self):
        return self.state.solved

    @property
    def history_depth(self):
        return len(self.history)

    def cell_at(self, x, y):
        return self.state.cell_at(x, y)

    def _at_edge(self, direction):
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        return not (0 <= nx < self.width and 0 <= ny < self.height)

    def try_move(self, direction: Direction) -> MoveResult:
        """Resolve one directional command.

        The move is attempted on a clone of the current state; the clone
        is committed to the history only if the player actually moved.
        """
        if self._at_edge(direction):
            return MoveResult(moved=False)

        candidate = self.state.clone()
        if not candidate.move(direction):
            return MoveResult(moved=False)

        won = candidate.check_win()
        self.history.push(candidate)
        return MoveResult(moved=True, pushed=candidate.last_push, won=won)

    def update(self, direction: Direction) -> bool:
        """Apply *direction* and return True if the session is won."""
        return self.try_move(direction).won

    def undo(self):
        return self.history.undo()

    def reset(self):
        _, _, initial = parse_map(self.definition)
        self.history.reset(initial)
        logger.info("Map reset to its initial state")

    def dump(self):
        return self.state.dump()
