from copy import copy
from dataclasses import dataclass
from enum import Enum


class CellKind(Enum):
    WALL = "wall"
    EMPTY = "empty"
    BLOCK = "block"
    CRATE = "crate"
    EXIT = "exit"


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


class Cell(object):
    def __init__(self, kind, goal=False):
        self.kind = kind
        self.goal = goal

    def __repr__(self):
        return 'kind: ' + self.kind.value + ' goal: ' + str(self.goal)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.kind == other.kind and self.goal == other.goal

    def is_free(self, solved):
        if self.kind == CellKind.EMPTY:
            return True
        if self.kind == CellKind.EXIT:
            return solved
        return False

    def is_movable(self):
        return self.kind in (CellKind.BLOCK, CellKind.CRATE)

    def is_crate(self):
        return self.kind == CellKind.CRATE

    def is_goal(self):
        return self.goal

    def is_exit(self):
        return self.kind == CellKind.EXIT

    def glyph(self):
        if self.kind == CellKind.WALL:
            return '.'
        if self.kind == CellKind.BLOCK:
            return '!' if self.goal else 'b'
        if self.kind == CellKind.CRATE:
            return 'c'
        if self.kind == CellKind.EXIT:
            return 'x'
        return 'g' if self.goal else ' '


class Player(object):
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def position(self):
        return self.x, self.y

    def __repr__(self):
        return 'position:' + str(self.position)


@dataclass
class MoveResult:
    """Outcome of one directional command against the current state."""
    moved: bool
    pushed: bool = False
    won: bool = False


class BoardState(object):
    def __init__(self, cells, player, goals_left, solved=False):
        self.cells = cells              # rows of Cell, indexed [y][x]
        self.player = player
        self.goals_left = goals_left
        self.solved = solved
        self.last_push = False

    def clone(self):
        cloned = BoardState(
            [[copy(cell) for cell in row] for row in self.cells],
            copy(self.player),
            self.goals_left,
            self.solved,
        )
        return cloned

    @property
    def width(self):
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self):
        return len(self.cells)

    def cell_at(self, x, y):
        return self.cells[y][x]

    def player_cell(self):
        return self.cells[self.player.y][self.player.x]

    def move(self, direction: Direction) -> bool:
        """Advance the player one cell towards *direction*, pushing the
        adjacent Block or Crate when the cell behind it is free.

        The caller guarantees the player is not flush against the grid edge
        in that direction.  Returns whether the player position changed.
        """
        self.last_push = False
        x, y = self.player.position
        x1, y1 = x + direction.dx, y + direction.dy
        target1 = self.cells[y1][x1]

        if target1.is_free(self.solved):
            self.player.x, self.player.y = x1, y1
            return True

        x2, y2 = x1 + direction.dx, y1 + direction.dy
        if not (0 <= x2 < self.width and 0 <= y2 < self.height):
            return False
        target2 = self.cells[y2][x2]

        if not (target1.is_movable() and target2.is_free(self.solved)):
            return False

        if target1.is_crate():
            target2.kind = CellKind.CRATE
        else:
            if target2.goal:
                self.goals_left -= 1
            target2.kind = CellKind.BLOCK
            if target1.goal:
                self.goals_left += 1
        target1.kind = CellKind.EMPTY

        self.player.x, self.player.y = x1, y1
        self.last_push = True
        return True

    def check_win(self) -> bool:
        """Re-evaluate ``solved`` after an accepted move.

        Only a solved board with the player standing on the Exit wins.
        """
        if self.goals_left == 0:
            self.solved = True
            return self.player_cell().is_exit()
        self.solved = False
        return False

    def dump(self):
        lines = []
        for y, row in enumerate(self.cells):
            line = ''
            for x, cell in enumerate(row):
                if (x, y) == self.player.position:
                    line += 's'
                else:
                    line += cell.glyph()
            lines.append(line)
        return '\n'.join(lines)
