"""Map definition parsing.

A map definition is plain text::

    <width>
    <height>
    <height rows, each at least width characters>

Character vocabulary: ``s`` player start, ``.`` wall, `` `` empty,
``g`` goal, ``b`` block, ``c`` crate, ``x`` exit.  Exactly one ``s`` and
one ``x`` are required, there must be at least one goal, and the number
of goals must equal the number of blocks.
"""

import logging
import sys

from PuzzleEnv import BoardState, Cell, CellKind, Player

logger = logging.getLogger(__name__)

START = 's'
WALL = '.'
EMPTY = ' '
GOAL = 'g'
BLOCK = 'b'
CRATE = 'c'
EXIT = 'x'


class MapLoadError(ValueError):
    """Raised when a map definition cannot be turned into a board."""


def _parse_dimension(line, name):
    try:
        value = int(line.strip())
    except ValueError:
        raise MapLoadError(f"Can't parse {name} {line!r} as an integer")
    if value <= 0:
        raise MapLoadError(f"{name.capitalize()} must be positive, got {value}")
    return value


def parse_map(definition: str):
    """Parse *definition* into ``(width, height, BoardState)``.

    Raises MapLoadError with a descriptive message on any malformed
    input; no partial board is returned.
    """
    lines = definition.splitlines()
    if len(lines) < 2:
        raise MapLoadError("Map definition must start with width and height")

    width = _parse_dimension(lines[0], "width")
    height = _parse_dimension(lines[1], "height")

    rows = lines[2:2 + height]
    if len(rows) < height:
        raise MapLoadError(
            f"Expected {height} rows, found only {len(rows)}"
        )

    cells = []
    start = None
    exit_cell = None
    goals = 0
    blocks = 0

    for y, line in enumerate(rows):
        if len(line) < width:
            raise MapLoadError(
                f"Row {y} is {len(line)} characters long, expected {width}"
            )
        row = []
        for x, c in enumerate(line[:width]):
            if c == START:
                if start is not None:
                    raise MapLoadError("Multiple start points")
                start = (x, y)
                row.append(Cell(CellKind.EMPTY))
            elif c == WALL:
                row.append(Cell(CellKind.WALL))
            elif c == EMPTY:
                row.append(Cell(CellKind.EMPTY))
            elif c == GOAL:
                goals += 1
                row.append(Cell(CellKind.EMPTY, goal=True))
            elif c == BLOCK:
                blocks += 1
                row.append(Cell(CellKind.BLOCK))
            elif c == CRATE:
                row.append(Cell(CellKind.CRATE))
            elif c == EXIT:
                if exit_cell is not None:
                    raise MapLoadError("Multiple exit points")
                exit_cell = (x, y)
                row.append(Cell(CellKind.EXIT))
            else:
                raise MapLoadError(f"Invalid map: {c!r} at ({x}, {y})")
        cells.append(row)

    if start is None:
        raise MapLoadError("Missing start point")
    if exit_cell is None:
        raise MapLoadError("Missing exit point")
    if goals <= 0:
        raise MapLoadError("Not enough goals")
    if goals != blocks:
        raise MapLoadError(
            f"Unbalanced map: {goals} goals but {blocks} blocks"
        )

    logger.debug("Parsed %dx%d map with %d goals", width, height, goals)
    state = BoardState(cells, Player(*start), goals_left=goals)
    return width, height, state


def read_definition(path=None):
    """Read a map definition from *path*, or from stdin when *path* is
    None or ``-``.  I/O failures are reported as MapLoadError."""
    if path is None or path == '-':
        return sys.stdin.read()
    try:
        with open(path, 'r') as f:
            return f.read()
    except OSError as e:
        raise MapLoadError(f"Can't read map file '{path}': {e}")
