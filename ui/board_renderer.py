"""Board rendering: one filled rectangle per cell, then the player.

All geometry is derived from the map's cell-size hint so the window can
be sized as ``width * cell_size`` by ``height * cell_size``.
"""

import logging

import pygame

from PuzzleEnv import CellKind
from ui.constants import (
    WALL, EMPTY, GOAL, BLOCK, BLOCK_ON_GOAL, CRATE,
    EXIT_CLOSED, EXIT_OPEN, PLAYER, BLACK, WHITE, BANNER_BG,
    get_font,
)

_logger = logging.getLogger("board_renderer")


def window_size(game_map):
    return (game_map.width * game_map.cell_size,
            game_map.height * game_map.cell_size)


def cell_color(cell, goals_left):
    """Color of *cell*; the exit turns white once every goal is met."""
    if cell.kind == CellKind.WALL:
        return WALL
    if cell.kind == CellKind.BLOCK:
        return BLOCK_ON_GOAL if cell.goal else BLOCK
    if cell.kind == CellKind.CRATE:
        return CRATE
    if cell.kind == CellKind.EXIT:
        return EXIT_CLOSED if goals_left > 0 else EXIT_OPEN
    return GOAL if cell.goal else EMPTY


def render_board(surface, game_map):
    cs = game_map.cell_size
    state = game_map.state
    for y in range(game_map.height):
        for x in range(game_map.width):
            cell = state.cell_at(x, y)
            pygame.draw.rect(
                surface, cell_color(cell, state.goals_left),
                pygame.Rect(x * cs, y * cs, cs, cs),
            )

    # Draw player
    px, py = game_map.player
    pygame.draw.rect(surface, PLAYER, pygame.Rect(px * cs, py * cs, cs, cs))


def render_banner(surface, text):
    """Draw *text* centered on a dark band across the window."""
    width, height = surface.get_size()
    band_h = min(60, height)
    banner_rect = pygame.Rect(0, (height - band_h) // 2, width, band_h)
    pygame.draw.rect(surface, BANNER_BG, banner_rect)
    font = get_font(18, bold=True)
    label = font.render(text, True, WHITE)
    if label.get_width() > width:
        _logger.debug("Banner text wider than window (%d > %d)",
                      label.get_width(), width)
    surface.blit(label, label.get_rect(center=banner_rect.center))
    pygame.draw.rect(surface, BLACK, banner_rect, width=1)
