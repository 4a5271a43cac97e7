"""Shared UI constants: cell colors, timing, and font helper."""

import pygame


# Frame rate of the main loop
FPS = 30

# Delay before the window closes after a win (ms)
WIN_DELAY_MS = 2000

# Cell colors
WALL = (96, 96, 96)
EMPTY = (192, 192, 192)
GOAL = (255, 255, 51)
BLOCK = (102, 51, 0)
BLOCK_ON_GOAL = (103, 240, 139)
CRATE = (153, 102, 51)
EXIT_CLOSED = (0, 0, 0)
EXIT_OPEN = (255, 255, 255)
PLAYER = (255, 51, 51)

# Overlay colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BANNER_BG = (40, 40, 40)


def get_font(size, bold=False):
    """Return a pygame SysFont for *arial* at the given size."""
    return pygame.font.SysFont("arial", size, bold=bold)
