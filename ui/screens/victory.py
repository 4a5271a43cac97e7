"""Win banner shown over the final board before the window closes."""

import pygame

from ui import Screen, ScreenId
from ui.board_renderer import render_board, render_banner
from ui.constants import WIN_DELAY_MS

WIN_MESSAGE = "Congratulations, you won !"


class VictoryScreen(Screen):
    def __init__(self, game_map, delay_ms=WIN_DELAY_MS):
        self.game_map = game_map
        self.delay_ms = delay_ms
        self.entered_at = 0

    def on_enter(self, **kwargs):
        self.entered_at = pygame.time.get_ticks()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            return ScreenId.EXIT
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return ScreenId.EXIT
        return None

    def update(self):
        if pygame.time.get_ticks() - self.entered_at >= self.delay_ms:
            return ScreenId.EXIT
        return None

    def draw(self, surface):
        render_board(surface, self.game_map)
        render_banner(surface, WIN_MESSAGE)
