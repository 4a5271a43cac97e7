"""Screen controllers for the block puzzle window."""

from ui.screens.game_screen import GameScreen
from ui.screens.victory import VictoryScreen

__all__ = [
    "GameScreen",
    "VictoryScreen",
]
