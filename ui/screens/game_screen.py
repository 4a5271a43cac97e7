"""Main play screen: live keyboard input or paced replay of a log."""

import logging

import pygame

from ui import Screen, ScreenId
from ui.board_renderer import render_board
from ui.keys import command_for_event
from command_log import Command
from session import SessionStatus

gui_logger = logging.getLogger("game_runner")


class GameScreen(Screen):
    """Feeds commands into a ``GameSession`` and draws its map.

    In replay mode keyboard commands are ignored, except Quit, and the
    session pulls the next logged command whenever *pacer* says it is
    due.
    """

    def __init__(self, session, keymap, pacer=None):
        self.session = session
        self.keymap = keymap
        self.pacer = pacer
        self.replaying = session.log.is_replaying
        self._caption = None

    def on_enter(self, **kwargs):
        if self.pacer is not None:
            self.pacer.last_tick = pygame.time.get_ticks()

    def handle_event(self, event):
        command = command_for_event(event, self.keymap)
        if command is None:
            return None
        if self.replaying and command != Command.QUIT:
            return None
        self.session.handle(command)
        return self._transition()

    def update(self):
        if self.replaying and not self.session.over:
            if self.pacer.due(pygame.time.get_ticks()):
                command = self.session.next_replayed()
                if command is not None:
                    gui_logger.debug("Replayed %s", command)
        return self._transition()

    def _transition(self):
        status = self.session.status
        if status == SessionStatus.WON:
            return ScreenId.VICTORY
        if status in (SessionStatus.QUIT, SessionStatus.REPLAY_ENDED):
            return ScreenId.EXIT
        return None

    def draw(self, surface):
        render_board(surface, self.session.map)
        self._update_caption()

    def _update_caption(self):
        game_map = self.session.map
        mode = "Replay" if self.replaying else "Sokoban"
        caption = f"{mode} - goals left: {game_map.goals_left}"
        if caption != self._caption:
            pygame.display.set_caption(caption)
            self._caption = caption
