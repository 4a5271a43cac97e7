"""Block puzzle window: thin application router.

All screen controllers and rendering live in the ``ui`` package.  This
module owns the pygame display and clock, wires screens together via a
typed ``ScreenId`` dispatch, and delegates every game decision to the
``GameSession`` (no game logic here).
"""

import logging
import sys
import traceback as tb_module
from datetime import datetime

import pygame

from ui import ScreenId
from ui.board_renderer import window_size
from ui.constants import BLACK, FPS
from ui.keys import build_keymap
from ui.screens.game_screen import GameScreen
from ui.screens.victory import VictoryScreen

gui_logger = logging.getLogger("game_runner")


class GameRunner:
    """Top-level application router.

    Manages a single ``active_screen`` reference.  Each screen returns a
    ``ScreenId`` from ``handle_event`` or ``update`` to request a
    navigation; ``ScreenId.EXIT`` ends the loop.
    """

    def __init__(self, session, config, pacer=None):
        self.session = session
        self.config = config
        self.pacer = pacer
        self.keymap = build_keymap(config.key_bindings)

        pygame.init()
        self.screen_surface = pygame.display.set_mode(
            window_size(session.map),
        )
        pygame.display.set_caption("Sokoban")
        self.clock = pygame.time.Clock()
        self.running = True

        self._active_id = None
        self._active_screen = None

        self._navigate(ScreenId.GAME)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _navigate(self, screen_id, **kwargs):
        """Transition to a new screen, calling lifecycle hooks."""
        if self._active_screen is not None:
            self._active_screen.on_exit()

        if screen_id == ScreenId.EXIT:
            self.running = False
            return

        screen = self._create_screen(screen_id)
        self._active_id = screen_id
        self._active_screen = screen
        self._active_screen.on_enter(**kwargs)

    def _create_screen(self, screen_id):
        """Instantiate the screen for *screen_id*."""
        if screen_id == ScreenId.GAME:
            return GameScreen(self.session, self.keymap, self.pacer)
        elif screen_id == ScreenId.VICTORY:
            return VictoryScreen(self.session.map)
        raise ValueError(f"Unknown screen: {screen_id}")

    def _process_transition(self, result):
        """Single dispatch point for all screen transitions."""
        if result is None:
            return

        if isinstance(result, tuple):
            target_id = result[0]
            kwargs = result[1] if len(result) > 1 else {}
        elif isinstance(result, ScreenId):
            target_id = result
            kwargs = {}
        else:
            return

        if target_id == self._active_id:
            return
        self._navigate(target_id, **kwargs)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self):
        """Run until the session ends; returns its ``SessionResult``."""
        try:
            while self.running:
                for event in pygame.event.get():
                    self._handle_event(event)
                    if event.type == pygame.QUIT:
                        self.running = False
                    if not self.running:
                        break

                if self.running:
                    self._update()
                if self.running:
                    self._draw()
                self.clock.tick(FPS)
        except Exception:
            self._write_crash_log()
            raise
        finally:
            pygame.quit()
            result = self.session.finish()
        return result

    def _handle_event(self, event):
        result = self._active_screen.handle_event(event)
        self._process_transition(result)

    def _update(self):
        self._process_transition(self._active_screen.update())

    def _draw(self):
        self.screen_surface.fill(BLACK)
        self._active_screen.draw(self.screen_surface)
        pygame.display.flip()

    def _write_crash_log(self):
        """Write a crash log for unexpected top-level exceptions."""
        crash_tb = tb_module.format_exc()
        crash_time = datetime.now().strftime("%Y%m%d_%H%M%S")
        crash_filename = f"crash_log_{crash_time}.txt"
        try:
            lines = [
                "=" * 60,
                "SOKOBAN - CRASH LOG",
                "=" * 60,
                f"Timestamp: {datetime.now().isoformat()}",
                f"Screen: {self._active_id}",
                f"Last command: {self.session.last_command}",
                "",
                "--- Board ---",
                self.session.map.dump(),
                "",
                "--- Traceback ---",
                crash_tb,
                "=" * 60,
            ]
            with open(crash_filename, "w") as f:
                f.write("\n".join(lines) + "\n")
            gui_logger.critical(
                "GUI crashed, crash log written to %s", crash_filename,
            )
        except OSError as log_exc:
            print(
                f"Failed to write crash log ({log_exc}). "
                f"Original traceback:\n{crash_tb}",
                file=sys.stderr,
            )
