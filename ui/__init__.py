"""pygame front end for the block puzzle.

``ScreenId`` names the two screens a session moves through (the board,
then the win banner) plus the exit signal; ``Screen`` is the controller
interface ``GameRunner`` drives each frame.
"""

from enum import Enum, auto
from abc import ABC, abstractmethod


class ScreenId(Enum):
    """Typed identifiers for every screen in the application."""
    GAME = auto()
    VICTORY = auto()
    EXIT = auto()


class Screen(ABC):
    """Interface that every screen controller must implement.

    Lifecycle:
        on_enter  -> (handle_event | update | draw)* -> on_exit
    """

    @abstractmethod
    def handle_event(self, event):
        """Process a pygame event.

        Returns ``None`` to stay on this screen, or a transition signal:
        - ``ScreenId``              – navigate with no data
        - ``(ScreenId, dict)``      – navigate with keyword data
        """
        ...

    @abstractmethod
    def draw(self, surface):
        """Render this screen onto *surface*."""
        ...

    def update(self):
        """Per-frame update (replay stepping, timers).

        May return a transition signal, like ``handle_event``.
        """
        return None

    def on_enter(self, **kwargs):
        """Called when this screen becomes active."""
        pass

    def on_exit(self):
        """Called when transitioning away from this screen."""
        pass
