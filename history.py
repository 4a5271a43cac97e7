"""Bounded undo history of board states.

The history is an ordered list of complete ``BoardState`` snapshots,
oldest first.  The last entry is the current state.  The list is never
empty: the initial state can be replaced by eviction or ``reset`` but
never popped by ``undo``.
"""

import logging

logger = logging.getLogger(__name__)


class StateHistory:
    def __init__(self, initial_state, max_undo):
        if max_undo < 1:
            raise ValueError(f"max_undo must be positive, got {max_undo}")
        self.max_undo = max_undo
        self._states = [initial_state]

    def __len__(self):
        return len(self._states)

    def current(self):
        return self._states[-1]

    def push(self, state):
        """Append *state*, evicting the oldest entry when full."""
        if len(self._states) >= self.max_undo:
            self._states.pop(0)
            logger.debug("History full (%d), evicted oldest state",
                         self.max_undo)
        self._states.append(state)

    def undo(self):
        """Drop the current state.  Returns False when only one remains."""
        if len(self._states) > 1:
            self._states.pop()
            return True
        return False

    def reset(self, state):
        self._states = [state]
