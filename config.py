"""Typed configuration objects and centralized defaults.

All shared magic constants and configuration schemas live here so that
main.py, the GUI, and headless replay all reference a single source of
truth.  Key bindings are stored as key *names*; translating them into
pygame keycodes is the GUI's job (``ui.keys``), so this module stays
importable without pygame.
"""

import json
import logging
from dataclasses import dataclass, field, fields
from typing import Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Centralized defaults
# ---------------------------------------------------------------------------

DEFAULT_UNDO_LEVEL = 16
"""Maximum number of board states kept in the undo history."""

DEFAULT_CELL_SIZE = 32
"""Side of one rendered cell in pixels."""

DEFAULT_REPLAY_SPEED = 200
"""Milliseconds between two replayed commands."""

DEFAULT_CONFIG_PATH = "config.json"

ARROW_KEYS = ("arrow-up", "arrow-down", "arrow-left", "arrow-right")
BACKSPACE = "backspace"


def normalize_key_name(entry):
    """Return the canonical key name for a configuration entry.

    Accepts ``arrow-up``/``arrow-down``/``arrow-left``/``arrow-right``,
    ``backspace``, or any word starting with a letter (only the first
    character counts, case-insensitively).  Returns None when the entry
    names no supported key.
    """
    if not isinstance(entry, str) or not entry:
        return None
    if entry in ARROW_KEYS or entry == BACKSPACE:
        return entry
    c = entry[0].lower()
    if 'a' <= c <= 'z':
        return c
    return None


# ---------------------------------------------------------------------------
# Typed config dataclasses
# ---------------------------------------------------------------------------

@dataclass
class KeyBindings:
    """Key name bound to each player action."""

    up: str = "arrow-up"
    down: str = "arrow-down"
    left: str = "arrow-left"
    right: str = "arrow-right"
    undo: str = BACKSPACE
    reset: str = "r"
    quit: str = "q"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if normalize_key_name(value) != value:
                raise ValueError(
                    f"Invalid key name for '{f.name}': {value!r}"
                )

    @classmethod
    def from_dict(cls, keys, source="<config>"):
        """Build bindings from the ``key-bindings`` JSON object.

        Invalid entries are reported and fall back to the default for
        that action; they never abort startup.
        """
        kb = cls()
        if not isinstance(keys, dict):
            logger.warning("Invalid 'key-bindings' configuration in %s", source)
            return kb
        for f in fields(cls):
            entry = keys.get(f.name)
            if entry is None:
                continue
            name = normalize_key_name(entry)
            if name is None:
                logger.warning("Unknown key binding for '%s': %r",
                               f.name, entry)
                continue
            setattr(kb, f.name, name)
        for key_name in kb.key_names():
            actions = [f.name for f in fields(kb)
                       if getattr(kb, f.name) == key_name]
            if len(actions) > 1:
                logger.warning("Key %r bound to several actions (%s) in %s, "
                               "'%s' wins", key_name, ", ".join(actions),
                               source, actions[0])
        return kb

    def key_names(self):
        """Distinct bound key names, in action order."""
        names = []
        for f in fields(self):
            name = getattr(self, f.name)
            if name not in names:
                names.append(name)
        return names

    def action_for(self, key_name) -> Optional[str]:
        """First action bound to *key_name*, or None."""
        for f in fields(self):
            if getattr(self, f.name) == key_name:
                return f.name
        return None


@dataclass
class GameConfig:
    """Configuration for a single session."""

    undo_level: int = DEFAULT_UNDO_LEVEL
    replay_speed: int = DEFAULT_REPLAY_SPEED
    cell_size: int = DEFAULT_CELL_SIZE
    key_bindings: KeyBindings = field(default_factory=KeyBindings)

    def __post_init__(self):
        if self.undo_level <= 0:
            raise ValueError(
                f"undo_level must be positive, got {self.undo_level}"
            )
        if self.replay_speed <= 0:
            raise ValueError(
                f"replay_speed must be positive, got {self.replay_speed}"
            )
        if self.cell_size <= 0:
            raise ValueError(
                f"cell_size must be positive, got {self.cell_size}"
            )


def _positive_int(value):
    # bool is an int subclass; "undo-level": true is not a number
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def parse_config(data, source="<config>"):
    """Build a GameConfig from an already-decoded JSON object."""
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {source} must be a JSON object")

    undo = data.get("undo-level")
    if not _positive_int(undo):
        raise ValueError(f"Invalid 'undo-level' entry in {source}: {undo!r}")

    speed = data.get("replay-speed", DEFAULT_REPLAY_SPEED)
    if not _positive_int(speed):
        raise ValueError(
            f"Invalid 'replay-speed' entry in {source}: {speed!r}"
        )

    kb = KeyBindings()
    if "key-bindings" in data:
        kb = KeyBindings.from_dict(data["key-bindings"], source)

    return GameConfig(undo_level=undo, replay_speed=speed, key_bindings=kb)


def load_config(path=DEFAULT_CONFIG_PATH, required=False):
    """Load the JSON configuration file at *path*.

    A missing file yields the defaults unless *required* is set.  An
    unreadable or unparsable file raises ValueError.
    """
    try:
        with open(path, "r") as f:
            text = f.read()
    except FileNotFoundError:
        if required:
            raise ValueError(f"Can't read configuration file '{path}'")
        logger.info("No configuration file at %s, using defaults", path)
        return GameConfig()
    except OSError as e:
        raise ValueError(f"Can't read configuration file '{path}': {e}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Can't parse configuration file '{path}': {e}")

    return parse_config(data, path)
