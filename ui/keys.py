"""Translate configured key names and pygame events into commands."""

import pygame

from command_log import Command

_NAMED_KEYS = {
    "arrow-up": pygame.K_UP,
    "arrow-down": pygame.K_DOWN,
    "arrow-left": pygame.K_LEFT,
    "arrow-right": pygame.K_RIGHT,
    "backspace": pygame.K_BACKSPACE,
}

_ACTION_COMMANDS = {
    "up": Command.UP,
    "down": Command.DOWN,
    "left": Command.LEFT,
    "right": Command.RIGHT,
    "undo": Command.UNDO,
    "reset": Command.RESET,
    "quit": Command.QUIT,
}


def keycode_for(key_name):
    """pygame keycode for a canonical key name from ``config``."""
    if key_name in _NAMED_KEYS:
        return _NAMED_KEYS[key_name]
    return getattr(pygame, "K_" + key_name)


def build_keymap(key_bindings):
    """Map pygame keycodes to commands.  Escape always quits.

    A key bound to several actions triggers the first one, in the order
    the actions are declared on ``KeyBindings``.
    """
    keymap = {pygame.K_ESCAPE: Command.QUIT}
    for key_name in key_bindings.key_names():
        action = key_bindings.action_for(key_name)
        keymap[keycode_for(key_name)] = _ACTION_COMMANDS[action]
    return keymap


def command_for_event(event, keymap):
    """Return the Command requested by *event*, or None."""
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return keymap.get(event.key)
    return None
