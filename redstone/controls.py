"""Reading single key presses and turning them into game actions."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from enum import IntEnum
from typing import Iterator, TextIO

ESCAPE = "\x1b"


class Key(IntEnum):
    ARROW_UP = 1000
    ARROW_DOWN = 1001
    ARROW_LEFT = 1002
    ARROW_RIGHT = 1003


_ARROWS = {
    "A": Key.ARROW_UP,
    "B": Key.ARROW_DOWN,
    "C": Key.ARROW_RIGHT,
    "D": Key.ARROW_LEFT,
}

_KEY_NAMES = {
    Key.ARROW_UP: "up",
    Key.ARROW_DOWN: "down",
    Key.ARROW_LEFT: "left",
    Key.ARROW_RIGHT: "right",
}

_EXPLORING_ACTIONS = {
    "w": ("move", 0),
    "up": ("move", 0),
    "s": ("move", 1),
    "down": ("move", 1),
    "a": ("move", 2),
    "left": ("move", 2),
    "d": ("move", 3),
    "right": ("move", 3),
    "g": ("pickup", 0),
    "i": ("inventory", 0),
    "c": ("character", 0),
    "q": ("quit", 0),
}

_CLOSE_INVENTORY_KEYS = {"i", "\r", "\n", " "}

NO_ACTION = ("none", -1)


@contextmanager
def _raw_mode(stream: TextIO) -> Iterator[None]:
    """Put a terminal stream into raw mode for the duration of the block."""
    fd = None
    try:
        candidate = stream.fileno()
        if os.isatty(candidate):
            fd = candidate
    except (AttributeError, OSError, ValueError):
        fd = None

    if fd is None:
        yield
        return

    try:
        import termios
        import tty
    except ImportError:
        yield
        return

    try:
        old_state = termios.tcgetattr(fd)
        tty.setraw(fd)
    except termios.error as exc:
        raise OSError(str(exc)) from exc
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_state)


def _read_char(stream: TextIO) -> str:
    char = stream.read(1)
    if not char:
        raise EOFError("no more input")
    return char


def read_key(stream: TextIO | None = None) -> tuple[str, Key | None]:
    """Read one key press.

    Returns the character read and, for arrow keys, the matching Key (the
    character is then empty). Raises EOFError when the input ends.
    """
    stream = sys.stdin if stream is None else stream
    with _raw_mode(stream):
        char = _read_char(stream)
        if char == ESCAPE:
            bracket = _read_char(stream)
            char = _read_char(stream)
            if bracket == "[" and char in _ARROWS:
                return "", _ARROWS[char]
    return char, None


def interpret_input(game_mode: str, char: str, key: Key | None) -> tuple[str, int]:
    """Map a key press to an (action, value) pair for the given game mode."""
    if key is not None:
        text = _KEY_NAMES.get(key, "")
    elif char and char != "\0":
        text = char
    else:
        text = ""

    if game_mode == "exploring":
        return _EXPLORING_ACTIONS.get(text, NO_ACTION)
    if game_mode == "combat":
        if len(text) == 1 and "1" <= text <= "9":
            return "ability", ord(text) - ord("1")
        if text == "r":
            return "run", 0
    elif game_mode == "inventory":
        if text in _CLOSE_INVENTORY_KEYS:
            return "close_inventory", 0
    return NO_ACTION


def handle_player_input(game_mode: str, stream: TextIO | None = None) -> tuple[str, int]:
    """Read a key and return the action it stands for; ("none", -1) on failure."""
    try:
        char, key = read_key(stream)
    except (EOFError, OSError):
        return NO_ACTION
    return interpret_input(game_mode, char, key)