"""Keypress to direction resolution."""

from __future__ import annotations

import curses

from term_snake.snake import Direction

Key = int | str

_KEY_CODES: dict[int, Direction] = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}

_KEY_NAMES: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "key_up": Direction.UP,
    "key_down": Direction.DOWN,
    "key_left": Direction.LEFT,
    "key_right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

QUIT_KEYS = frozenset({"q"})


def _normalize(key: Key) -> str | None:
    if isinstance(key, int):
        # Codes above 255 are curses special keys, not characters.
        if 0 <= key < 256:
            return chr(key).lower()
        return None
    return key.lower()


def resolve_direction(key: Key) -> Direction | None:
    """Map a raw key to a direction.

    Accepts curses key codes (arrow keys and the character codes of
    ``w``/``a``/``s``/``d``) as well as key names. Unmapped keys give
    ``None``.
    """
    if isinstance(key, int) and key in _KEY_CODES:
        return _KEY_CODES[key]
    name = _normalize(key)
    if name is None:
        return None
    return _KEY_NAMES.get(name)


def accept_direction(requested: Direction, last_accepted: Direction) -> Direction:
    """Return *requested* unless it reverses *last_accepted*."""
    if requested is last_accepted.opposite:
        return last_accepted
    return requested


def is_quit(key: Key) -> bool:
    """Check whether *key* is the quit key."""
    return _normalize(key) in QUIT_KEYS
