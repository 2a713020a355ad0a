"""Translation of raw key codes into game commands."""

from __future__ import annotations

import enum

from term_snake.snake import Direction

# Key codes as reported by curses with keypad mode enabled.
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261
KEY_ESCAPE = 27


class Command(enum.Enum):
    """Player commands recognised by the game loop."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ABORT = "abort"

    @property
    def direction(self) -> Direction | None:
        """Return the heading this command requests, if any."""
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS: dict[Command, Direction] = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

# Arrow key codes require keypad mode, which the curses view enables.
DEFAULT_KEYMAP: dict[int, Command] = {
    KEY_UP: Command.UP,
    KEY_DOWN: Command.DOWN,
    KEY_LEFT: Command.LEFT,
    KEY_RIGHT: Command.RIGHT,
    ord("q"): Command.ABORT,
    KEY_ESCAPE: Command.ABORT,
}


def translate_key(
    code: int | None, keymap: dict[int, Command] | None = None,
) -> Command | None:
    """Map a raw key code to a command; unknown or absent keys give ``None``."""
    if code is None:
        return None
    return (keymap if keymap is not None else DEFAULT_KEYMAP).get(code)
