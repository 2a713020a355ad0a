"""Curses terminal adapter for the game loop."""

from __future__ import annotations

import curses
import logging

from term_snake.snake import Point

logger = logging.getLogger(__name__)

APPLE_CHAR = "*"
HEAD_CHAR = "#"
EMPTY_CHAR = " "
SCORE_LABEL = "Score: "


class ViewSetupError(RuntimeError):
    """Raised when the terminal cannot provide the drawing surfaces."""


class CursesView:
    """Draws the game into two sub-windows of a curses screen.

    The top line holds the score; the rest is the boxed arena. Reads are
    non-blocking so the game loop sets the pace.
    """

    def __init__(self, window: curses.window) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor.")
        window.clear()
        max_y, max_x = window.getmaxyx()
        try:
            self.score_window = window.subwin(1, max_x, 0, 0)
            self.game_window = window.subwin(max_y - 1, max_x, 1, 0)
        except curses.error as exc:
            raise ViewSetupError(
                f"Cannot create game windows on a {max_x}x{max_y} terminal."
            ) from exc
        self.score_window.addstr(0, 0, f"{SCORE_LABEL}0")
        self.score_window.refresh()
        self.game_window.keypad(True)
        self.game_window.nodelay(True)
        self.game_window.box()

    def display_apple(self, apple: Point) -> None:
        self._put(apple, APPLE_CHAR)

    def display_snake_head(self, head: Point) -> None:
        self._put(head, HEAD_CHAR)

    def delete_snake_tail(self, tail: Point) -> None:
        self._put(tail, EMPTY_CHAR)

    def display_score(self, score: int) -> None:
        self.score_window.addstr(0, len(SCORE_LABEL), str(score))
        self.score_window.clrtoeol()
        self.score_window.refresh()

    def poll_input(self) -> int | None:
        """Return the pending key code, or ``None`` when no key is waiting."""
        code = self.game_window.getch()
        return None if code == -1 else code

    def get_max_x(self) -> int:
        return self.game_window.getmaxyx()[1]

    def get_max_y(self) -> int:
        return self.game_window.getmaxyx()[0]

    def _put(self, point: Point, char: str) -> None:
        try:
            self.game_window.addch(point.y, point.x, char)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the window.
            logger.debug("Clipped draw at (%d, %d).", point.x, point.y)
