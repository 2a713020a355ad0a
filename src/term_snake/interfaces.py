"""Capability contracts between the game loop and its collaborators."""

from __future__ import annotations

from typing import Protocol

from term_snake.snake import Point, Snake


class View(Protocol):
    """Presentation boundary: paints state changes and reads raw keys.

    Implemented by :class:`term_snake.curses_view.CursesView` and by test
    doubles. The arena bounds must stay fixed for a session.
    """

    def display_apple(self, apple: Point) -> None: ...

    def display_snake_head(self, head: Point) -> None: ...

    def delete_snake_tail(self, tail: Point) -> None: ...

    def display_score(self, score: int) -> None: ...

    def poll_input(self) -> int | None:
        """Return a raw key code, or ``None`` if nothing was pressed."""
        ...

    def get_max_x(self) -> int: ...

    def get_max_y(self) -> int: ...


class Model(Protocol):
    """Game state the controller mutates each tick."""

    snake: Snake
    apple: Point | None
    score: int

    def generate_new_apple(self, max_x: int, max_y: int) -> Point: ...

    def add_score(self, amount: int = ...) -> int: ...
