"""Tick-based game loop composing the model with a view."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable

from term_snake.interfaces import Model, View
from term_snake.keys import Command, translate_key
from term_snake.model import APPLE_REWARD, GameModel
from term_snake.snake import resolve_direction

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.1


class GameStatus(enum.Enum):
    """Lifecycle of a game session."""

    RUNNING = "running"
    GAME_OVER = "game_over"
    ABORTED = "aborted"


class GameController:
    """Single-player game loop.

    The controller owns the model for the whole session. Each call to
    :meth:`step` advances the game by one tick; :meth:`run` repeats it until
    the game ends and returns the final score.

    Collisions are checked at the start of a tick against the head committed
    by the previous tick, so a fatal head is painted once before the game
    ends.
    """

    def __init__(
        self,
        view: View,
        model: Model | None = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        keymap: dict[int, Command] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if tick_interval < 0:
            raise ValueError("tick_interval must be non-negative.")
        self.view = view
        self.model = model if model is not None else GameModel()
        self.tick_interval = tick_interval
        self.keymap = keymap
        self._sleep = sleep
        self.status = GameStatus.RUNNING
        self.tick = 0

    def step(self) -> GameStatus:
        """Advance the game by one tick and return the resulting status."""
        if self.status is not GameStatus.RUNNING:
            return self.status

        grow = False
        if self._ate_apple():
            self._generate_new_apple()
            self._update_score(APPLE_REWARD)
            grow = True

        if self._collided_with_borders() or self._collided_with_self():
            self._end(GameStatus.GAME_OVER)
            return self.status

        command = translate_key(self.view.poll_input(), self.keymap)
        if command is Command.ABORT:
            self._end(GameStatus.ABORTED)
            return self.status

        snake = self.model.snake
        direction = resolve_direction(
            snake.current_direction(),
            command.direction if command is not None else None,
        )
        vacated = snake.move_in_direction(direction, grow)
        if vacated is not None:
            self.view.delete_snake_tail(vacated)
        self.view.display_snake_head(snake.head)

        self.tick += 1
        return self.status

    def run(self) -> int:
        """Play until game over or abort; return the final score."""
        if self.model.apple is None:
            self._generate_new_apple()
        else:
            self.view.display_apple(self.model.apple)
        self.view.display_score(self.model.score)

        while self.step() is GameStatus.RUNNING:
            self._sleep(self.tick_interval)
        return self.model.score

    def _generate_new_apple(self) -> None:
        apple = self.model.generate_new_apple(
            self.view.get_max_x(), self.view.get_max_y(),
        )
        self.view.display_apple(apple)

    def _update_score(self, amount: int) -> None:
        score = self.model.add_score(amount)
        logger.debug("Apple eaten at tick %d, score %d.", self.tick, score)
        self.view.display_score(score)

    def _ate_apple(self) -> bool:
        return self.model.snake.head == self.model.apple

    def _collided_with_borders(self) -> bool:
        head = self.model.snake.head
        return (
            head.x <= 0
            or head.x >= self.view.get_max_x()
            or head.y <= 0
            or head.y >= self.view.get_max_y()
        )

    def _collided_with_self(self) -> bool:
        return self.model.snake.collides_with_self()

    def _end(self, status: GameStatus) -> None:
        self.status = status
        logger.info(
            "Session ended (%s) at tick %d with score %d.",
            status.value, self.tick, self.model.score,
        )
