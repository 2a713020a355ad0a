"""Game session state: snake, apple, score and random source."""

from __future__ import annotations

import numpy as np

from term_snake.apple import generate_apple
from term_snake.snake import Point, Snake

# Score awarded for each apple eaten.
APPLE_REWARD = 1


class GameModel:
    """State owned by a single game session.

    Uses a seeded NumPy RNG for reproducible apple placement. The model does
    no I/O; the controller decides when to render its changes.
    """

    def __init__(
        self,
        snake: Snake | None = None,
        apple: Point | None = None,
        score: int = 0,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if score < 0:
            raise ValueError("score must be non-negative.")
        self.snake = snake if snake is not None else Snake(Point(10, 10), 3)
        self.apple = apple
        self.score = score
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate_new_apple(self, max_x: int, max_y: int) -> Point:
        """Replace the apple unconditionally and return its new position."""
        self.apple = generate_apple(max_x, max_y, self.rng)
        return self.apple

    def add_score(self, amount: int = APPLE_REWARD) -> int:
        """Increase the score and return the new total."""
        if amount < 0:
            raise ValueError("Score can only increase.")
        self.score += amount
        return self.score
