"""Apple placement logic."""

from __future__ import annotations

import logging

import numpy as np

from term_snake.snake import Point

logger = logging.getLogger(__name__)


def generate_apple(max_x: int, max_y: int, rng: np.random.Generator) -> Point:
    """Draw an apple position strictly inside the arena border.

    ``x`` is uniform over ``[1, max_x - 2]`` and ``y`` over ``[1, max_y - 2]``,
    both inclusive. The snake body is not avoided.
    """
    if max_x < 3 or max_y < 3:
        raise ValueError("Arena must be at least 3×3 to place an apple.")
    x = int(rng.integers(1, max_x - 2, endpoint=True))
    y = int(rng.integers(1, max_y - 2, endpoint=True))
    logger.debug("Apple placed at (%d, %d).", x, y)
    return Point(x, y)
