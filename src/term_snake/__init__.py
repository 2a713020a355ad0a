"""Term Snake — terminal snake game engine."""

from term_snake.config import GameConfig
from term_snake.controller import GameController, GameStatus
from term_snake.keys import Command, translate_key
from term_snake.model import GameModel
from term_snake.snake import (
    BodyInvariantError,
    Direction,
    Point,
    Snake,
    resolve_direction,
)

__all__ = [
    "BodyInvariantError",
    "Command",
    "Direction",
    "GameConfig",
    "GameController",
    "GameModel",
    "GameStatus",
    "Point",
    "Snake",
    "resolve_direction",
    "translate_key",
]
