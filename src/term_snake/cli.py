"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import curses
import logging
import sys
from dataclasses import replace

import numpy as np

from term_snake.config import GameConfig
from term_snake.controller import GameController
from term_snake.curses_view import CursesView, ViewSetupError
from term_snake.model import GameModel
from term_snake.snake import Point, Snake

logger = logging.getLogger(__name__)

GAME_OVER_TEMPLATE = "Game over! Your score is: {}"
PLAY_AGAIN_PROMPT = "Would you like to play again? (y/n)"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in the terminal. Arrow keys steer, q quits.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between ticks.",
    )
    parser.add_argument(
        "--length", type=int, default=None,
        help="Initial snake length.",
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path before playing.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file (nothing is logged otherwise).",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.tick_ms is not None:
        overrides["tick_interval"] = args.tick_ms / 1000
    if args.length is not None:
        overrides["initial_length"] = args.length
    return replace(config, **overrides) if overrides else config


def play_game(
    window: curses.window, config: GameConfig, rng: np.random.Generator,
) -> int:
    """Play a single game on *window* and return its score."""
    view = CursesView(window)
    snake = Snake(Point(config.start_x, config.start_y), config.initial_length)
    model = GameModel(snake=snake, rng=rng)
    controller = GameController(
        view, model, tick_interval=config.tick_interval,
    )
    return controller.run()


def ask_play_again(window: curses.window, score: int) -> bool:
    """Show the final score and block until the player answers y or n."""
    max_y, max_x = window.getmaxyx()
    row, col = max_y // 2, max(max_x // 2 - 20, 0)
    window.addstr(row, col, GAME_OVER_TEMPLATE.format(score))
    window.addstr(row + 2, col, PLAY_AGAIN_PROMPT)
    window.nodelay(False)
    while True:
        code = window.getch()
        if code == ord("y"):
            return True
        if code == ord("n"):
            return False


def _session(window: curses.window, config: GameConfig) -> int:
    rng = np.random.default_rng(config.seed)
    games = 0
    while True:
        score = play_game(window, config, rng)
        games += 1
        logger.info("Game %d finished with score %d.", games, score)
        if not ask_play_again(window, score):
            return score


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        config = _resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.save_config:
        config.save(args.save_config)

    try:
        score = curses.wrapper(_session, config)
    except ViewSetupError as exc:
        logger.error("Terminal setup failed: %s", exc)
        print(f"Cannot start the game: {exc}", file=sys.stderr)  # noqa: T201
        return 1
    print(f"Final score: {score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
