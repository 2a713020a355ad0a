"""Tests for the GameModel module."""

import numpy as np
import pytest

from term_snake.model import APPLE_REWARD, GameModel
from term_snake.snake import Point


class TestModelInit:
    def test_defaults(self):
        model = GameModel(seed=0)
        assert model.score == 0
        assert model.apple is None
        assert list(model.snake) == [Point(10, 10), Point(9, 10), Point(8, 10)]

    def test_negative_score_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            GameModel(score=-1)


class TestModelApple:
    def test_generate_replaces_apple(self):
        model = GameModel(apple=Point(1, 1), seed=5)
        apple = model.generate_new_apple(40, 30)
        assert model.apple == apple
        assert 1 <= apple.x <= 38
        assert 1 <= apple.y <= 28

    def test_uses_given_rng(self):
        a = GameModel(rng=np.random.default_rng(9))
        b = GameModel(rng=np.random.default_rng(9))
        assert a.generate_new_apple(20, 20) == b.generate_new_apple(20, 20)


class TestModelScore:
    def test_add_score(self):
        model = GameModel()
        assert model.add_score() == APPLE_REWARD
        assert model.add_score() == 2

    def test_score_never_decreases(self):
        model = GameModel(score=3)
        with pytest.raises(ValueError):
            model.add_score(-1)
        assert model.score == 3
