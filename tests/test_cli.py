"""Tests for the term-snake CLI."""

import curses

import pytest

from term_snake import cli
from term_snake.cli import _build_parser, _resolve_config, ask_play_again, main
from term_snake.config import GameConfig
from term_snake.curses_view import ViewSetupError


class PromptWindow:
    """Records prompt text and replays keys for the play-again loop."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.lines = []
        self.blocking = None

    def getmaxyx(self):
        return 24, 80

    def addstr(self, y, x, text):
        self.lines.append((y, x, text))

    def nodelay(self, flag):
        self.blocking = not flag

    def getch(self):
        return self.keys.pop(0)


class TestCLIParser:
    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.config is None
        assert args.seed is None
        assert args.tick_ms is None
        assert args.log_file is None
        assert args.log_level == "INFO"

    def test_flags_override_config(self, tmp_path):
        path = tmp_path / "game.json"
        GameConfig(seed=1, initial_length=5).save(path)
        args = _build_parser().parse_args([
            "--config", str(path), "--seed", "7", "--tick-ms", "80",
        ])
        config = _resolve_config(args)
        assert config.seed == 7
        assert config.tick_interval == pytest.approx(0.08)
        assert config.initial_length == 5

    def test_invalid_length_exits(self):
        with pytest.raises(SystemExit):
            main(["--length", "1"])

    def test_overlong_body_exits(self, capsys):
        with pytest.raises(SystemExit):
            main(["--length", "12"])
        assert "inside the border" in capsys.readouterr().err

    def test_missing_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main(["--config", str(tmp_path / "absent.json")])
        assert "Cannot read config" in capsys.readouterr().err


class TestPlayAgainPrompt:
    def test_yes(self):
        window = PromptWindow([ord("x"), ord("y")])
        assert ask_play_again(window, 3)
        assert window.blocking is True
        assert window.lines[0] == (12, 20, "Game over! Your score is: 3")
        assert window.lines[1][2] == "Would you like to play again? (y/n)"

    def test_no(self):
        assert not ask_play_again(PromptWindow([ord("n")]), 0)


class TestSession:
    def test_replays_until_no(self, monkeypatch):
        scores = iter([2, 5])
        monkeypatch.setattr(cli, "play_game", lambda w, c, r: next(scores))
        window = PromptWindow([ord("y"), ord("n")])
        assert cli._session(window, GameConfig(seed=0)) == 5

    def test_main_prints_final_score(self, monkeypatch, capsys, tmp_path):
        monkeypatch.setattr(curses, "wrapper", lambda fn, config: 9)
        saved = tmp_path / "saved.json"
        assert main(["--seed", "3", "--save-config", str(saved)]) == 0
        assert "Final score: 9" in capsys.readouterr().out
        assert GameConfig.load(saved).seed == 3

    def test_main_reports_setup_failure(self, monkeypatch, capsys):
        def fail(fn, config):
            raise ViewSetupError("too small")

        monkeypatch.setattr(curses, "wrapper", fail)
        assert main([]) == 1
        assert "too small" in capsys.readouterr().err
