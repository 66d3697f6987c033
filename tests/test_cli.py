"""Tests for the grid-snake CLI."""

import json

from grid_snake.cli import _build_parser, main
from grid_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.seconds == 30.0
        assert args.seed is None
        assert args.config is None

    def test_simulate_with_flags(self):
        args = _build_parser().parse_args([
            "--config", "game.json", "simulate",
            "--seconds", "5", "--dt", "0.1", "--seed", "3",
        ])
        assert args.config == "game.json"
        assert args.seconds == 5.0
        assert args.dt == 0.1
        assert args.seed == 3


class TestCLISimulate:
    def test_simulate_prints_state(self, capsys):
        result = main(["simulate", "--seconds", "10", "--dt", "0.125", "--seed", "3"])
        assert result == 0
        state = json.loads(capsys.readouterr().out)
        assert state["tick"] == 20
        assert len(state["snake"]["body"]) >= 2

    def test_simulate_is_deterministic_with_seed(self, capsys):
        main(["simulate", "--seconds", "12", "--dt", "0.05", "--seed", "8"])
        first = capsys.readouterr().out
        main(["simulate", "--seconds", "12", "--dt", "0.05", "--seed", "8"])
        second = capsys.readouterr().out
        assert first == second

    def test_bad_press_chance(self):
        assert main(["simulate", "--press-chance", "2"]) == 2

    def test_simulate_with_config(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        GameConfig(arena_width=20, arena_height=20, start_x=10, start_y=10).save(path)
        assert main(["--config", str(path), "simulate", "--seconds", "1", "--seed", "1"]) == 0
        state = json.loads(capsys.readouterr().out)
        assert state["grid"] == {"width": 20, "height": 20}


class TestCLIConfig:
    def test_prints_defaults(self, capsys):
        assert main(["config"]) == 0
        assert json.loads(capsys.readouterr().out) == GameConfig().to_dict()

    def test_writes_output(self, tmp_path, capsys):
        out = tmp_path / "saved.json"
        assert main(["config", "--output", str(out)]) == 0
        assert GameConfig.load(out) == GameConfig()
