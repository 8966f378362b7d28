"""Tests for settings loading, CLI parsing, and the entry point."""

import itertools

from TicTacToe_AI import main as main_mod
from TicTacToe_AI.Tictactoegame import GameState
from TicTacToe_AI.utils.cli import parse_args


def test_packaged_settings_load():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_size"] == 3
    assert settings["first"] == "player"
    assert settings["mode"] == "human-vs-ai"


def test_missing_settings_fall_back_to_defaults(tmp_path):
    settings = main_mod.load_settings(tmp_path / "absent.yaml")
    assert settings == main_mod.DEFAULT_SETTINGS


def test_settings_override_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("first: computer\nlog_level: DEBUG\n", encoding="utf-8")
    settings = main_mod.load_settings(path)
    assert settings["first"] == "computer"
    assert settings["log_level"] == "DEBUG"
    assert settings["board_size"] == 3


def test_parse_args_defaults_defer_to_settings():
    args = parse_args([])
    assert args.board_size is None
    assert args.first is None
    assert args.mode is None
    assert args.settings == "config/settings.yaml"

    args = parse_args(["--first", "computer", "--mode", "ai-vs-ai", "--board-size", "3"])
    assert args.first == "computer"
    assert args.mode == "ai-vs-ai"
    assert args.board_size == 3


def test_ai_vs_ai_game_ends_in_draw(capsys, tmp_path):
    result = main_mod.main(["--mode", "ai-vs-ai", "--settings", str(tmp_path / "none.yaml")])
    assert result == GameState.DRAW
    captured = capsys.readouterr().out
    assert captured.startswith("Welcome to Tic-Tac-Toe!")
    assert captured.rstrip().endswith("It's a tie!")
    assert "Move 9:" in captured


def test_human_vs_ai_uses_console(monkeypatch, tmp_path):
    # Cycle through every cell, 1-indexed; occupied cells are re-prompted.
    cells = [str(n) for r in range(1, 4) for c in range(1, 4) for n in (r, c)]
    answers = itertools.cycle(cells)
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    result = main_mod.main(["--settings", str(tmp_path / "none.yaml")])
    assert result in (GameState.COMPUTER_WON, GameState.DRAW)
