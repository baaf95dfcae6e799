"""Tests for the hot-seat CLI, driven through a scripted input()."""

import pytest

from connect4.game.rules import GameState
from connect4.interfaces import cli as cli_mod
from connect4.interfaces.cli import SimpleCLI
from connect4.utils import Piece


def script_input(monkeypatch, answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_play_until_win_then_quit(monkeypatch, capsys):
    # 1-based columns: Red stacks column 1, Yellow stacks column 2
    script_input(monkeypatch, ["1", "2", "1", "2", "1", "2", "1", "n"])
    game = GameState()
    SimpleCLI(game).play_game()

    out = capsys.readouterr().out
    assert "Red wins!" in out
    assert "Score - Red: 1, Yellow: 0" in out
    assert game.winner == Piece.RED


def test_play_again_keeps_score(monkeypatch, capsys):
    red_win = ["1", "2", "1", "2", "1", "2", "1"]
    script_input(monkeypatch, red_win + ["y"] + red_win + ["n"])
    game = GameState()
    SimpleCLI(game).play_game()

    assert game.player1_wins == 2
    assert "Score - Red: 2, Yellow: 0" in capsys.readouterr().out


def test_rejections_and_commands(monkeypatch, capsys):
    script_input(monkeypatch, ["9", "abc", "4", "h", "r", "q"])
    game = GameState()
    SimpleCLI(game).play_game()

    out = capsys.readouterr().out
    assert "Column must be between 1 and 7." in out
    assert "Invalid input" in out
    assert "1. Red plays column 4" in out
    assert "Game restarted." in out
    assert "Quitting game." in out
    assert game.move_count == 0


@pytest.mark.parametrize("entry", ["0", "-1", "-2", "8"])
def test_out_of_range_column_numbers_are_rejected(monkeypatch, capsys, entry):
    script_input(monkeypatch, ["4", entry, "5", "q"])
    game = GameState()
    SimpleCLI(game).play_game()

    out = capsys.readouterr().out
    assert "Column must be between 1 and 7." in out
    assert "Game restarted." not in out
    assert game.move_history == ("Red plays column 4", "Yellow plays column 5")


def test_full_column_message(monkeypatch, capsys):
    script_input(monkeypatch, ["1"] * 7 + ["q"])
    SimpleCLI(GameState()).play_game()
    assert "Column 1 is full." in capsys.readouterr().out


def test_end_of_input_quits(monkeypatch, capsys):
    script_input(monkeypatch, ["4"])
    game = GameState()
    SimpleCLI(game).play_game()
    assert "Quitting game." in capsys.readouterr().out
    assert game.move_count == 1


def test_replay_command(capsys):
    status = SimpleCLI().run(["replay", "--moves", "1,7,2,7,3,7,4"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Red wins!" in out
    assert "7. Red plays column 4" in out


def test_replay_rejects_move_after_game_over(capsys):
    status = cli_mod.main(["replay", "--moves", "1,2,1,2,1,2,1,3"])
    out = capsys.readouterr().out
    assert status == 1
    assert "Move 8 rejected: The game is over." in out


def test_replay_bad_input(capsys):
    assert SimpleCLI().run(["replay", "--moves", "1,x"]) == 1
    assert "Could not parse moves" in capsys.readouterr().out


def test_missing_command(capsys):
    assert SimpleCLI().run([]) == 1


def test_unknown_debug_level_is_rejected():
    with pytest.raises(SystemExit):
        SimpleCLI().parse_args(["--debug-level", "loud", "play"])
