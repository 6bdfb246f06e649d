"""
Tests for the console front-end.
"""

import sys

import pytest

from logic.board import Player
from logic.config import GameConfig
from main import ConsoleGame, main


def scripted(*lines):
    """Input function that replays lines, then signals end of input."""
    remaining = list(lines)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def test_console_plays_moves(capsys):
    game = ConsoleGame(scripted("0", "4"))
    game.start()

    state = game.game_state
    assert state.current_board[0] == Player.X
    assert state.current_board[4] == Player.O
    assert state.current_move == 2
    assert not game.is_running

    out = capsys.readouterr().out
    assert ">>> X played cell 0" in out
    assert ">>> O played cell 4" in out


def test_console_win_message(capsys):
    game = ConsoleGame(scripted("0", "3", "1", "4", "2", "5"))
    game.start()

    out = capsys.readouterr().out
    assert "X WINS! Line: [0, 1, 2]" in out
    assert "Illegal move: Game is already over! Winner: X" in out
    assert len(game.game_state.history) == 6


def test_console_rejects_bad_input(capsys):
    game = ConsoleGame()

    game.handle_command("hello")
    game.handle_command("12")
    game.handle_command("0")
    game.handle_command("0")

    out = capsys.readouterr().out
    assert "Unknown command: 'hello'" in out
    assert "Illegal move: Invalid cell 12" in out
    assert "Illegal move: Cell 0 is already occupied by X" in out
    assert game.game_state.current_move == 1


def test_console_jump_and_branch(capsys):
    game = ConsoleGame()
    for command in ("0", "1", "2", "jump 1", "8"):
        game.handle_command(command)

    state = game.game_state
    assert len(state.history) == 3
    assert state.current_board[8] == Player.O
    assert state.current_board[2] is None

    out = capsys.readouterr().out
    assert ">>> Go to move #1" in out


def test_console_bad_jump(capsys):
    game = ConsoleGame()

    game.handle_command("jump 5")
    game.handle_command("j x")
    game.handle_command("jump")

    out = capsys.readouterr().out
    assert "Can't jump: Move 5 out of range" in out
    assert "Not a move number: 'x'" in out
    assert "Usage: jump N" in out
    assert game.game_state.current_move == 0


def test_console_history(capsys):
    game = ConsoleGame()
    game.handle_command("4")
    game.handle_command("0")
    game.handle_command("j 1")
    capsys.readouterr()

    game.handle_command("history")

    lines = capsys.readouterr().out.splitlines()
    assert "   0: Go to game start" in lines
    assert " * 1: Go to move #1 (X at row 1, col 1)" in lines
    assert "   2: Go to move #2 (O at row 0, col 0)" in lines


def test_console_new_game():
    game = ConsoleGame()
    game.handle_command("4")
    old_state = game.game_state

    game.handle_command("new")

    assert game.game_state is not old_state
    assert game.game_state.current_move == 0
    assert len(game.game_state.history) == 1


def test_console_quit(capsys):
    game = ConsoleGame(scripted("q", "4"))
    game.start()

    assert game.game_state.current_move == 0
    assert "Game quit by user." in capsys.readouterr().out


def test_main_console_mode(monkeypatch, capsys):
    monkeypatch.setattr(GameConfig, "DEBUG_MODE", False)
    monkeypatch.setattr("builtins.input", scripted("4", "4", "quit"))

    main(["--no-ui", "--debug"])

    assert GameConfig.DEBUG_MODE
    out = capsys.readouterr().out
    assert ">>> X played cell 4" in out
    assert "Goodbye!" in out


def run_all_tests():
    """Run all tests."""
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
