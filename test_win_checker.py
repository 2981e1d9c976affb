"""
Tests for the win checker.
"""

import pytest

from morris.game_state import GameState, Symbol
from morris.win_checker import WinChecker

X, O, _ = Symbol.X, Symbol.O, None


def state_with(board):
    game = GameState()
    game.board = [list(row) for row in board]
    return game


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    game = GameState()
    for row, col in line:
        game.board[row][col] = O

    checker = WinChecker()
    assert checker.check_winner(game) == O
    assert checker.get_winning_line(game) == line


def test_there_are_exactly_eight_lines():
    assert len(WinChecker.WINNING_LINES) == 8


@pytest.mark.parametrize("board", [
    # Line with an empty cell
    [[X, X, _],
     [_, O, _],
     [_, O, _]],
    # Mixed symbols on every line
    [[X, O, X],
     [O, O, X],
     [X, X, O]],
    [[_, _, _],
     [_, _, _],
     [_, _, _]],
])
def test_no_winner(board):
    checker = WinChecker()
    game = state_with(board)
    assert checker.check_winner(game) is None
    assert checker.get_winning_line(game) is None


def test_rows_are_scanned_before_columns_and_diagonals():
    # Row 0 and column 0 are both complete (not reachable in play, but
    # the scan order must still be deterministic)
    game = state_with([
        [X, X, X],
        [X, O, O],
        [X, O, O],
    ])
    checker = WinChecker()
    assert checker.get_winning_line(game) == [(0, 0), (0, 1), (0, 2)]


def test_columns_are_scanned_before_diagonals():
    game = state_with([
        [O, X, X],
        [O, O, X],
        [O, X, O],
    ])
    assert WinChecker().get_winning_line(game) == [(0, 0), (1, 0), (2, 0)]


def test_update_game_state_sets_winner_and_message():
    game = state_with([
        [_, _, X],
        [_, X, _],
        [X, O, O],
    ])
    WinChecker().update_game_state(game)

    assert game.winner == X
    assert game.message == "Player X wins!"


def test_update_game_state_leaves_message_alone_without_winner():
    game = state_with([
        [X, _, _],
        [_, O, _],
        [_, _, _],
    ])
    game.message = "keep me"
    WinChecker().update_game_state(game)

    assert game.winner is None
    assert game.message == "keep me"
