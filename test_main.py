"""
Tests for the console front end.
"""

import pytest

from main import MorrisConsole, parse_command
from morris.game_state import Symbol
from morris.session import GameSession


@pytest.mark.parametrize("text,expected", [
    ("1,1", (1, 1)),
    (" 0 2 ", (0, 2)),
    ("2, 0", (2, 0)),
    ("r", "reset"),
    ("RESET", "reset"),
    ("q", "quit"),
    ("exit", "quit"),
    ("3,0", None),
    ("-1,0", None),
    ("a,b", None),
    ("1", None),
    ("", None),
])
def test_parse_command(text, expected):
    assert parse_command(text) == expected


def scripted(lines):
    feed = iter(lines)

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError
    return fake_input


def test_scripted_game_until_win(capsys):
    session = GameSession()
    console = MorrisConsole(session, input_func=scripted([
        "0,0", "1,1", "0,1", "1,0", "0,2", "2,2", "q",
    ]))
    console.start()

    out = capsys.readouterr().out
    assert session.winner == Symbol.X
    assert "Player X wins!" in out
    assert "Winning line: (0,0) (0,1) (0,2)" in out
    assert "Game is already over!" in out
    assert "Game quit by user." in out
    assert not console.is_running


def test_reset_command(capsys):
    session = GameSession()
    console = MorrisConsole(session)
    console.handle_line("1,1")
    console.handle_line("r")

    assert session.pieces_placed(Symbol.X) == 0
    assert session.board[1][1] is None
    assert "Game reset!" in capsys.readouterr().out


def test_invalid_input_leaves_game_alone(capsys):
    session = GameSession()
    console = MorrisConsole(session)
    console.handle_line("9,9")

    assert session.pieces_placed(Symbol.X) == 0
    assert "Invalid input" in capsys.readouterr().out


def test_end_of_input_stops_loop():
    console = MorrisConsole(input_func=scripted(["1,1"]))
    console.start()

    assert console.session.board[1][1] == Symbol.X
