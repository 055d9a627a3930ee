"""
Testing the console text flow
- A scripted line source stands in for the keyboard.
- output.append stands in for print, so we can compare the exact message sequence.
"""

import pytest

from mastermind.console import run_game, read_console_line
import mastermind.console as console
from mastermind.session import GameSession


def test_full_game_message_sequence(scripted_input, output):
    """
    Flow:
    1) Bad line -> wrong input, still round 0.
    2) Wrong guess -> scores + trials left.
    3) Same guess again -> already tried, still round 1.
    4) Winning guess -> success and stop.
    """
    read_line = scripted_input("12", "1325", "1325", "1234")
    session = GameSession("1234", 10)

    status = run_game(session, read_line, output.append)

    assert status == "won"
    assert output == [
        "Can you break the code? Enter a valid guess.",
        "Round 0",
        "Wrong input! Try again w/ 4 unique digits.",
        "Round 0",
        "Well placed pieces: 1",
        "Misplaced pieces: 2",
        "Trials left: 9",
        "Round 1",
        "You already tried this! Pick something else.",
        "Round 1",
        "Congratz! You did it!",
    ]
    assert read_line.prompts == [">", ">", ">", ">"]


def test_lost_game_reveals_code_without_trials_line(scripted_input, output):
    read_line = scripted_input("4567", "4568")
    session = GameSession("0123", 2)

    status = run_game(session, read_line, output.append)

    assert status == "lost"
    assert output[-5:] == [
        "Round 1",
        "Well placed pieces: 0",
        "Misplaced pieces: 0",
        "You've used all attempts. Better luck next time!",
        "The code was: 0123",
    ]
    assert "Trials left: 1" in output
    assert "Trials left: 0" not in output


def test_end_of_input_stops_immediately(scripted_input, output):
    read_line = scripted_input()
    session = GameSession("0123", 10)

    status = run_game(session, read_line, output.append)

    assert status == "terminated"
    assert output == [
        "Can you break the code? Enter a valid guess.",
        "Round 0",
        "\n[EOF detected. Exiting...]",
    ]
    assert session.valid_attempts == 0


def test_read_console_line_maps_eof_to_none_and_lets_ctrl_c_through(monkeypatch):
    def raise_eof(prompt):
        raise EOFError

    def raise_interrupt(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", raise_eof)
    assert read_console_line(">") is None

    monkeypatch.setattr("builtins.input", raise_interrupt)
    with pytest.raises(KeyboardInterrupt):
        read_console_line(">")

    monkeypatch.setattr("builtins.input", lambda prompt: "0123")
    assert read_console_line(">") == "0123"


def test_run_game_defaults_to_console_reader(monkeypatch, output):
    monkeypatch.setattr(console, "read_console_line", lambda prompt: "0123")
    session = GameSession("0123", 3)

    assert run_game(session, write=output.append) == "won"
    assert output[-1] == "Congratz! You did it!"
