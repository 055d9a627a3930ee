"""
Console surface
- Reads one line per round from an injectable line source (defaults to input()).
- Prints every session transition in the same order the game always has.

Tests pass a scripted read_line and a list-appending write, so no real terminal is needed.
"""

from typing import Callable, Optional

from .session import GameSession, RoundResult
from .types import GameStatus

LineSource = Callable[[str], Optional[str]]
Writer = Callable[[str], None]

BANNER = "Can you break the code? Enter a valid guess."
PROMPT = ">"
WRONG_INPUT = "Wrong input! Try again w/ 4 unique digits."
ALREADY_TRIED = "You already tried this! Pick something else."
WON = "Congratz! You did it!"
LOST = "You've used all attempts. Better luck next time!"
TERMINATED = "\n[EOF detected. Exiting...]"
INTERRUPTED = "\n[Interrupted. Exiting...]"


def read_console_line(prompt: str) -> Optional[str]:
    """input() that reports a closed stream (Ctrl+D) as None. Ctrl+C propagates."""
    try:
        return input(prompt)
    except EOFError:
        return None


def render_result(result: RoundResult, write: Writer = print) -> None:
    if result.outcome == "terminated":
        write(TERMINATED)
    elif result.outcome == "invalid":
        write(WRONG_INPUT)
    elif result.outcome == "duplicate":
        write(ALREADY_TRIED)
    elif result.outcome == "won":
        write(WON)
    else:
        # scored or lost: both report the score first
        write(f"Well placed pieces: {result.score.well_placed}")
        write(f"Misplaced pieces: {result.score.misplaced}")
        if result.attempts_left > 0:
            write(f"Trials left: {result.attempts_left}")
        if result.outcome == "lost":
            write(LOST)
            write(f"The code was: {result.secret_code}")


def run_game(
    session: GameSession,
    read_line: Optional[LineSource] = None,
    write: Writer = print,
) -> GameStatus:
    """Play until won, lost or input ends. Returns the final status."""
    if read_line is None:
        read_line = read_console_line

    write(BANNER)
    while not session.is_over:
        write(f"Round {session.round_number}")
        line = read_line(PROMPT)
        result = session.submit(line)
        render_result(result, write)

    return session.status
