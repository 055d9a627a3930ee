"""
Labels for clarity.
"""

from typing import Literal, NamedTuple

Code = str  # 4 distinct digits from '0' -> '8', e.g. "0123"
GameStatus = Literal["in_progress", "won", "lost", "terminated"]
RoundOutcome = Literal["terminated", "invalid", "duplicate", "won", "scored", "lost"]

CODE_LENGTH = 4
SYMBOLS = "012345678"
DEFAULT_ATTEMPTS = 10


class Score(NamedTuple):
    well_placed: int
    misplaced: int
