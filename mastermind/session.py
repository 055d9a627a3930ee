"""
Game session (round state machine)
Holds one game's state in memory and applies one line of player input at a time.
No printing here: the console turns each RoundResult into text.
"""

from dataclasses import dataclass, field
from typing import Optional, Set

from .engine import is_valid_code, is_win, score_guess
from .types import Code, GameStatus, RoundOutcome, Score


class GameOverError(RuntimeError):
    """Raised when input is submitted to a session that already ended."""


@dataclass
class RoundResult:
    outcome: RoundOutcome
    round_number: int
    attempts_used: int
    attempts_left: int
    guess: Optional[str] = None
    score: Optional[Score] = None
    # only set once the budget is spent without a win
    secret_code: Optional[Code] = None


@dataclass
class GameSession:
    secret_code: Code
    max_attempts: int
    valid_attempts: int = 0
    status: GameStatus = "in_progress"
    history: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if not is_valid_code(self.secret_code):
            raise ValueError("Secret code must be 4 distinct digits between 0 and 8.")
        if self.max_attempts <= 0:
            raise ValueError("Number of attempts must be a positive integer.")

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.valid_attempts

    @property
    def round_number(self) -> int:
        # rounds count valid guesses so far, so a rejected line replays the same round
        return self.valid_attempts

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"

    def submit(self, line: Optional[str]) -> RoundResult:
        """
        One transition. line is None when the input stream has ended.
        Only admissible, never-seen guesses use up an attempt.
        """
        if self.is_over:
            raise GameOverError(f"Game already finished ({self.status}).")

        round_number = self.round_number

        # 1. End of input ends the game without using an attempt
        if line is None:
            self.status = "terminated"
            return self._result("terminated", round_number)

        # 2. Bad shape -> same round again
        if not is_valid_code(line):
            return self._result("invalid", round_number, guess=line)

        # 3. Already tried -> same round again
        if line in self.history:
            return self._result("duplicate", round_number, guess=line)

        # 4. Accepted: the only path that spends the budget
        self.history.add(line)
        self.valid_attempts += 1

        # 5. Win is checked before any scoring
        if is_win(self.secret_code, line):
            self.status = "won"
            return self._result("won", round_number, guess=line)

        # 6. Score it, then see whether that was the last attempt
        score = score_guess(self.secret_code, line)
        if self.valid_attempts >= self.max_attempts:
            self.status = "lost"
            return self._result(
                "lost", round_number, guess=line, score=score, secret_code=self.secret_code
            )

        return self._result("scored", round_number, guess=line, score=score)

    def _result(self, outcome: RoundOutcome, round_number: int, **extra) -> RoundResult:
        return RoundResult(
            outcome=outcome,
            round_number=round_number,
            attempts_used=self.valid_attempts,
            attempts_left=self.attempts_left,
            **extra,
        )
