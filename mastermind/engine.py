"""
Pure game logic (no console, no state).
We compute two feedback numbers for each guess:
- well_placed: how many indices are exactly correct (right digit, right place)
- misplaced: digits that appear in the secret but sit at another index

Codes never repeat a digit, so "appears in the secret" is a plain set
intersection and every digit is counted at most once.
"""

from typing import Optional

from .types import CODE_LENGTH, SYMBOLS, Code, Score


def is_valid_code(text: Optional[str]) -> bool:
    """
    True only for exactly 4 characters, each between '0' and '8', none repeated.
    Used for the operator's secret and for every guess line. Never raises.
    """
    if not isinstance(text, str) or len(text) != CODE_LENGTH:
        return False

    seen = set()
    for char in text:
        # membership in SYMBOLS rejects unicode digits like '٣' too
        if char not in SYMBOLS or char in seen:
            return False
        seen.add(char)
    return True


def score_guess(secret: Code, guess: Code) -> Score:
    """
    Example:
      secret = "1234"
      guess  = "1325"
      well_placed = 1  (the first '1' matches)
      misplaced   = 2  ({1,2,3} are shared, minus the one already well placed)
      Returns Score(well_placed=1, misplaced=2)
    """

    # 0. Both sides must be admissible, otherwise the subtraction below overcounts
    if not is_valid_code(secret) or not is_valid_code(guess):
        raise ValueError("Secret and guess must be 4 distinct digits from 0 to 8.")

    # 1. Count exact position matches --> well_placed
    well_placed = 0
    for i in range(CODE_LENGTH):
        if secret[i] == guess[i]:
            well_placed += 1

    # 2. Digits present anywhere in both, minus the ones already counted
    shared = len(set(secret) & set(guess))
    misplaced = shared - well_placed

    return Score(well_placed, misplaced)


def is_win(secret: Code, guess: Code) -> bool:
    """Win = the guess is the secret, digit for digit."""
    return is_valid_code(guess) and secret == guess
