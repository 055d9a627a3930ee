"""
Random secret code.
Draw 4 digits from a shrinking pool of 0..8 so no digit can repeat and every
ordered combination (9*8*7*6 = 3024 of them) is equally likely.
"""

from secrets import randbelow as secure_randbelow
from typing import Callable, Optional

from .types import CODE_LENGTH, SYMBOLS, Code


def generate_code(randbelow: Optional[Callable[[int], int]] = None) -> Code:
    # randbelow(n) must return an int in [0, n); tests pass a seeded one
    if randbelow is None:
        randbelow = secure_randbelow

    pool = list(SYMBOLS)
    digits = []
    while len(digits) < CODE_LENGTH:
        index = randbelow(len(pool))
        digits.append(pool.pop(index))

    return "".join(digits)
