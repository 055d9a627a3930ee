'''
Mastermind console game

Usage:
  mastermind [-c CODE] [-t ATTEMPTS]

Flow:
  resolve_config -> GameSession -> run_game until won / lost / end of input
'''

import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import resolve_config
from .console import INTERRUPTED, run_game
from .session import GameSession


def main(argv: Optional[Sequence[str]] = None) -> int:
    # dev convenience: pick up MASTERMIND_* from a local .env if present
    load_dotenv()

    config = resolve_config(argv)
    session = GameSession(config.secret_code, config.max_attempts)
    try:
        run_game(session)
    except KeyboardInterrupt:
        # Ctrl+C at the prompt: leave quietly with the usual interrupt status
        print(INTERRUPTED)
        return 130

    # won, lost and end of input are all normal endings
    return 0


if __name__ == "__main__":
    sys.exit(main())
