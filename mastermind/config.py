"""
Configuration resolver
Turns command-line flags (and optional env vars) into a GameConfig:
  -c <code>  secret code; anything inadmissible falls back to a random code
  -t <n>     attempt budget; anything but a positive integer warns and uses 10

Env vars (a local .env is loaded by main()):
  MASTERMIND_CODE           used when -c is not given
  MASTERMIND_MAX_ATTEMPTS   used when -t is not given

Unknown arguments (including -h/--help) are ignored. -t may repeat: every bad
value prints its own warning and the last -t given decides the budget. When -c
repeats, the last one wins. Bad values never stop the game from starting.
"""

import argparse
import os
from typing import Callable, Mapping, Optional, Sequence

from .engine import is_valid_code
from .random_code import generate_code
from .schemas import GameConfig
from .types import DEFAULT_ATTEMPTS

CODE_ENV = "MASTERMIND_CODE"
ATTEMPTS_ENV = "MASTERMIND_MAX_ATTEMPTS"

INVALID_ATTEMPTS_WARNING = f"Invalid number of attempts. Using default ({DEFAULT_ATTEMPTS})."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Guess the 4-digit code (digits 0-8, no repeats).",
        allow_abbrev=False,
        # -h/--help count as unknown arguments; they must not stop the game
        add_help=False,
    )
    # nargs="?" so a trailing flag without a value is ignored instead of erroring
    parser.add_argument("-c", dest="code", nargs="?", default=None, help="secret code, e.g. 0123")
    # every -t is kept so each bad one gets its own warning
    parser.add_argument(
        "-t", dest="attempts", nargs="?", action="append", default=None, help="maximum number of valid guesses"
    )
    return parser


def parse_attempts(text: Optional[str]) -> Optional[int]:
    """Positive integer written with ASCII digits (optional sign), or None."""
    if text is None:
        return None
    text = text.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    # int() alone would take "1_0" and non-ASCII digits like "١٠"
    if not (digits.isascii() and digits.isdigit()):
        return None
    value = int(text)
    if value <= 0:
        return None
    return value


def resolve_config(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    warn: Callable[[str], None] = print,
    randbelow: Optional[Callable[[int], int]] = None,
) -> GameConfig:
    if environ is None:
        environ = os.environ

    args, _unknown = build_parser().parse_known_args(argv)

    # 1. Flags win over env vars
    code = args.code if args.code is not None else environ.get(CODE_ENV)
    attempts_values = [value for value in (args.attempts or []) if value is not None]
    if not attempts_values and environ.get(ATTEMPTS_ENV) is not None:
        attempts_values = [environ[ATTEMPTS_ENV]]

    # 2. Attempts: each unusable value warns and resets to the default; the last one decides
    max_attempts = DEFAULT_ATTEMPTS
    for attempts_text in attempts_values:
        parsed = parse_attempts(attempts_text)
        if parsed is None:
            warn(INVALID_ATTEMPTS_WARNING)
            max_attempts = DEFAULT_ATTEMPTS
        else:
            max_attempts = parsed

    # 3. Code: silently replaced by a random one if missing or inadmissible
    if not is_valid_code(code):
        code = generate_code(randbelow)

    return GameConfig(secret_code=code, max_attempts=max_attempts)
