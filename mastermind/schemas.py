"""
Explicit validation & Pydantic models
- GameConfig is what the configuration resolver hands to a game session.
- Validators re-check the code and budget so a session never starts from bad input.
"""

from pydantic import BaseModel, Field, field_validator

from .engine import is_valid_code
from .types import DEFAULT_ATTEMPTS


class GameConfig(BaseModel):
    secret_code: str = Field(..., description="4 distinct digits from 0 to 8; never printed until the game is lost")
    max_attempts: int = Field(DEFAULT_ATTEMPTS, description="How many valid guesses the player gets")

    model_config = {"frozen": True}

    @field_validator("secret_code")
    @classmethod
    def validate_code(cls, code: str) -> str:
        if not is_valid_code(code):
            raise ValueError("Secret code must be 4 distinct digits between 0 and 8.")
        return code

    @field_validator("max_attempts")
    @classmethod
    def validate_attempts(cls, attempts: int) -> int:
        if attempts <= 0:
            raise ValueError("Number of attempts must be a positive integer.")
        return attempts
