"""
Generation schemas - request bounds and generated credential responses
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from passgen.limits import (
    MAX_LANGUAGES,
    MAX_PASSWORD_LENGTH,
    MAX_SEPARATOR_CHARS,
    MAX_WORD_COUNT,
    MIN_PASSWORD_LENGTH,
    MIN_WORD_COUNT,
)
from passgen.schemas.strength import EvaluationResponse, StrengthResponse


class PasswordRequest(BaseModel):
    """Generate a password from selected character categories
    Omitted fields fall back to the DEFAULT_* settings
    """
    length: Optional[int] = Field(default=None, ge=MIN_PASSWORD_LENGTH, le=MAX_PASSWORD_LENGTH)
    lowercase: bool = True
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True


class PassphraseRequest(BaseModel):
    """Generate a passphrase from one or more word lists"""
    word_count: Optional[int] = Field(default=None, ge=MIN_WORD_COUNT, le=MAX_WORD_COUNT)
    separator: Optional[str] = Field(default=None, max_length=MAX_SEPARATOR_CHARS)
    languages: List[str] = Field(default_factory=lambda: ["english"], max_length=MAX_LANGUAGES)

    @field_validator("languages")
    @classmethod
    def normalize_languages(cls, value: List[str]) -> List[str]:
        # Lowercase, drop blanks and repeats, keep order
        seen = []
        for name in value:
            name = name.strip().lower()
            if name and name not in seen:
                seen.append(name)
        return seen


class GeneratedResponse(BaseModel):
    """A generated credential with its strength"""
    value: str
    entropy_bits: float
    pool_size: int
    strength: StrengthResponse
    evaluation: Optional[EvaluationResponse] = None
