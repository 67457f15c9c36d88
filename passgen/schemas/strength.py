"""
Strength schemas
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from passgen.limits import MAX_CHECK_PASSWORD_CHARS
from passgen.services.strength import Evaluation, StrengthBand


class StrengthResponse(BaseModel):
    band: StrengthBand
    label: str

    @classmethod
    def from_band(cls, band: StrengthBand) -> "StrengthResponse":
        return cls(band=band, label=band.label)


class CrackTimesResponse(BaseModel):
    online_throttled: str
    offline_slow_hash: str
    offline_fast_hash: str


class EvaluationResponse(BaseModel):
    """External evaluator output"""
    score: int = Field(..., ge=0, le=4)
    guesses_log10: float
    crack_times: CrackTimesResponse
    warning: Optional[str] = None

    @classmethod
    def from_evaluation(cls, evaluation: Evaluation) -> "EvaluationResponse":
        return cls(
            score=evaluation.score,
            guesses_log10=evaluation.guesses_log10,
            crack_times=CrackTimesResponse(
                online_throttled=evaluation.crack_times.online_throttled,
                offline_slow_hash=evaluation.crack_times.offline_slow_hash,
                offline_fast_hash=evaluation.crack_times.offline_fast_hash,
            ),
            warning=evaluation.warning,
        )


class CheckRequest(BaseModel):
    """Check the strength of a user-supplied password"""
    password: str = Field(..., min_length=1, max_length=MAX_CHECK_PASSWORD_CHARS)

    @field_validator("password")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please enter a password.")
        return value


class CheckResponse(BaseModel):
    entropy_bits: float
    strength: StrengthResponse
    evaluation: EvaluationResponse
