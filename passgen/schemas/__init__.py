# PASSGEN Pydantic Schemas
from passgen.schemas.generate import GeneratedResponse, PassphraseRequest, PasswordRequest
from passgen.schemas.strength import (
    CheckRequest,
    CheckResponse,
    CrackTimesResponse,
    EvaluationResponse,
    StrengthResponse,
)
from passgen.schemas.wordlist import WordListStatus

__all__ = [
    "GeneratedResponse", "PassphraseRequest", "PasswordRequest",
    "CheckRequest",
    "CheckResponse",
    "CrackTimesResponse",
    "EvaluationResponse",
    "StrengthResponse",
    "WordListStatus",
]
