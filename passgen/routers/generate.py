"""
Password and passphrase generation endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from passgen.config import Settings, get_settings
from passgen.dependencies.context import get_generator_context
from passgen.logging_config import log_invalid_request
from passgen.schemas.generate import GeneratedResponse, PassphraseRequest, PasswordRequest
from passgen.schemas.strength import EvaluationResponse, StrengthResponse
from passgen.services.credentials import (
    GenerationResult,
    GeneratorContext,
    create_passphrase,
    create_password,
)
from passgen.services.generator import InvalidArgument
from passgen.services.wordlists import WordListUnavailable

router = APIRouter()


def _to_response(result: GenerationResult) -> GeneratedResponse:
    evaluation = None
    if result.evaluation is not None:
        evaluation = EvaluationResponse.from_evaluation(result.evaluation)
    return GeneratedResponse(
        value=result.value,
        entropy_bits=round(result.entropy_bits, 2),
        pool_size=result.pool_size,
        strength=StrengthResponse.from_band(result.band),
        evaluation=evaluation,
    )


def _bad_request(error: str, message: str) -> HTTPException:
    log_invalid_request(error)
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": error, "message": message},
    )


@router.post("/password", response_model=GeneratedResponse)
def generate_password_endpoint(
    request: PasswordRequest,
    ctx: GeneratorContext = Depends(get_generator_context),
    settings: Settings = Depends(get_settings),
):
    # Sync handler: zxcvbn is CPU-bound and runs in the threadpool
    length = request.length if request.length is not None else settings.DEFAULT_PASSWORD_LENGTH
    try:
        result = create_password(
            ctx,
            length,
            lowercase=request.lowercase,
            uppercase=request.uppercase,
            digits=request.digits,
            symbols=request.symbols,
        )
    except InvalidArgument as e:
        raise _bad_request("invalid_argument", str(e))

    return _to_response(result)


@router.post("/passphrase", response_model=GeneratedResponse)
def generate_passphrase_endpoint(
    request: PassphraseRequest,
    ctx: GeneratorContext = Depends(get_generator_context),
    settings: Settings = Depends(get_settings),
):
    word_count = request.word_count if request.word_count is not None else settings.DEFAULT_WORD_COUNT
    separator = request.separator if request.separator is not None else settings.DEFAULT_SEPARATOR
    try:
        result = create_passphrase(ctx, request.languages, word_count, separator)
    except InvalidArgument as e:
        raise _bad_request("invalid_argument", str(e))
    except WordListUnavailable as e:
        raise _bad_request("wordlist_unavailable", str(e))

    return _to_response(result)
