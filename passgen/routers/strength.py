"""
Strength check and word list status endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from passgen.dependencies.context import get_generator_context
from passgen.logging_config import log_invalid_request
from passgen.schemas.strength import CheckRequest, CheckResponse, EvaluationResponse, StrengthResponse
from passgen.schemas.wordlist import WordListStatus
from passgen.services.credentials import GeneratorContext, check_password
from passgen.services.generator import InvalidArgument

router = APIRouter()


@router.post("/check", response_model=CheckResponse)
def check_password_endpoint(
    request: CheckRequest,
    ctx: GeneratorContext = Depends(get_generator_context),
):
    try:
        result = check_password(ctx, request.password)
    except InvalidArgument as e:
        log_invalid_request("invalid_argument")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_argument", "message": str(e)},
        )

    return CheckResponse(
        entropy_bits=round(result.entropy_bits, 2),
        strength=StrengthResponse.from_band(result.band),
        evaluation=EvaluationResponse.from_evaluation(result.evaluation),
    )


@router.get("/wordlists", response_model=List[WordListStatus])
async def list_wordlists(ctx: GeneratorContext = Depends(get_generator_context)):
    return [
        WordListStatus(name=r.name, size=len(r.words), source=r.source, error=r.error)
        for r in ctx.wordlists.results
    ]
