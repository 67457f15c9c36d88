"""
Health check endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from passgen.dependencies.context import get_generator_context
from passgen.services.credentials import GeneratorContext
from passgen.services.telemetry import get_counters_snapshot

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(ctx: GeneratorContext = Depends(get_generator_context)):
    """
    Readiness probe.
    Returns 200 if at least one word list loaded, 503 otherwise.
    """
    checks = {}
    for result in ctx.wordlists.results:
        checks[result.name] = "loaded" if result.ok else "failed"

    all_healthy = bool(ctx.wordlists.available)

    response_data = {
        "status": "healthy" if all_healthy else "unhealthy",
        "checks": checks,
        "counters": get_counters_snapshot(),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if all_healthy:
        return response_data
    else:
        return JSONResponse(status_code=503, content=response_data)
