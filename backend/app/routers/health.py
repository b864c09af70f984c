"""
Health check endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies.generator import get_word_pool_provider
from app.limits import supported_word_lengths
from app.services.telemetry import get_counters_snapshot
from app.services.word_pools import WordPoolProvider

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/words")
def word_pools_check(provider: WordPoolProvider = Depends(get_word_pool_provider)):
    """
    Readiness probe for the word source.
    Returns 200 if every supported length has words, 503 otherwise.
    """
    checks = {}
    all_healthy = True

    for length in supported_word_lengths():
        try:
            count = len(provider.load_pool(length))
        except Exception:
            checks[str(length)] = "unavailable"
            all_healthy = False
            continue
        checks[str(length)] = count
        if count == 0:
            all_healthy = False

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
