"""
Passphrase REST endpoints
Generated passphrases are returned once and never stored or logged
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies.generator import get_label_locale, get_passphrase_generator
from app.limits import (
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    DEFAULT_WORD_LENGTHS,
    MAX_WORD_COUNT,
    MAX_WORD_LENGTH,
    MIN_WORD_COUNT,
    MIN_WORD_LENGTH,
    supported_word_lengths,
)
from app.logging_config import log_generation_failed, log_generation_rejected
from app.schemas.passphrase import (
    GeneratePassphraseRequest,
    GeneratePassphraseResponse,
    GenerationErrorResponse,
    UsageResponse,
)
from app.services.passphrase import (
    DataUnavailableError,
    InputError,
    PassphraseError,
    PassphraseGenerator,
)
from app.services.telemetry import record_failure, record_generated

router = APIRouter()

ENDPOINT = "/generate-password"


def error_status(error: PassphraseError) -> int:
    """HTTP status for a generation failure"""
    if isinstance(error, InputError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, DataUnavailableError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.post(
    ENDPOINT,
    response_model=GeneratePassphraseResponse,
    responses={
        400: {"model": GenerationErrorResponse},
        404: {"model": GenerationErrorResponse},
        500: {"model": GenerationErrorResponse},
    },
)
def generate_passphrase(
    body: GeneratePassphraseRequest,
    generator: PassphraseGenerator = Depends(get_passphrase_generator),
    locale: str = Depends(get_label_locale),
):
    """
    Generate a passphrase from random words

    Word lengths outside the accepted range are ignored. The request fails
    as a whole if any remaining length has no words.
    """
    try:
        result = generator.generate(body.to_generation_request())
    except PassphraseError as e:
        if error_status(e) >= 500:
            log_generation_failed(e)
        else:
            log_generation_rejected(e.category, e.message)
        record_failure(e.category)
        return JSONResponse(
            status_code=error_status(e),
            content={"error": e.category, "message": e.message},
        )

    record_generated()
    return GeneratePassphraseResponse.from_result(result, locale)


@router.get(ENDPOINT, response_model=UsageResponse)
async def describe_generator():
    """Usage document for the generate endpoint"""
    return UsageResponse(
        message="Passphrase generator API",
        usage={
            "method": "POST",
            "endpoint": "/api" + ENDPOINT,
            "parameters": {
                "wordCount": f"number ({MIN_WORD_COUNT}-{MAX_WORD_COUNT}) - how many words to use",
                "wordLengths": f"number[] ({MIN_WORD_LENGTH}-{MAX_WORD_LENGTH}) - word lengths to draw from",
                "separator": f'string (optional) - text placed between words (default: "{DEFAULT_SEPARATOR}")',
            },
            "example": {
                "wordCount": DEFAULT_WORD_COUNT,
                "wordLengths": list(DEFAULT_WORD_LENGTHS),
                "separator": DEFAULT_SEPARATOR,
            },
        },
        available_word_lengths=supported_word_lengths(),
    )
