# WORDPASS Pydantic Schemas
from app.schemas.passphrase import (
    GeneratePassphraseRequest,
    GeneratePassphraseResponse,
    GenerationErrorResponse,
    UsageResponse,
)

__all__ = [
    "GeneratePassphraseRequest",
    "GeneratePassphraseResponse",
    "GenerationErrorResponse",
    "UsageResponse",
]
