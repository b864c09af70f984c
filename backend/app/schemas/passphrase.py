"""
Passphrase request/response schemas
Wire names are camelCase; range checks are left to the generator
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional

from app.limits import (
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    DEFAULT_WORD_LENGTHS,
    MAX_SEPARATOR_CHARS,
    MAX_WORD_LENGTHS_ENTRIES,
)
from app.services.passphrase import GeneratedPassphrase, GenerationRequest


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeneratePassphraseRequest(CamelModel):
    """Options for one passphrase; every field is optional"""
    word_count: int = DEFAULT_WORD_COUNT
    word_lengths: List[int] = Field(
        default_factory=lambda: list(DEFAULT_WORD_LENGTHS),
        max_length=MAX_WORD_LENGTHS_ENTRIES,
    )
    separator: Optional[str] = Field(DEFAULT_SEPARATOR, max_length=MAX_SEPARATOR_CHARS)

    def to_generation_request(self) -> GenerationRequest:
        return GenerationRequest(
            word_count=self.word_count,
            word_lengths=tuple(self.word_lengths),
            separator=self.separator,
        )


class GeneratePassphraseResponse(CamelModel):
    """Generated passphrase with its strength estimate"""
    password: str
    words: List[str]
    word_count: int
    total_length: int
    strength: str          # weak, medium, strong, very_strong
    strength_label: str    # Display label in the configured locale
    separator: str
    word_lengths: List[int]
    has_numbers: bool
    has_special_chars: bool

    @classmethod
    def from_result(cls, result: GeneratedPassphrase, locale: str = "en") -> "GeneratePassphraseResponse":
        return cls(
            password=result.password,
            words=list(result.words),
            word_count=result.word_count,
            total_length=result.total_length,
            strength=result.strength.value,
            strength_label=result.strength.label(locale),
            separator=result.separator,
            word_lengths=list(result.word_lengths),
            has_numbers=result.has_numbers,
            has_special_chars=result.has_special_chars,
        )


class GenerationErrorResponse(BaseModel):
    """Generation failure"""
    error: str      # bad_word_count, bad_word_lengths, no_words, unexpected
    message: str


class UsageResponse(CamelModel):
    """Self-description served on GET"""
    message: str
    usage: Dict[str, Any]
    available_word_lengths: List[int]
