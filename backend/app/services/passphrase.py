"""
Passphrase assembly
Validates a request, resolves word pools, draws words and scores the result.
Failures are raised as PassphraseError subclasses; nothing here logs.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from app.limits import (
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    DEFAULT_WORD_LENGTHS,
    MAX_WORD_COUNT,
    MAX_WORD_LENGTH,
    MIN_WORD_COUNT,
    MIN_WORD_LENGTH,
)
from app.services.strength import Strength, score_password
from app.services.word_pools import WordPoolProvider


class PassphraseError(Exception):
    """Base class for generation failures"""

    category = "unexpected"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(PassphraseError):
    """Request fields out of range"""

    def __init__(self, category: str, message: str):
        super().__init__(message)
        self.category = category


class DataUnavailableError(PassphraseError):
    """A valid requested length has no words"""

    category = "no_words"

    def __init__(self, length: int):
        super().__init__(f"no words found for length {length}")
        self.length = length


class UnexpectedGenerationError(PassphraseError):
    """The word pool provider failed in a way it does not report as empty"""

    def __init__(self, message: str = "an error occurred while generating the passphrase"):
        super().__init__(message)


BAD_WORD_COUNT = "bad_word_count"
BAD_WORD_LENGTHS = "bad_word_lengths"


@dataclass(frozen=True)
class GenerationRequest:
    word_count: int = DEFAULT_WORD_COUNT
    word_lengths: Tuple[int, ...] = DEFAULT_WORD_LENGTHS
    separator: Optional[str] = DEFAULT_SEPARATOR


@dataclass(frozen=True)
class GeneratedPassphrase:
    password: str
    words: Tuple[str, ...]
    word_count: int
    total_length: int
    strength: Strength
    separator: str
    word_lengths: Tuple[int, ...]
    unique_chars: int = 0
    has_numbers: bool = False
    has_special_chars: bool = False


def validate_request(request: GenerationRequest) -> List[int]:
    """
    Check the request and return the usable word lengths.

    Checks run in a fixed order and the first failure is raised. Lengths
    outside the accepted range are dropped without being reported; repeats
    are kept, so a length given twice is drawn twice as often.
    """
    if not MIN_WORD_COUNT <= request.word_count <= MAX_WORD_COUNT:
        raise InputError(
            BAD_WORD_COUNT,
            f"word count must be between {MIN_WORD_COUNT} and {MAX_WORD_COUNT}",
        )

    if not request.word_lengths:
        raise InputError(BAD_WORD_LENGTHS, "at least one word length must be specified")

    valid_lengths = [
        length for length in request.word_lengths
        if MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH
    ]
    if not valid_lengths:
        raise InputError(
            BAD_WORD_LENGTHS,
            f"word lengths must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}",
        )
    return valid_lengths


class PassphraseGenerator:
    """Builds passphrases from a word pool provider"""

    def __init__(self, provider: WordPoolProvider, rng: Optional[random.Random] = None):
        self.provider = provider
        self.rng = rng or random.SystemRandom()

    def generate(self, request: GenerationRequest) -> GeneratedPassphrase:
        valid_lengths = validate_request(request)
        pools = self._resolve_pools(valid_lengths)

        words = []
        for _ in range(request.word_count):
            length = self.rng.choice(valid_lengths)
            words.append(self.rng.choice(pools[length]))

        separator = DEFAULT_SEPARATOR if request.separator is None else request.separator
        password = separator.join(words)
        report = score_password(password)

        return GeneratedPassphrase(
            password=password,
            words=tuple(words),
            word_count=len(words),
            total_length=report.total_chars,
            strength=report.strength,
            separator=separator,
            word_lengths=tuple(len(word) for word in words),
            unique_chars=report.unique_chars,
            has_numbers=report.has_numbers,
            has_special_chars=report.has_special_chars,
        )

    def _resolve_pools(self, lengths: Sequence[int]) -> Dict[int, List[str]]:
        pools: Dict[int, List[str]] = {}
        for length in dict.fromkeys(lengths):
            try:
                pool = list(self.provider.load_pool(length))
            except Exception as e:
                raise UnexpectedGenerationError() from e
            if not pool:
                raise DataUnavailableError(length)
            pools[length] = pool
        return pools
