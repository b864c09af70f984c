"""
Pytest fixtures for WORDPASS backend tests
"""

import os
import random
import pytest
from typing import AsyncGenerator

# Set test environment before imports
os.environ.setdefault("WORD_SOURCE", "files")
os.environ.setdefault("STRENGTH_LABEL_LOCALE", "en")

from httpx import AsyncClient, ASGITransport
from app.main import app
from app.dependencies.generator import (
    get_label_locale,
    get_passphrase_generator,
    get_word_pool_provider,
)
from app.services.passphrase import PassphraseGenerator
from app.services.telemetry import reset_counters
from app.services.word_pools import InMemoryWordPoolProvider

TEST_POOLS = {
    3: ["cat", "dog", "sun"],
    4: ["tree", "moon", "bird"],
    5: ["apple", "river", "stone"],
    6: ["garden", "silver", "orange"],
    7: ["blanket", "chimney", "harvest"],
    8: ["mountain", "elephant", "calendar"],
    9: ["butterfly", "chocolate", "telescope"],
    10: ["strawberry", "basketball", "motorcycle"],
}


class RecordingProvider:
    """Provider double that records every load_pool call"""

    def __init__(self, pools=None, error=None):
        self.pools = TEST_POOLS if pools is None else pools
        self.error = error
        self.calls = []

    def load_pool(self, length):
        self.calls.append(length)
        if self.error is not None:
            raise self.error
        return list(self.pools.get(length, []))


@pytest.fixture
def word_pools() -> dict:
    """Word pools covering every supported length."""
    return {length: list(words) for length, words in TEST_POOLS.items()}


@pytest.fixture
def provider(word_pools) -> InMemoryWordPoolProvider:
    return InMemoryWordPoolProvider(word_pools)


@pytest.fixture
def generator(provider) -> PassphraseGenerator:
    """Generator with a seeded random source."""
    return PassphraseGenerator(provider, rng=random.Random(1234))


@pytest.fixture
async def client(provider, generator) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with the word source replaced by in-memory pools."""
    reset_counters()
    app.dependency_overrides[get_word_pool_provider] = lambda: provider
    app.dependency_overrides[get_passphrase_generator] = lambda: generator
    app.dependency_overrides[get_label_locale] = lambda: "en"
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
