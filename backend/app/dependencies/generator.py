"""
Generator dependencies for passphrase routes
Tests override get_passphrase_generator with a seeded in-memory generator
"""

from functools import lru_cache

from fastapi import Depends

from app.config import Settings, get_settings
from app.services.passphrase import PassphraseGenerator
from app.services.word_pools import WordPoolProvider, build_word_pool_provider


@lru_cache()
def get_word_pool_provider() -> WordPoolProvider:
    """Process-wide provider so cached pools survive between requests"""
    return build_word_pool_provider(get_settings())


def get_passphrase_generator(
    provider: WordPoolProvider = Depends(get_word_pool_provider),
) -> PassphraseGenerator:
    return PassphraseGenerator(provider)


def get_label_locale(active_settings: Settings = Depends(get_settings)) -> str:
    return active_settings.STRENGTH_LABEL_LOCALE
