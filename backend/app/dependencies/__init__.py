# WORDPASS Dependencies
from app.dependencies.generator import (
    get_label_locale,
    get_passphrase_generator,
    get_word_pool_provider,
)

__all__ = ["get_label_locale", "get_passphrase_generator", "get_word_pool_provider"]
