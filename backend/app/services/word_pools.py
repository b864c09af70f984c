"""
Word pool providers
Each provider resolves a word length to the candidate words of that length.
An empty list means "no data for this length"; callers decide if that is fatal.
"""

import logging
from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, List, Mapping, Protocol

from mnemonic import Mnemonic

logger = logging.getLogger("wordpass.words")


class WordPoolProvider(Protocol):
    def load_pool(self, length: int) -> List[str]:
        ...


class FileWordPoolProvider:
    """Reads one newline-delimited word list per length from a directory"""

    def __init__(self, directory, pattern: str = "{length}-harfli-kelimeler.txt"):
        self.directory = Path(directory)
        self.pattern = pattern

    def path_for(self, length: int) -> Path:
        return self.directory / self.pattern.format(length=length)

    def load_pool(self, length: int) -> List[str]:
        path = self.path_for(length)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"No word list for {length} letter words at {path}")
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read word list for {length} letter words: {e}")
            return []

        return [word.strip() for word in content.split("\n") if word.strip()]


def group_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
    """Group a flat word list by word length, skipping blanks"""
    pools: Dict[int, List[str]] = {}
    for word in words:
        word = word.strip()
        if word:
            pools.setdefault(len(word), []).append(word)
    return pools


class InMemoryWordPoolProvider:
    """Serves pools from a fixed mapping of length to words"""

    def __init__(self, pools: Mapping[int, Iterable[str]]):
        self._pools = {length: tuple(words) for length, words in pools.items()}

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "InMemoryWordPoolProvider":
        return cls(group_by_length(words))

    def load_pool(self, length: int) -> List[str]:
        return list(self._pools.get(length, ()))


class Bip39WordPoolProvider(InMemoryWordPoolProvider):
    """BIP39 wordlist grouped by length (only lengths 3 to 8 exist)"""

    def __init__(self, language: str = "english"):
        super().__init__(group_by_length(Mnemonic(language).wordlist))


class CachedWordPoolProvider:
    """Remembers each pool after its first load"""

    def __init__(self, provider: WordPoolProvider):
        self._provider = provider
        self._cache: Dict[int, List[str]] = {}
        self._lock = Lock()

    def load_pool(self, length: int) -> List[str]:
        cached = self._cache.get(length)
        if cached is not None:
            return list(cached)

        pool = self._provider.load_pool(length)
        # Empty pools are not cached so a word list added later is picked up
        if pool:
            with self._lock:
                self._cache.setdefault(length, list(pool))
        return list(pool)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


def build_word_pool_provider(active_settings) -> WordPoolProvider:
    """Build the provider described by WORD_SOURCE and related settings"""
    if active_settings.WORD_SOURCE == "bip39":
        provider: WordPoolProvider = Bip39WordPoolProvider()
    elif active_settings.WORD_SOURCE == "files":
        provider = FileWordPoolProvider(
            active_settings.WORD_LIST_DIR, active_settings.WORD_LIST_PATTERN
        )
    else:
        raise ValueError(f"Unknown WORD_SOURCE: {active_settings.WORD_SOURCE}")

    if active_settings.CACHE_WORD_POOLS:
        provider = CachedWordPoolProvider(provider)
    return provider
