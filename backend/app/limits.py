"""
Request limits shared by the generator, the HTTP schemas and the CLI.
"""

# Accepted request ranges (inclusive).
MIN_WORD_COUNT = 1
MAX_WORD_COUNT = 10
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 10

# Defaults applied when a field is omitted.
DEFAULT_WORD_COUNT = 3
DEFAULT_WORD_LENGTHS = (5, 6, 7)
DEFAULT_SEPARATOR = "-"

# Payload caps for the HTTP schema.
MAX_WORD_LENGTHS_ENTRIES = 32
MAX_SEPARATOR_CHARS = 16


def supported_word_lengths() -> list[int]:
    """Return every word length the generator accepts, in ascending order."""
    return list(range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1))
