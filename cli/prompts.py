"""
Interactive passphrase option prompts
Enter accepts the default shown in each prompt
"""

from app.limits import (
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    DEFAULT_WORD_LENGTHS,
    MAX_WORD_COUNT,
    MAX_WORD_LENGTH,
    MIN_WORD_COUNT,
    MIN_WORD_LENGTH,
)


class GenerationPrompts:
    """Handles all interactive generation prompts"""

    def collect_all(self):
        """Collect all generation options"""
        options = {}

        # Prompt 1: Word count
        options['word_count'] = self._prompt_word_count()

        # Prompt 2: Word lengths
        options['word_lengths'] = self._prompt_word_lengths()

        # Prompt 3: Separator
        options['separator'] = self._prompt_separator()

        return options

    def _prompt_word_count(self):
        """Prompt for number of words"""
        print("[WORDPASS] How many words?")
        while True:
            try:
                value = input(f"       Enter number (default: {DEFAULT_WORD_COUNT}): ").strip()
                if value == '':
                    return DEFAULT_WORD_COUNT
                value = int(value)
                if value < MIN_WORD_COUNT:
                    print(f"       Must be at least {MIN_WORD_COUNT}")
                    continue
                if value > MAX_WORD_COUNT:
                    print(f"       Maximum is {MAX_WORD_COUNT}")
                    continue
                return value
            except ValueError:
                print("       Please enter a valid number")

    def _prompt_word_lengths(self):
        """Prompt for the word lengths to draw from"""
        default = ",".join(str(length) for length in DEFAULT_WORD_LENGTHS)
        print(f"\n[WORDPASS] Word lengths ({MIN_WORD_LENGTH}-{MAX_WORD_LENGTH}, comma separated)?")
        while True:
            value = input(f"       Enter lengths (default: {default}): ").strip()
            if value == '':
                return list(DEFAULT_WORD_LENGTHS)
            try:
                lengths = [int(item) for item in value.split(",") if item.strip()]
            except ValueError:
                print("       Please enter numbers separated by commas")
                continue
            if not any(MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH for length in lengths):
                print(f"       At least one length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}")
                continue
            return lengths

    def _prompt_separator(self):
        """Prompt for the text placed between words"""
        print("\n[WORDPASS] Separator between words?")
        print("       (type 'none' for no separator, 'space' for a space)")
        value = input(f"       Enter separator (default: {DEFAULT_SEPARATOR}): ").strip()
        if value == '':
            return DEFAULT_SEPARATOR
        if value.lower() == 'none':
            return ''
        if value.lower() == 'space':
            return ' '
        return value
