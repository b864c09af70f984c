"""
Command line front end - generate passphrases from the terminal
"""

import sys

from app.config import settings, validate_settings
from app.limits import supported_word_lengths
from app.services.passphrase import GenerationRequest, PassphraseError, PassphraseGenerator
from app.services.word_pools import build_word_pool_provider

from prompts import GenerationPrompts

USAGE = """Usage: python cli/main.py <command>

Commands:
  generate [--defaults]   Generate a passphrase (prompts for options)
  lengths                 Show how many words each length has
  serve                   Run the HTTP API"""


def build_generator():
    """Generator backed by the configured word source"""
    validate_settings(settings)
    return PassphraseGenerator(build_word_pool_provider(settings))


def print_result(result, locale):
    """Print a generated passphrase with its details"""
    print("\n" + "=" * 60)
    print(f"  {result.password}")
    print("=" * 60)
    for i, word in enumerate(result.words, start=1):
        print(f"  {i:2}. {word:<12} ({len(word)} letters)")
    print(f"\n  Total length: {result.total_length}")
    print(f"  Strength:     {result.strength.label(locale)}")
    print("=" * 60 + "\n")


def run_generate(args):
    """Prompt for options (unless --defaults) and print one passphrase"""
    if '--defaults' in args:
        request = GenerationRequest()
    else:
        options = GenerationPrompts().collect_all()
        request = GenerationRequest(
            word_count=options['word_count'],
            word_lengths=tuple(options['word_lengths']),
            separator=options['separator'],
        )

    try:
        result = build_generator().generate(request)
    except PassphraseError as e:
        print(f"[WORDPASS] ERROR: {e.message}")
        return 1

    print_result(result, settings.STRENGTH_LABEL_LOCALE)
    return 0


def run_lengths(args):
    """Print the pool size of every supported length"""
    provider = build_word_pool_provider(settings)
    missing = 0
    for length in supported_word_lengths():
        count = len(provider.load_pool(length))
        if count == 0:
            missing += 1
        print(f"[WORDPASS] {length:2} letters: {count} words")
    return 1 if missing else 0


def run_serve(args):
    """Run the HTTP API with uvicorn"""
    import uvicorn

    validate_settings(settings)
    uvicorn.run("app.main:app", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
    return 0


COMMANDS = {
    'generate': run_generate,
    'lengths': run_lengths,
    'serve': run_serve,
}


def main(argv=None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in COMMANDS:
        print(USAGE)
        return 1

    try:
        return COMMANDS[argv[0]](argv[1:])
    except ValueError as e:
        print(f"[WORDPASS] ERROR: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\n[WORDPASS] Interrupted")
        return 1


if __name__ == '__main__':
    sys.exit(main())
