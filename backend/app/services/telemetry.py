"""In-process generation counters, exposed by the readiness probe."""

from collections import Counter
from threading import Lock
from typing import Dict

GENERATED_COUNTER = "passphrases_generated_total"

_COUNTERS = Counter()
_LOCK = Lock()


def increment_counter(name: str, value: int = 1) -> None:
    with _LOCK:
        _COUNTERS[name] += value


def failure_counter(category: str) -> str:
    return f"passphrase_failures_{category}_total"


def record_generated() -> None:
    increment_counter(GENERATED_COUNTER)


def record_failure(category: str) -> None:
    increment_counter(failure_counter(category))


def get_counters_snapshot() -> Dict[str, int]:
    with _LOCK:
        return dict(_COUNTERS)


def reset_counters() -> None:
    with _LOCK:
        _COUNTERS.clear()
