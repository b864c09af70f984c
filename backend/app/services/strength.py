"""
Passphrase strength scoring
Classification depends only on total length and distinct characters
"""

import re
from dataclasses import dataclass
from enum import Enum


class Strength(str, Enum):
    """Ordinal strength classes, weakest first"""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    def label(self, locale: str = "en") -> str:
        """Display label for this class in the given locale"""
        return STRENGTH_LABELS[locale][self]


_ORDER = (Strength.WEAK, Strength.MEDIUM, Strength.STRONG, Strength.VERY_STRONG)

STRENGTH_LABELS = {
    "en": {
        Strength.WEAK: "Weak",
        Strength.MEDIUM: "Medium",
        Strength.STRONG: "Strong",
        Strength.VERY_STRONG: "Very Strong",
    },
    "tr": {
        Strength.WEAK: "Zayıf",
        Strength.MEDIUM: "Orta",
        Strength.STRONG: "Güçlü",
        Strength.VERY_STRONG: "Çok Güçlü",
    },
}

# (min total chars, min unique chars, class), checked in order
STRENGTH_THRESHOLDS = (
    (20, 10, Strength.VERY_STRONG),
    (15, 8, Strength.STRONG),
    (10, 6, Strength.MEDIUM),
)

_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"[^a-zA-ZğüşıöçĞÜŞİÖÇ0-9\s]")


@dataclass(frozen=True)
class StrengthReport:
    total_chars: int
    unique_chars: int
    has_numbers: bool
    has_special_chars: bool
    strength: Strength


def classify(total_chars: int, unique_chars: int) -> Strength:
    for min_total, min_unique, strength in STRENGTH_THRESHOLDS:
        if total_chars >= min_total and unique_chars >= min_unique:
            return strength
    return Strength.WEAK


def score_password(password: str) -> StrengthReport:
    """
    Score an assembled password.

    has_numbers and has_special_chars are reported for callers but do not
    take part in the classification.
    """
    total_chars = len(password)
    unique_chars = len(set(password.lower()))
    return StrengthReport(
        total_chars=total_chars,
        unique_chars=unique_chars,
        has_numbers=bool(_DIGIT_RE.search(password)),
        has_special_chars=bool(_SPECIAL_RE.search(password)),
        strength=classify(total_chars, unique_chars),
    )
