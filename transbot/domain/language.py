"""Korean / English language detection."""

import re
from enum import Enum


class Language(str, Enum):
    KOREAN = "ko"
    ENGLISH = "en"

    def opposite(self) -> "Language":
        return Language.ENGLISH if self is Language.KOREAN else Language.KOREAN


# Hangul syllables, Jamo, compatibility Jamo and Jamo extensions
_HANGUL_PATTERN = re.compile(r"[\u1100-\u11ff\u3130-\u318f\ua960-\ua97f\uac00-\ud7ff]")

KOREAN_RATIO_THRESHOLD = 0.5


def hangul_ratio(text: str) -> float:
    """Share of alphabetic characters in ``text`` that are Hangul (0.0 if none)."""
    letters = [ch for ch in text if ch.isalpha()]
    if not letters:
        return 0.0
    hangul = sum(1 for ch in letters if _HANGUL_PATTERN.match(ch))
    return hangul / len(letters)


def detect_language(text: str) -> Language:
    """Classify ``text`` as Korean or English.

    Text without enough letters to judge (empty, digits, punctuation,
    emoji) is treated as English.
    """
    if not text or not text.strip():
        return Language.ENGLISH
    if hangul_ratio(text) >= KOREAN_RATIO_THRESHOLD:
        return Language.KOREAN
    return Language.ENGLISH
