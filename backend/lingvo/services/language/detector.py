"""Script-based language detection.

Counts Cyrillic (U+0400..U+04FF) against basic Latin letters. Only
Russian and English are distinguished; ties go to English.
"""

import re

_CYRILLIC = re.compile(r"[\u0400-\u04FF]")
_LATIN = re.compile(r"[a-zA-Z]")


def detect_language(text: str) -> str:
    """Return "ru" for Cyrillic-dominant text, "en" otherwise."""
    cyrillic_count = len(_CYRILLIC.findall(text))
    latin_count = len(_LATIN.findall(text))
    if cyrillic_count > latin_count:
        return "ru"
    return "en"
