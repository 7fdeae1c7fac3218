"""Language detection, common-phrase lookup, and translation resolution."""

from lingvo.services.language.detector import detect_language
from lingvo.services.language.translator import (
    Translated,
    TranslationResult,
    TranslationService,
    Unavailable,
)

__all__ = [
    "detect_language",
    "Translated",
    "TranslationResult",
    "TranslationService",
    "Unavailable",
]
