"""External machine-translation providers."""

from lingvo.services.translation.base import TranslationProvider
from lingvo.services.translation.mymemory import MyMemoryProvider

__all__ = ["TranslationProvider", "MyMemoryProvider"]
