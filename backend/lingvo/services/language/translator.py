"""Best-effort translation of chat messages.

Resolution order for ``TranslationService.translate(text, target_lang)``:

1. Detect the source language (Cyrillic vs Latin count).
2. Same language as the target: return the text unchanged.
3. Common phrase in the en/ru phrasebook: return the stored translation,
   the provider is not called.
4. Ask the external TranslationProvider.
5. Any provider failure or empty answer: hand back the original text as
   ``Unavailable``. Nothing is raised, so chat rendering never blocks on
   the provider.

Both result types expose ``.text`` for callers that only need a string.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from lingvo.services.language.detector import detect_language
from lingvo.services.language.phrasebook import lookup_phrase
from lingvo.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Translated:
    """Text successfully rendered in the target language."""

    text: str
    source_lang: str
    target_lang: str
    method: str  # 'same_language' | 'dictionary' | 'provider'

    @property
    def is_translated(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    """Translation could not be produced; carries the original text."""

    original: str
    source_lang: str
    target_lang: str
    reason: str

    @property
    def text(self) -> str:
        return self.original

    @property
    def method(self) -> str:
        return "unavailable"

    @property
    def is_translated(self) -> bool:
        return False


TranslationResult = Translated | Unavailable


class TranslationService:
    """Detector -> phrasebook -> provider, degrading to pass-through."""

    def __init__(self, provider: TranslationProvider) -> None:
        self._provider = provider

    async def translate(self, text: str, target_lang: str) -> TranslationResult:
        source_lang = detect_language(text)

        if source_lang == target_lang:
            return Translated(
                text=text,
                source_lang=source_lang,
                target_lang=target_lang,
                method="same_language",
            )

        phrase = lookup_phrase(text, source_lang, target_lang)
        if phrase is not None:
            return Translated(
                text=phrase,
                source_lang=source_lang,
                target_lang=target_lang,
                method="dictionary",
            )

        try:
            translated = await self._provider.translate(text, source_lang, target_lang)
        except Exception as e:
            logger.warning(
                "translation_provider_failed",
                source_lang=source_lang,
                target_lang=target_lang,
                error=str(e),
            )
            return Unavailable(
                original=text,
                source_lang=source_lang,
                target_lang=target_lang,
                reason="provider_error",
            )

        if not translated:
            return Unavailable(
                original=text,
                source_lang=source_lang,
                target_lang=target_lang,
                reason="empty_response",
            )

        return Translated(
            text=translated,
            source_lang=source_lang,
            target_lang=target_lang,
            method="provider",
        )
