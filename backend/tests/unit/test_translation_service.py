"""Unit tests for TranslationService.

Tests:
  - Same source and target language returns the text untouched
  - Dictionary hits never reach the provider
  - Other text goes to the provider with the detected language pair
  - Provider errors and empty answers degrade to Unavailable(original)
"""

from __future__ import annotations

import httpx
import pytest

from lingvo.services.language.translator import (
    Translated,
    TranslationService,
    Unavailable,
)


@pytest.mark.asyncio
class TestTranslationService:
    """Resolution order: same language -> phrasebook -> provider -> fallback."""

    async def test_dictionary_hit_skips_provider(self, mock_translation_provider) -> None:
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("hello", "ru")

        assert result == Translated(
            text="Привет", source_lang="en", target_lang="ru", method="dictionary"
        )
        assert mock_translation_provider.calls == []

    async def test_same_language_is_noop(self, mock_translation_provider) -> None:
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("hello", "en")

        assert isinstance(result, Translated)
        assert result.text == "hello"
        assert result.method == "same_language"
        assert mock_translation_provider.calls == []

    async def test_russian_dictionary_hit(self, mock_translation_provider) -> None:
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("  Как дела ", "en")

        assert result.text == "How are you"
        assert mock_translation_provider.calls == []

    async def test_provider_used_for_other_text(self, mock_translation_provider) -> None:
        mock_translation_provider.translation = "Я опоздаю сегодня"
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("I will be late today", "ru")

        assert result == Translated(
            text="Я опоздаю сегодня",
            source_lang="en",
            target_lang="ru",
            method="provider",
        )
        assert mock_translation_provider.calls == [
            {"text": "I will be late today", "source_lang": "en", "target_lang": "ru"}
        ]

    async def test_pairs_without_dictionary_go_to_provider(
        self, mock_translation_provider
    ) -> None:
        mock_translation_provider.translation = "Hallo"
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("hello", "de")

        assert result.text == "Hallo"
        assert len(mock_translation_provider.calls) == 1

    async def test_provider_exception_returns_original(
        self, mock_translation_provider
    ) -> None:
        mock_translation_provider.error = httpx.ConnectError("connection refused")
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("See you at the station", "ru")

        assert isinstance(result, Unavailable)
        assert result.text == "See you at the station"
        assert result.reason == "provider_error"
        assert result.is_translated is False

    async def test_any_exception_is_contained(self, mock_translation_provider) -> None:
        mock_translation_provider.error = ValueError("malformed json")
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("Увидимся на вокзале", "en")

        assert result.text == "Увидимся на вокзале"
        assert result.source_lang == "ru"

    @pytest.mark.parametrize("answer", [None, ""])
    async def test_empty_provider_answer_returns_original(
        self, mock_translation_provider, answer
    ) -> None:
        mock_translation_provider.translation = answer
        svc = TranslationService(provider=mock_translation_provider)

        result = await svc.translate("Where is the station", "ru")

        assert isinstance(result, Unavailable)
        assert result.text == "Where is the station"
        assert result.reason == "empty_response"
