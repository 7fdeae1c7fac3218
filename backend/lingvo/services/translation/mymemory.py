"""MyMemory translation provider.

Public HTTP API, no key required:
    GET https://api.mymemory.translated.net/get?q=<text>&langpair=<src>|<tgt>

The response carries the result in ``responseData.translatedText``.
All external calls have a 10-second timeout and structured error logging.
"""

from typing import Any

import httpx
import structlog

from lingvo.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)

_TIMEOUT_SECONDS = 10.0


class MyMemoryProvider(TranslationProvider):
    """TranslationProvider backed by the MyMemory REST API."""

    def __init__(
        self,
        api_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._client = httpx.AsyncClient(
            timeout=_TIMEOUT_SECONDS,
            transport=transport,
        )
        logger.info("mymemory_provider_initialized", api_url=api_url)

    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str | None:
        """Single synchronous round trip. No retry, no cache."""
        response = await self._client.get(
            self._api_url,
            params={"q": text, "langpair": f"{source_lang}|{target_lang}"},
        )
        response.raise_for_status()
        data: Any = response.json()

        response_data = data.get("responseData") if isinstance(data, dict) else None
        translated = (
            response_data.get("translatedText")
            if isinstance(response_data, dict)
            else None
        )
        if not isinstance(translated, str) or not translated:
            logger.warning(
                "mymemory_missing_translation",
                source_lang=source_lang,
                target_lang=target_lang,
                status=data.get("responseStatus") if isinstance(data, dict) else None,
            )
            return None

        logger.debug(
            "mymemory_translate_ok",
            source_lang=source_lang,
            target_lang=target_lang,
            text_len=len(text),
        )
        return translated

    async def close(self) -> None:
        await self._client.aclose()
