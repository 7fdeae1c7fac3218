"""Async HTTP client for the Lingvo API.

Thin wrapper over httpx.AsyncClient. Error responses are raised as
LingvoAPIError carrying the server's ``{"error": ...}`` message.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

import httpx
import structlog

logger = structlog.get_logger(__name__)

_TIMEOUT_SECONDS = 10.0


class LingvoAPIError(Exception):
    """Non-2xx response from the Lingvo API."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class LingvoClient:
    """Session-aware client. Call login() first, or pass a token."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=_TIMEOUT_SECONDS,
            transport=transport,
        )
        if token:
            self._set_token(token)

    async def __aenter__(self) -> LingvoClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    def _set_token(self, token: str) -> None:
        self._http.headers["Authorization"] = f"Bearer {token}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._http.request(method, path, **kwargs)
        if response.is_error:
            try:
                message = response.json().get("error", response.text)
            except ValueError:
                message = response.text
            raise LingvoAPIError(response.status_code, message)
        return response.json()

    # --- Auth ---

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/register",
            json={"name": name, "email": email, "password": password},
        )

    async def login(self, email: str, password: str) -> dict[str, Any]:
        data = await self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        self._set_token(data["accessToken"])
        return data["user"]

    # --- Messages ---

    async def list_messages(self, user_id: UUID | str) -> list[dict[str, Any]]:
        return await self._request("GET", "/messages", params={"userId": str(user_id)})

    async def send_message(self, receiver_id: UUID | str, content: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/messages",
            json={"receiverId": str(receiver_id), "content": content},
        )

    # --- Contacts ---

    async def list_contacts(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/contacts")

    async def add_contact(self, contact_id: UUID | str) -> None:
        await self._request("POST", "/contacts", json={"contactId": str(contact_id)})

    async def remove_contact(self, contact_id: UUID | str) -> None:
        await self._request("DELETE", "/contacts", json={"contactId": str(contact_id)})

    async def is_contact(self, user_id: UUID | str) -> bool:
        data = await self._request(
            "GET", "/contacts/check", params={"userId": str(user_id)}
        )
        return bool(data["isContact"])

    # --- Settings & translation ---

    async def get_language(self) -> str:
        data = await self._request("GET", "/settings")
        return data["language"]

    async def translate(self, text: str, target_lang: str) -> str:
        data = await self._request(
            "POST", "/translate", json={"text": text, "targetLang": target_lang}
        )
        return data["translation"]

    async def translate_messages(
        self,
        messages: list[dict[str, Any]],
        target_lang: str,
    ) -> dict[str, str]:
        """Translate each message body for display, keyed by message id.

        A message that fails to translate keeps its original text.
        """
        translations: dict[str, str] = {}
        for message in messages:
            try:
                translations[message["id"]] = await self.translate(
                    message["content"], target_lang
                )
            except (httpx.HTTPError, LingvoAPIError) as e:
                logger.warning(
                    "message_translate_failed", message_id=message["id"], error=str(e)
                )
                translations[message["id"]] = message["content"]
        return translations
