"""Translation request/response schemas."""

from lingvo.schemas.common import CamelModel


class TranslateRequest(CamelModel):
    """POST /api/translate request body."""

    text: str | None = None
    target_lang: str | None = None


class TranslateResponse(CamelModel):
    """POST /api/translate response body.

    ``translation`` is always usable for display. ``translated`` is False
    when the provider was unavailable and the original text came back.
    """

    translation: str
    translated: bool
    source_lang: str
    method: str
