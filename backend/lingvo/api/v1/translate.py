"""Chat message translation endpoint."""

from fastapi import APIRouter, Depends

from lingvo.api.deps import get_current_user, get_translation_service
from lingvo.core.exceptions import InvalidRequestError
from lingvo.models.user import User
from lingvo.schemas.translate import TranslateRequest, TranslateResponse
from lingvo.services.language.translator import TranslationService

router = APIRouter(prefix="/translate", tags=["translate"])


@router.post("", response_model=TranslateResponse)
async def translate(
    body: TranslateRequest,
    user: User = Depends(get_current_user),
    translator: TranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    """Translate a message into the target language.

    Never fails because of the translation provider: when it is down
    the original text comes back with ``translated=False``.
    """
    if not body.text or not body.target_lang:
        raise InvalidRequestError("Text and targetLang are required")

    result = await translator.translate(body.text, body.target_lang)
    return TranslateResponse(
        translation=result.text,
        translated=result.is_translated,
        source_lang=result.source_lang,
        method=result.method,
    )
