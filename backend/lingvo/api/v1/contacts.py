"""Mutual contact endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lingvo.api.deps import get_contact_service, get_current_user
from lingvo.core.exceptions import InvalidRequestError
from lingvo.models.user import User
from lingvo.schemas.common import SuccessResponse, UserCard
from lingvo.schemas.social import ContactRequest, ContactStatusResponse
from lingvo.services.contacts import ContactService

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=list[UserCard])
async def list_contacts(
    user: User = Depends(get_current_user),
    contacts: ContactService = Depends(get_contact_service),
) -> list[UserCard]:
    """The caller's contacts, most recently added first."""
    return [UserCard.model_validate(c) for c in await contacts.list_contacts(user.id)]


@router.post("", response_model=SuccessResponse)
async def add_contact(
    body: ContactRequest,
    user: User = Depends(get_current_user),
    contacts: ContactService = Depends(get_contact_service),
) -> SuccessResponse:
    """Add a contact for both users."""
    if body.contact_id is None:
        raise InvalidRequestError("Contact ID required")
    await contacts.add(owner_id=user.id, contact_id=body.contact_id)
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
async def remove_contact(
    body: ContactRequest,
    user: User = Depends(get_current_user),
    contacts: ContactService = Depends(get_contact_service),
) -> SuccessResponse:
    """Remove a contact for both users."""
    if body.contact_id is None:
        raise InvalidRequestError("Contact ID required")
    await contacts.remove(owner_id=user.id, contact_id=body.contact_id)
    return SuccessResponse()


@router.get("/check", response_model=ContactStatusResponse)
async def check_contact(
    user_id: UUID | None = Query(None, alias="userId"),
    user: User = Depends(get_current_user),
    contacts: ContactService = Depends(get_contact_service),
) -> ContactStatusResponse:
    """Whether the given user is in the caller's contacts."""
    if user_id is None:
        raise InvalidRequestError("User ID required")
    return ContactStatusResponse(
        is_contact=await contacts.is_contact(owner_id=user.id, contact_id=user_id)
    )
