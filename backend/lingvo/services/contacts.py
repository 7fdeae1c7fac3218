"""Mutual contact list.

A contact relationship is stored as two directed rows (owner -> contact
and contact -> owner). Every write touches both rows inside the caller's
session, so with the request-scoped session committing once per request
the pair is written or removed atomically.

ContactService.add() does exactly these things in order:
1. Reject self-reference and unknown target users
2. Insert both edges with ON CONFLICT DO NOTHING, so an edge that
   already exists (re-adding, or a concurrent add from the other side)
   is left alone
"""

from __future__ import annotations

from uuid import UUID

import structlog
from sqlalchemy import and_, delete, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lingvo.core.exceptions import SelfContactError, UserNotFoundError
from lingvo.models.contact import Contact
from lingvo.models.user import User

logger = structlog.get_logger(__name__)

# Dialect name -> INSERT construct supporting on_conflict_do_nothing()
_INSERTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


def _pair_filter(a: UUID, b: UUID):
    return or_(
        and_(Contact.owner_id == a, Contact.contact_id == b),
        and_(Contact.owner_id == b, Contact.contact_id == a),
    )


class ContactService:
    """Reads and writes symmetric contact pairs."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_contacts(self, owner_id: UUID) -> list[User]:
        """Users the owner has as contacts, most recently added first."""
        result = await self._db.execute(
            select(Contact)
            .where(Contact.owner_id == owner_id)
            .options(selectinload(Contact.contact))
            .order_by(Contact.created_at.desc())
        )
        return [edge.contact for edge in result.scalars().all()]

    async def add(self, owner_id: UUID, contact_id: UUID) -> None:
        """Create both directed edges between owner and contact."""
        if owner_id == contact_id:
            raise SelfContactError()

        target = await self._db.get(User, contact_id)
        if target is None:
            raise UserNotFoundError()

        insert = _INSERTS[self._db.get_bind().dialect.name]
        stmt = (
            insert(Contact)
            .values(
                [
                    {"owner_id": owner_id, "contact_id": contact_id},
                    {"owner_id": contact_id, "contact_id": owner_id},
                ]
            )
            .on_conflict_do_nothing(index_elements=["owner_id", "contact_id"])
        )
        await self._db.execute(stmt)

        logger.info(
            "contact_added",
            owner_id=str(owner_id),
            contact_id=str(contact_id),
        )

    async def remove(self, owner_id: UUID, contact_id: UUID) -> None:
        """Delete both directed edges. Missing edges are not an error."""
        result = await self._db.execute(
            delete(Contact).where(_pair_filter(owner_id, contact_id))
        )
        logger.info(
            "contact_removed",
            owner_id=str(owner_id),
            contact_id=str(contact_id),
            edges_deleted=result.rowcount,
        )

    async def is_contact(self, owner_id: UUID, contact_id: UUID) -> bool:
        """Whether contact_id is in owner_id's list."""
        result = await self._db.execute(
            select(Contact.id).where(
                Contact.owner_id == owner_id,
                Contact.contact_id == contact_id,
            )
        )
        return result.scalar_one_or_none() is not None
