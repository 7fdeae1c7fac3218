"""Periodic refresh of an open conversation.

ConversationPoller re-fetches GET /messages?userId= on a fixed interval
for as long as a conversation view is open:

    async with ConversationPoller(client, other_user_id, on_update=render):
        ...  # view is mounted

start() fetches once immediately and schedules an APScheduler interval
job; await stop() removes the job and shuts the scheduler down. Overlapping
ticks are coalesced (max_instances=1). A failed fetch is logged and the
next tick tries again.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable
from uuid import UUID

import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from lingvo.client.api import LingvoClient
from lingvo.core.config import settings

logger = structlog.get_logger(__name__)

MessagesCallback = Callable[[list[dict[str, Any]]], Any]


class ConversationPoller:
    """Cancellable interval job bound to one conversation."""

    def __init__(
        self,
        client: LingvoClient,
        other_user_id: UUID | str,
        on_update: MessagesCallback,
        interval_seconds: float | None = None,
        scheduler: AsyncIOScheduler | None = None,
    ) -> None:
        self._client = client
        self._other_user_id = str(other_user_id)
        self._on_update = on_update
        self._interval = interval_seconds or settings.poll_interval_seconds
        self._scheduler = scheduler or AsyncIOScheduler()
        self._job_id = f"conversation_poll:{self._other_user_id}"
        self.messages: list[dict[str, Any]] = []

    @property
    def job_id(self) -> str:
        return self._job_id

    @property
    def running(self) -> bool:
        return self._scheduler.get_job(self._job_id) is not None

    async def __aenter__(self) -> ConversationPoller:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def start(self) -> None:
        """Fetch now, then every interval until stop()."""
        if self.running:
            return
        await self.refresh()
        self._scheduler.add_job(
            self.refresh,
            "interval",
            seconds=self._interval,
            id=self._job_id,
            max_instances=1,
            coalesce=True,
        )
        if not self._scheduler.running:
            self._scheduler.start()
        logger.info(
            "conversation_poll_started",
            other_user_id=self._other_user_id,
            interval_seconds=self._interval,
        )

    async def stop(self) -> None:
        """Cancel the interval job. Safe to call more than once."""
        if self._scheduler.get_job(self._job_id) is not None:
            self._scheduler.remove_job(self._job_id)
        if self._scheduler.running and not self._scheduler.get_jobs():
            self._scheduler.shutdown(wait=False)
            # AsyncIOScheduler defers shutdown to the loop
            await asyncio.sleep(0)
        logger.info("conversation_poll_stopped", other_user_id=self._other_user_id)

    async def refresh(self) -> None:
        """One poll: fetch the conversation and hand it to on_update."""
        try:
            messages = await self._client.list_messages(self._other_user_id)
        except Exception as e:
            logger.warning(
                "conversation_poll_failed",
                other_user_id=self._other_user_id,
                error=str(e),
            )
            return

        # Latest response wins
        self.messages = messages
        result = self._on_update(messages)
        if inspect.isawaitable(result):
            await result
