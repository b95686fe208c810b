"""
Service layer for sales comments.

Comments are listed per application, newest first.  The application
identifier is stored as given and never validated against the apps
store.  Every operation waits the same simulated delay.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from ..core.errors import NotFoundError
from ..core.store import apply_patch, get_store, simulate_latency
from ..schemas.sales_comment import (
    SalesCommentCreate,
    SalesCommentRead,
    SalesCommentUpdate,
)
from .statistics_service import as_aware


ENTITY = "Sales comment"
STORE = "sales_comments"
DELAY_MS = 300


class SalesCommentService:
    """CRUD operations for sales comments."""

    @classmethod
    async def get_all(cls, app_id: int) -> List[SalesCommentRead]:
        """Return the comments attached to ``app_id``, newest ``createdAt`` first."""
        await simulate_latency(DELAY_MS)
        comments = [c for c in get_store(STORE).all() if c.app_id == app_id]
        return sorted(comments, key=lambda c: as_aware(c.created_at), reverse=True)

    @classmethod
    async def get_by_id(cls, comment_id: int) -> SalesCommentRead:
        await simulate_latency(DELAY_MS)
        comment = get_store(STORE).get(comment_id)
        if comment is None:
            raise NotFoundError(ENTITY, comment_id)
        return comment

    @classmethod
    async def create(cls, data: SalesCommentCreate) -> SalesCommentRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(DELAY_MS)
        store = get_store(STORE)
        now = datetime.now(timezone.utc)
        comment = SalesCommentRead(
            id=store.next_id(),
            created_at=now,
            updated_at=now,
            **data.model_dump(),
        )
        created = store.add(comment)
        logger.info("Created sales comment %s for app %s", created.id, created.app_id)
        return created

    @classmethod
    async def update(cls, comment_id: int, data: SalesCommentUpdate) -> SalesCommentRead:
        """Merge the provided fields and refresh ``updatedAt``.

        The identifier and the owning application never change.
        """
        logger = logging.getLogger(__name__)
        await simulate_latency(DELAY_MS)
        store = get_store(STORE)
        current = store.get(comment_id)
        if current is None:
            raise NotFoundError(ENTITY, comment_id)
        updated = apply_patch(current, data, updated_at=datetime.now(timezone.utc))
        store.replace(updated)
        logger.info("Updated sales comment %s", comment_id)
        return updated

    @classmethod
    async def delete(cls, comment_id: int) -> SalesCommentRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(DELAY_MS)
        removed = get_store(STORE).remove(comment_id)
        if removed is None:
            raise NotFoundError(ENTITY, comment_id)
        logger.info("Deleted sales comment %s", comment_id)
        return removed
