"""
Service layer for per‑user analytics.

Mirrors ``AppService`` for the ``user_analytics`` store.  Signup and
last activity timestamps default to the creation time when a caller
does not supply them.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import NotFoundError
from ..core.store import apply_patch, get_store, simulate_latency
from ..schemas.statistics import UserSummary
from ..schemas.user_analytics import (
    UserAnalyticsCreate,
    UserAnalyticsRead,
    UserAnalyticsUpdate,
)
from .filtering import USER_SORT_FIELDS, sort_records
from .statistics_service import StatisticsService


ENTITY = "Analytics"
STORE = "user_analytics"


class UserAnalyticsService:
    """CRUD operations and summary for user analytics records."""

    @classmethod
    async def list_users(cls, sort_by: Optional[str] = None, order: str = "asc") -> List[UserAnalyticsRead]:
        """Return all records, sorted when ``sort_by`` is given.

        Unknown sort fields fall back to ``user_email``.
        """
        users = await cls.get_all()
        if sort_by:
            users = sort_records(users, sort_by, order, allowed=USER_SORT_FIELDS, default="user_email")
        return users

    @classmethod
    async def get_all(cls) -> List[UserAnalyticsRead]:
        await simulate_latency(400)
        return get_store(STORE).all()

    @classmethod
    async def get_by_id(cls, record_id: int) -> UserAnalyticsRead:
        await simulate_latency(200)
        record = get_store(STORE).get(record_id)
        if record is None:
            raise NotFoundError(ENTITY, record_id)
        return record

    @classmethod
    async def create(cls, data: UserAnalyticsCreate) -> UserAnalyticsRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(500)
        store = get_store(STORE)
        now = datetime.now(timezone.utc)
        fields = data.model_dump()
        fields["signup_date"] = fields.get("signup_date") or now
        fields["last_activity"] = fields.get("last_activity") or now
        created = store.add(UserAnalyticsRead(id=store.next_id(), **fields))
        logger.info("Created user analytics %s for %s", created.id, created.user_email)
        return created

    @classmethod
    async def update(cls, record_id: int, data: UserAnalyticsUpdate) -> UserAnalyticsRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(450)
        store = get_store(STORE)
        current = store.get(record_id)
        if current is None:
            raise NotFoundError(ENTITY, record_id)
        updated = apply_patch(current, data)
        store.replace(updated)
        logger.info("Updated user analytics %s", record_id)
        return updated

    @classmethod
    async def delete(cls, record_id: int) -> UserAnalyticsRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(300)
        removed = get_store(STORE).remove(record_id)
        if removed is None:
            raise NotFoundError(ENTITY, record_id)
        logger.info("Deleted user analytics %s", record_id)
        return removed

    @classmethod
    async def get_summary(cls, now: Optional[datetime] = None) -> UserSummary:
        users = await cls.get_all()
        return StatisticsService.user_summary(users, now=now)
