"""
Service layer for application records.

Applications are kept in the ``apps`` in‑memory store.  Each operation
first awaits a simulated network delay so that clients experience
the latency of a real backend.  Lookups by identifier raise
``NotFoundError`` when the record does not exist; the API layer turns
that into an HTTP 404 response.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import NotFoundError
from ..core.store import apply_patch, get_store, simulate_latency
from ..schemas.app import AppCreate, AppRead, AppUpdate
from ..schemas.statistics import AppStats
from .filtering import APP_SORT_FIELDS, filter_apps, sort_records
from .statistics_service import StatisticsService


ENTITY = "App"
STORE = "apps"


class AppService:
    """CRUD operations and statistics for applications."""

    @classmethod
    async def list_apps(
        cls,
        search: Optional[str] = None,
        category: Optional[str] = None,
        plan: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: str = "asc",
    ) -> List[AppRead]:
        """Return all applications, optionally filtered and sorted.

        Without any argument the full sequence is returned in stored
        order.  ``sort_by`` accepts any application field; unknown
        fields fall back to ``app_name``.
        """
        apps = await cls.get_all()
        apps = filter_apps(apps, search=search, category=category, plan=plan)
        if sort_by:
            apps = sort_records(apps, sort_by, order, allowed=APP_SORT_FIELDS, default="app_name")
        return apps

    @classmethod
    async def get_all(cls) -> List[AppRead]:
        await simulate_latency(300)
        return get_store(STORE).all()

    @classmethod
    async def get_by_id(cls, app_id: int) -> AppRead:
        await simulate_latency(200)
        app = get_store(STORE).get(app_id)
        if app is None:
            raise NotFoundError(ENTITY, app_id)
        return app

    @classmethod
    async def create(cls, data: AppCreate) -> AppRead:
        """Append a new application and return it.

        The identifier is one more than the highest existing one and
        ``lastActivity`` is set to the creation time.
        """
        logger = logging.getLogger(__name__)
        await simulate_latency(400)
        store = get_store(STORE)
        app = AppRead(
            id=store.next_id(),
            last_activity=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        created = store.add(app)
        logger.info("Created app %s (%s)", created.id, created.app_name)
        return created

    @classmethod
    async def update(cls, app_id: int, data: AppUpdate) -> AppRead:
        """Shallow‑merge the provided fields into an existing application."""
        logger = logging.getLogger(__name__)
        await simulate_latency(350)
        store = get_store(STORE)
        current = store.get(app_id)
        if current is None:
            raise NotFoundError(ENTITY, app_id)
        updated = apply_patch(current, data)
        store.replace(updated)
        logger.info("Updated app %s: %s", app_id, sorted(data.model_dump(exclude_unset=True)))
        return updated

    @classmethod
    async def delete(cls, app_id: int) -> AppRead:
        """Remove an application and return the removed record."""
        logger = logging.getLogger(__name__)
        await simulate_latency(250)
        removed = get_store(STORE).remove(app_id)
        if removed is None:
            raise NotFoundError(ENTITY, app_id)
        logger.info("Deleted app %s", app_id)
        return removed

    @classmethod
    async def get_stats(cls, now: Optional[datetime] = None) -> AppStats:
        await simulate_latency(200)
        return StatisticsService.app_stats(get_store(STORE).all(), now=now)
