"""
Service layer for log entries.

Log entries are append‑mostly: ``create`` stamps the entry with the
current time.  ``get_by_level`` backs the level tabs of the log
analysis page and matches levels without regard to case.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.errors import NotFoundError
from ..core.store import apply_patch, get_store, simulate_latency
from ..schemas.log_entry import LogEntryCreate, LogEntryRead, LogEntryUpdate
from ..schemas.statistics import LogLevelCounts
from .filtering import LOG_SORT_FIELDS, filter_logs_by_level, sort_records
from .statistics_service import StatisticsService


ENTITY = "Log entry"
STORE = "log_entries"


class LogEntryService:
    """CRUD operations and level queries for log entries."""

    @classmethod
    async def list_logs(
        cls,
        level: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: str = "asc",
    ) -> List[LogEntryRead]:
        """Return log entries, optionally restricted to one level and sorted."""
        logs = await cls.get_by_level(level) if level else await cls.get_all()
        if sort_by:
            logs = sort_records(logs, sort_by, order, allowed=LOG_SORT_FIELDS, default="timestamp")
        return logs

    @classmethod
    async def get_all(cls) -> List[LogEntryRead]:
        await simulate_latency(350)
        return get_store(STORE).all()

    @classmethod
    async def get_by_id(cls, log_id: int) -> LogEntryRead:
        await simulate_latency(200)
        entry = get_store(STORE).get(log_id)
        if entry is None:
            raise NotFoundError(ENTITY, log_id)
        return entry

    @classmethod
    async def get_by_level(cls, level: str) -> List[LogEntryRead]:
        await simulate_latency(300)
        return filter_logs_by_level(get_store(STORE).all(), level)

    @classmethod
    async def create(cls, data: LogEntryCreate) -> LogEntryRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(400)
        store = get_store(STORE)
        entry = LogEntryRead(
            id=store.next_id(),
            timestamp=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        created = store.add(entry)
        logger.info("Created log entry %s (%s)", created.id, created.level.value)
        return created

    @classmethod
    async def update(cls, log_id: int, data: LogEntryUpdate) -> LogEntryRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(350)
        store = get_store(STORE)
        current = store.get(log_id)
        if current is None:
            raise NotFoundError(ENTITY, log_id)
        updated = apply_patch(current, data)
        store.replace(updated)
        logger.info("Updated log entry %s", log_id)
        return updated

    @classmethod
    async def delete(cls, log_id: int) -> LogEntryRead:
        logger = logging.getLogger(__name__)
        await simulate_latency(250)
        removed = get_store(STORE).remove(log_id)
        if removed is None:
            raise NotFoundError(ENTITY, log_id)
        logger.info("Deleted log entry %s", log_id)
        return removed

    @classmethod
    async def level_counts(cls) -> LogLevelCounts:
        logs = await cls.get_all()
        return StatisticsService.log_level_counts(logs)
