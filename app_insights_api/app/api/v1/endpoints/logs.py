"""
Log entry endpoints for API v1.

Besides CRUD, the log analysis page needs entries filtered by level
and the number of entries per level for its tab badges.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from app_insights_api.app.core.errors import NotFoundError
from app_insights_api.app.schemas.log_entry import LogEntryCreate, LogEntryRead, LogEntryUpdate
from app_insights_api.app.schemas.statistics import LogLevelCounts
from app_insights_api.app.services.log_entry_service import LogEntryService


router = APIRouter()


@router.get("/", response_model=List[LogEntryRead])
async def list_logs(
    level: Optional[str] = Query(None, description="ERROR, WARN, INFO or DEBUG (any case)"),
    sort_by: Optional[str] = Query(None),
    order: str = Query("asc"),
) -> List[LogEntryRead]:
    """List log entries, optionally restricted to a single level."""
    return await LogEntryService.list_logs(level=level, sort_by=sort_by, order=order)


@router.get("/level-counts", response_model=LogLevelCounts)
async def get_level_counts() -> LogLevelCounts:
    return await LogEntryService.level_counts()


@router.get("/{log_id}", response_model=LogEntryRead)
async def get_log(log_id: int) -> LogEntryRead:
    try:
        return await LogEntryService.get_by_id(log_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=LogEntryRead, status_code=status.HTTP_201_CREATED)
async def create_log(log_in: LogEntryCreate) -> LogEntryRead:
    """Record a log entry; the timestamp is assigned by the server."""
    return await LogEntryService.create(log_in)


@router.put("/{log_id}", response_model=LogEntryRead)
async def update_log(log_id: int, updates: LogEntryUpdate) -> LogEntryRead:
    try:
        return await LogEntryService.update(log_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{log_id}", response_model=LogEntryRead)
async def delete_log(log_id: int) -> LogEntryRead:
    try:
        return await LogEntryService.delete(log_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
