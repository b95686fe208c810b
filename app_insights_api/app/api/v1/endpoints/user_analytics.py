"""
User analytics endpoints for API v1.

CRUD routes for per‑user analytics plus the summary block shown at
the top of the user analytics page.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from app_insights_api.app.core.errors import NotFoundError
from app_insights_api.app.schemas.statistics import UserSummary
from app_insights_api.app.schemas.user_analytics import (
    UserAnalyticsCreate,
    UserAnalyticsRead,
    UserAnalyticsUpdate,
)
from app_insights_api.app.services.user_analytics_service import UserAnalyticsService


router = APIRouter()


@router.get("/", response_model=List[UserAnalyticsRead])
async def list_user_analytics(
    sort_by: Optional[str] = Query(None),
    order: str = Query("asc"),
) -> List[UserAnalyticsRead]:
    """List user analytics records, optionally sorted by a column."""
    return await UserAnalyticsService.list_users(sort_by=sort_by, order=order)


@router.get("/summary", response_model=UserSummary)
async def get_summary() -> UserSummary:
    """Total users, users active in the last 7 days and average apps per user."""
    return await UserAnalyticsService.get_summary()


@router.get("/{record_id}", response_model=UserAnalyticsRead)
async def get_user_analytics(record_id: int) -> UserAnalyticsRead:
    try:
        return await UserAnalyticsService.get_by_id(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=UserAnalyticsRead, status_code=status.HTTP_201_CREATED)
async def create_user_analytics(record_in: UserAnalyticsCreate) -> UserAnalyticsRead:
    return await UserAnalyticsService.create(record_in)


@router.put("/{record_id}", response_model=UserAnalyticsRead)
async def update_user_analytics(record_id: int, updates: UserAnalyticsUpdate) -> UserAnalyticsRead:
    try:
        return await UserAnalyticsService.update(record_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{record_id}", response_model=UserAnalyticsRead)
async def delete_user_analytics(record_id: int) -> UserAnalyticsRead:
    try:
        return await UserAnalyticsService.delete(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
