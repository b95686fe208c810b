"""
Application endpoints for API v1.

These routes expose the applications CRUD façade together with the
overview statistics and the table filters (free‑text search, category
and plan selectors, column sort).
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from app_insights_api.app.core.errors import NotFoundError
from app_insights_api.app.schemas.app import AppCreate, AppRead, AppUpdate
from app_insights_api.app.schemas.statistics import AppStats
from app_insights_api.app.services.app_service import AppService


router = APIRouter()


@router.get("/", response_model=List[AppRead])
async def list_apps(
    search: Optional[str] = Query(None, description="Matches app name, owner email or category"),
    category: Optional[str] = Query(None),
    plan: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, description="Field name, e.g. app_name or messages_count"),
    order: str = Query("asc"),
) -> List[AppRead]:
    """List applications.

    - **search** — case‑insensitive substring of name, email or category.
    - **category**, **plan** — exact selectors; empty means all.
    - **sort_by**, **order** — column sort (`asc`/`desc`).
    """
    return await AppService.list_apps(
        search=search,
        category=category,
        plan=plan,
        sort_by=sort_by,
        order=order,
    )


@router.get("/stats", response_model=AppStats)
async def get_stats() -> AppStats:
    """Return the overview cards: totals, active apps and message volume."""
    return await AppService.get_stats()


@router.get("/{app_id}", response_model=AppRead)
async def get_app(app_id: int) -> AppRead:
    """Retrieve a single application; 404 if it does not exist."""
    try:
        return await AppService.get_by_id(app_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=AppRead, status_code=status.HTTP_201_CREATED)
async def create_app(app_in: AppCreate) -> AppRead:
    """Create an application record."""
    return await AppService.create(app_in)


@router.put("/{app_id}", response_model=AppRead)
async def update_app(app_id: int, updates: AppUpdate) -> AppRead:
    """Update an application.  Unspecified fields remain unchanged."""
    try:
        return await AppService.update(app_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{app_id}", response_model=AppRead)
async def delete_app(app_id: int) -> AppRead:
    """Delete an application and return the removed record."""
    try:
        return await AppService.delete(app_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
