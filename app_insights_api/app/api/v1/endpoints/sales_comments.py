"""
Sales comment endpoints for API v1.

Comments are always listed for one application (``app_id`` query
parameter), newest first, as shown in the application details modal.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from app_insights_api.app.core.errors import NotFoundError
from app_insights_api.app.schemas.sales_comment import (
    SalesCommentCreate,
    SalesCommentRead,
    SalesCommentUpdate,
)
from app_insights_api.app.services.sales_comment_service import SalesCommentService


router = APIRouter()


@router.get("/", response_model=List[SalesCommentRead])
async def list_sales_comments(app_id: int = Query(..., description="Owning application")) -> List[SalesCommentRead]:
    return await SalesCommentService.get_all(app_id)


@router.get("/{comment_id}", response_model=SalesCommentRead)
async def get_sales_comment(comment_id: int) -> SalesCommentRead:
    try:
        return await SalesCommentService.get_by_id(comment_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=SalesCommentRead, status_code=status.HTTP_201_CREATED)
async def create_sales_comment(comment_in: SalesCommentCreate) -> SalesCommentRead:
    return await SalesCommentService.create(comment_in)


@router.put("/{comment_id}", response_model=SalesCommentRead)
async def update_sales_comment(comment_id: int, updates: SalesCommentUpdate) -> SalesCommentRead:
    try:
        return await SalesCommentService.update(comment_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{comment_id}", response_model=SalesCommentRead)
async def delete_sales_comment(comment_id: int) -> SalesCommentRead:
    try:
        return await SalesCommentService.delete(comment_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
