"""
Pydantic models for sales comments.

Sales comments are free‑text notes attached to an application by a
member of the sales team.  ``appId`` references an application by
convention only; the service never checks that it exists.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel


class CommentPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SalesCommentBase(CamelModel):
    app_id: int = Field(..., examples=[1])
    comment: str = Field(..., examples=["Interested in upgrading to Enterprise"])
    author: str = Field(..., examples=["Sarah Johnson"])
    priority: CommentPriority = CommentPriority.MEDIUM
    follow_up_date: Optional[datetime] = None


class SalesCommentCreate(SalesCommentBase):
    """Schema for creating a sales comment."""
    pass


class SalesCommentRead(SalesCommentBase):
    """Schema for a sales comment as stored and returned."""

    id: int = Field(..., alias="Id")
    created_at: datetime
    updated_at: datetime


class SalesCommentUpdate(CamelModel):
    """Schema for updating a sales comment.

    ``appId`` is intentionally absent: a comment stays attached to the
    application it was written for.
    """

    comment: Optional[str] = None
    author: Optional[str] = None
    priority: Optional[CommentPriority] = None
    follow_up_date: Optional[datetime] = None
