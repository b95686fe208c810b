"""
Pydantic models for application records.

An application belongs to a user (by email), falls into a category,
runs on a plan tier and carries usage counters together with the
outcome of the latest chat analysis.  ``AppCreate`` omits the fields
assigned by the service (``Id`` and ``lastActivity``); ``AppUpdate``
makes every field optional for shallow merges.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel


APP_CATEGORIES = (
    "E-commerce",
    "Social Media",
    "Productivity",
    "Finance",
    "Health",
    "Education",
)

PLAN_TIERS = ("Free", "Basic", "Pro", "Enterprise")


class ChatAnalysisStatus(str, Enum):
    """Outcome of the automated analysis of an application's chats."""

    SMOOTH_PROGRESS = "smooth_progress"
    NEEDS_GUIDANCE = "needs_guidance"
    FRUSTRATED = "frustrated"
    STUCK = "stuck"
    ABANDONMENT_RISK = "abandonment_risk"


class AppBase(CamelModel):
    app_name: str = Field(..., examples=["ShopFlow"])
    user_email: str = Field(..., examples=["owner@shopflow.io"])
    category: str = Field(..., examples=["E-commerce"])
    plan: str = Field(..., examples=["Pro"])
    messages_count: int = Field(0, ge=0)
    chat_analysis_status: ChatAnalysisStatus = ChatAnalysisStatus.SMOOTH_PROGRESS
    db_connected: bool = False


class AppCreate(AppBase):
    """Schema for creating an application record."""
    pass


class AppRead(AppBase):
    """Schema for an application record as stored and returned."""

    id: int = Field(..., alias="Id")
    last_activity: datetime


class AppUpdate(CamelModel):
    """Schema for updating an application.

    All fields are optional; only provided fields will be merged.
    """

    app_name: Optional[str] = None
    user_email: Optional[str] = None
    category: Optional[str] = None
    plan: Optional[str] = None
    messages_count: Optional[int] = Field(None, ge=0)
    chat_analysis_status: Optional[ChatAnalysisStatus] = None
    db_connected: Optional[bool] = None
    last_activity: Optional[datetime] = None
