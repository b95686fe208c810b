"""
Pydantic models for per‑user analytics records.

Each record summarises one account: the owning email and company,
the plan type, how many applications the user created and how many
credits were consumed, together with signup and last activity
timestamps.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class UserAnalyticsBase(CamelModel):
    user_email: str = Field(..., examples=["jane@acme.com"])
    company: str = Field(..., examples=["Acme Corp"])
    plan_type: str = Field(..., examples=["Enterprise"])
    total_apps: int = Field(0, ge=0)
    credits_used: int = Field(0, ge=0)


class UserAnalyticsCreate(UserAnalyticsBase):
    """Schema for creating a user analytics record.

    ``signupDate`` and ``lastActivity`` default to the creation time
    when omitted.
    """

    signup_date: Optional[datetime] = None
    last_activity: Optional[datetime] = None


class UserAnalyticsRead(UserAnalyticsBase):
    """Schema for a user analytics record as stored and returned."""

    id: int = Field(..., alias="Id")
    signup_date: datetime
    last_activity: datetime


class UserAnalyticsUpdate(CamelModel):
    """Schema for updating a user analytics record."""

    user_email: Optional[str] = None
    company: Optional[str] = None
    plan_type: Optional[str] = None
    total_apps: Optional[int] = Field(None, ge=0)
    credits_used: Optional[int] = Field(None, ge=0)
    signup_date: Optional[datetime] = None
    last_activity: Optional[datetime] = None
