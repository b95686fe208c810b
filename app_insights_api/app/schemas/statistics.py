"""Pydantic models for aggregated dashboard statistics."""

from typing import Dict

from .base import CamelModel


class AppStats(CamelModel):
    """Headline numbers shown on the applications overview cards."""

    total_apps: int
    active_users: int
    total_messages: int
    avg_response_time: float


class UserSummary(CamelModel):
    """Summary block of the user analytics page."""

    total_users: int
    active_users_this_week: int
    avg_apps_per_user: float


class LogLevelCounts(CamelModel):
    """Number of log entries per severity level."""

    total: int
    counts: Dict[str, int]
