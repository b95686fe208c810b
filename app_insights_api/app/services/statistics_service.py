"""
Aggregated metrics for the dashboard.

These helpers compute the summary cards shown above the tables:
application counts and message volume, user activity, and the number
of log entries per severity level.  Every call recomputes from the
list it is given; nothing is cached or maintained incrementally.

A reference time ``now`` can be passed to make recency windows
deterministic.  When omitted the current UTC time is used.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Sequence

from ..schemas.app import AppRead
from ..schemas.log_entry import LogEntryRead, LogLevel
from ..schemas.statistics import AppStats, LogLevelCounts, UserSummary
from ..schemas.user_analytics import UserAnalyticsRead


ACTIVE_APP_WINDOW = timedelta(days=1)
ACTIVE_USER_WINDOW = timedelta(days=7)
# Average response time is estimated from message volume.
RESPONSE_TIME_PER_MESSAGE = 0.1


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like the dashboard does: halves always go up."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _now(now: Optional[datetime]) -> datetime:
    return as_aware(now) if now is not None else datetime.now(timezone.utc)


class StatisticsService:
    """Pure aggregations over record lists."""

    @staticmethod
    def app_stats(apps: Sequence[AppRead], now: Optional[datetime] = None) -> AppStats:
        """Return totals for the applications overview.

        ``activeUsers`` counts applications active within the last 24
        hours; ``avgResponseTime`` averages ``messagesCount * 0.1`` over
        all applications and is ``0`` for an empty list.
        """
        current = _now(now)
        cutoff = current - ACTIVE_APP_WINDOW
        active = sum(1 for app in apps if as_aware(app.last_activity) > cutoff)
        total_messages = sum(app.messages_count for app in apps)
        if apps:
            avg = round_half_up(
                sum(app.messages_count * RESPONSE_TIME_PER_MESSAGE for app in apps) / len(apps)
            )
        else:
            avg = 0.0
        return AppStats(
            total_apps=len(apps),
            active_users=active,
            total_messages=total_messages,
            avg_response_time=avg,
        )

    @staticmethod
    def user_summary(users: Sequence[UserAnalyticsRead], now: Optional[datetime] = None) -> UserSummary:
        """Return the user analytics summary block."""
        current = _now(now)
        cutoff = current - ACTIVE_USER_WINDOW
        active = sum(1 for user in users if as_aware(user.last_activity) >= cutoff)
        if users:
            avg_apps = round_half_up(sum(user.total_apps for user in users) / len(users))
        else:
            avg_apps = 0.0
        return UserSummary(
            total_users=len(users),
            active_users_this_week=active,
            avg_apps_per_user=avg_apps,
        )

    @staticmethod
    def log_level_counts(logs: Sequence[LogEntryRead]) -> LogLevelCounts:
        """Count log entries per level; levels with no entries are omitted."""
        counts: Dict[str, int] = {}
        for log in logs:
            key = log.level.value if isinstance(log.level, LogLevel) else str(log.level)
            counts[key] = counts.get(key, 0) + 1
        return LogLevelCounts(total=len(logs), counts=counts)
