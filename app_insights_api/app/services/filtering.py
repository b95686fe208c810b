"""
Client‑style filtering and sorting of record lists.

The dashboard tables recompute their visible rows on every keystroke
or selector change.  The helpers here are pure functions over an
already fetched list: they never touch a store and never mutate their
input.  Sorting uses a single key with no tie breaker, so records that
compare equal keep their incoming order.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_snake

from .statistics_service import as_aware


RecordT = TypeVar("RecordT", bound=BaseModel)

APP_SEARCH_FIELDS = ("app_name", "user_email", "category")

APP_SORT_FIELDS = {
    "id",
    "app_name",
    "user_email",
    "category",
    "plan",
    "messages_count",
    "chat_analysis_status",
    "db_connected",
    "last_activity",
}
USER_SORT_FIELDS = {
    "id",
    "user_email",
    "company",
    "plan_type",
    "total_apps",
    "credits_used",
    "signup_date",
    "last_activity",
}
LOG_SORT_FIELDS = {"id", "level", "message", "timestamp"}


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def matches_search(record: BaseModel, term: str, fields: Iterable[str]) -> bool:
    """Return ``True`` if ``term`` is a case‑insensitive substring of any field.

    An empty term matches every record.
    """
    if not term:
        return True
    needle = term.lower()
    return any(needle in _text(getattr(record, field, None)).lower() for field in fields)


def filter_apps(
    apps: Sequence[RecordT],
    search: Optional[str] = None,
    category: Optional[str] = None,
    plan: Optional[str] = None,
) -> List[RecordT]:
    """Apply the applications table filters.

    A record is kept when the search term (matched against app name,
    owner email and category) is empty or found, and each selector is
    empty or equal to the record's value.
    """
    return [
        app
        for app in apps
        if matches_search(app, search or "", APP_SEARCH_FIELDS)
        and (not category or app.category == category)
        and (not plan or app.plan == plan)
    ]


def filter_logs_by_level(logs: Sequence[RecordT], level: Optional[str] = None) -> List[RecordT]:
    """Keep log entries whose level equals ``level`` ignoring case."""
    if not level:
        return list(logs)
    wanted = level.lower()
    return [log for log in logs if _text(log.level).lower() == wanted]


def _sort_key(value: Any) -> Any:
    # Strings collate case-insensitively; everything else compares natively.
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value.casefold()
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, datetime):
        return as_aware(value).timestamp()
    return value


def sort_records(
    records: Sequence[RecordT],
    sort_by: str,
    order: str = "asc",
    allowed: Optional[Iterable[str]] = None,
    default: str = "id",
) -> List[RecordT]:
    """Return ``records`` sorted by the attribute ``sort_by``.

    ``sort_by`` may use the wire spelling (``appName``) or the attribute
    name (``app_name``).  Fields outside ``allowed`` fall back to
    ``default``; an ``order`` other than ``asc``/``desc`` falls back to
    ascending.  Records whose value is missing sort after all others in
    ascending order.
    """
    sort_by = to_snake(sort_by or default)
    if allowed is not None and sort_by not in set(allowed):
        sort_by = default
    order = (order or "asc").lower()
    if order not in {"asc", "desc"}:
        order = "asc"

    present = [r for r in records if getattr(r, sort_by, None) is not None]
    missing = [r for r in records if getattr(r, sort_by, None) is None]
    ordered = sorted(
        present,
        key=lambda r: _sort_key(getattr(r, sort_by)),
        reverse=order == "desc",
    )
    if order == "desc":
        return missing + ordered
    return ordered + missing
