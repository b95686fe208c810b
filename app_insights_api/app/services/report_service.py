"""
Report generation for the dashboard's export screen.

A report is one dataset (applications, user analytics or system logs)
restricted to records active inside a date range and rendered as JSON
or CSV.  JSON reports also embed the summary figures of the selected
records (overview cards, user summary or per‑level log counts).
"""

from __future__ import annotations

import csv
import io
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from .app_service import AppService
from .log_entry_service import LogEntryService
from .statistics_service import StatisticsService, as_aware
from .user_analytics_service import UserAnalyticsService


REPORT_TYPES = {
    "apps-overview": "Apps Overview Report",
    "user-analytics": "User Analytics Report",
    "system-logs": "System Logs Report",
}

DATE_RANGES = {
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
    "90d": timedelta(days=90),
    "6m": timedelta(days=182),
    "1y": timedelta(days=365),
}

FORMATS = {"json", "csv"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Report:
    """A rendered report: its payload plus the media type to serve it with."""

    def __init__(self, content: Any, media_type: str, filename: str) -> None:
        self.content = content
        self.media_type = media_type
        self.filename = filename


class ReportService:
    """Build exportable reports from the in‑memory datasets."""

    @classmethod
    async def generate(
        cls,
        report_type: str,
        date_range: str = "30d",
        fmt: str = "json",
        now: Optional[datetime] = None,
    ) -> Report:
        """Generate a report.

        Raises ``ValueError`` for an unknown report type, date range or
        format.
        """
        logger = logging.getLogger(__name__)
        if report_type not in REPORT_TYPES:
            raise ValueError(f"Unknown report type '{report_type}'")
        if date_range not in DATE_RANGES:
            raise ValueError(f"Unknown date range '{date_range}'")
        fmt = fmt.lower()
        if fmt not in FORMATS:
            raise ValueError(f"Unsupported report format '{fmt}'")

        current = as_aware(now) if now is not None else _utcnow()
        since = current - DATE_RANGES[date_range]

        if report_type == "apps-overview":
            apps = await AppService.get_all()
            records = [a for a in apps if as_aware(a.last_activity) >= since]
            summary = StatisticsService.app_stats(records, now=current).model_dump(by_alias=True)
        elif report_type == "user-analytics":
            users = await UserAnalyticsService.get_all()
            records = [u for u in users if as_aware(u.last_activity) >= since]
            summary = StatisticsService.user_summary(records, now=current).model_dump(by_alias=True)
        else:
            logs = await LogEntryService.get_all()
            records = [log for log in logs if as_aware(log.timestamp) >= since]
            summary = StatisticsService.log_level_counts(records).model_dump(by_alias=True)

        rows = [record.model_dump(mode="json", by_alias=True) for record in records]
        logger.info("Generated %s report (%s, %d rows, %s)", report_type, date_range, len(rows), fmt)

        filename = f"{report_type}-{date_range}.{fmt}"
        if fmt == "csv":
            return Report(cls._to_csv(rows), "text/csv", filename)
        payload = {
            "title": REPORT_TYPES[report_type],
            "reportType": report_type,
            "dateRange": date_range,
            "generatedAt": current.isoformat(),
            "since": since.isoformat(),
            "summary": summary,
            "rowCount": len(rows),
            "rows": rows,
        }
        return Report(payload, "application/json", filename)

    @staticmethod
    def _to_csv(rows: List[Dict[str, Any]]) -> str:
        """Render rows as CSV with a header; nested values are written as JSON."""
        buffer = io.StringIO()
        if not rows:
            return ""
        fieldnames: List[str] = []
        for row in rows:
            for key in row:
                if key not in fieldnames:
                    fieldnames.append(key)
        writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow({k: _cell(row.get(k)) for k in fieldnames})
        return buffer.getvalue()


def _cell(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return value
