"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers (applications, user
analytics, logs, sales comments) and the reports router under a
unified prefix.
"""

from fastapi import APIRouter

from .endpoints import (
    apps,
    user_analytics,
    logs,
    sales_comments,
    reports,
)

router = APIRouter()

router.include_router(apps.router, prefix="/apps", tags=["apps"])
router.include_router(user_analytics.router, prefix="/user-analytics", tags=["user-analytics"])
router.include_router(logs.router, prefix="/logs", tags=["logs"])
router.include_router(sales_comments.router, prefix="/sales-comments", tags=["sales-comments"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
