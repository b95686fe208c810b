"""
Top‑level package for the App Insights Dashboard API.

This file makes ``app_insights_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``app_insights_api.app.main``.  The client wrapper lives in the
separate ``app_insights_client`` module at the project root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
