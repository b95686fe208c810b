"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each entity type (applications, user analytics, log
entries, sales comments) has its own schema module, service and
router under ``api/v1/endpoints``.  Seed datasets are shipped in the
``data`` directory and loaded into memory by ``core.store``.
"""

from .main import app  # noqa: F401
