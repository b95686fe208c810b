"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
dashboard API runs out of the box against the bundled seed datasets.
"""

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_DATA_DIR = str(Path(__file__).resolve().parent.parent / "data")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "App Insights Dashboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Directory holding apps.json, userAnalytics.json, logEntries.json
    # and salesComments.json.  Records are loaded once into memory and
    # every mutation is lost when the process restarts.
    data_dir: str = os.getenv("DATA_DIR", DEFAULT_DATA_DIR)

    # Multiplier applied to the simulated network delay of every service
    # call.  ``0`` disables the delay entirely (used by the test suite).
    latency_scale: float = float(os.getenv("LATENCY_SCALE", "1.0"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
