"""
Pydantic models for log entries.

Log entries carry a severity level, a message, the time they were
recorded and an optional free‑form ``metadata`` mapping (request
ids, durations, affected application and so on).
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from .base import CamelModel


class LogLevel(str, Enum):
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"


def _normalise_level(value: Any) -> Any:
    if isinstance(value, str):
        return value.upper()
    return value


class LogEntryBase(CamelModel):
    level: LogLevel = Field(..., examples=["ERROR"])
    message: str = Field(..., examples=["Database connection timeout"])
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, v):
        return _normalise_level(v)


class LogEntryCreate(LogEntryBase):
    """Schema for creating a log entry; the timestamp is assigned on insert."""
    pass


class LogEntryRead(LogEntryBase):
    """Schema for a log entry as stored and returned."""

    id: int = Field(..., alias="Id")
    timestamp: datetime


class LogEntryUpdate(CamelModel):
    """Schema for updating a log entry."""

    level: Optional[LogLevel] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    timestamp: Optional[datetime] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalise_level(cls, v):
        return _normalise_level(v)
