"""
Domain models for date range labels.

Pydantic models for the options accepted by the formatter and the results
reported by the CLI.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

# =============================================================================
# Calendar
# =============================================================================


class CalendarUnit(StrEnum):
    """Calendar units understood by the boundary predicates."""

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    DAY = "day"
    MINUTE = "minute"


# =============================================================================
# Formatting
# =============================================================================


class DateRangeFormatOptions(BaseModel):
    """Options for ``format_date_range``.

    ``today`` and ``locale`` are left as None here and resolved once per call,
    so a single options object can be reused across days and hosts.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    today: datetime | None = Field(
        default=None, description="Reference instant for omitting the year or date"
    )
    locale: str | None = Field(default=None, description="Locale for clock formatting")
    include_time: bool = Field(default=True, description="Append times off day boundaries")
    separator: str = Field(default="-", description="Token between the two sides")


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    error: str | None = None
