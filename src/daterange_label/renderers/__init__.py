"""Pure rendering functions: datetimes -> display strings.

All renderers follow the same pattern:
  - Input: ``datetime`` values plus options
  - Output: str (plain text label, never empty)
  - No side effects, no I/O

Public API:
  - date_range: format_date_range
  - time_of_day: format_time, make_time_formatter, shorten_am_pm, remove_leading_zero
"""

from __future__ import annotations

from daterange_label.renderers.date_range import format_date_range
from daterange_label.renderers.time_of_day import (
    format_time,
    make_time_formatter,
    remove_leading_zero,
    shorten_am_pm,
)

__all__ = [
    "format_date_range",
    "format_time",
    "make_time_formatter",
    "remove_leading_zero",
    "shorten_am_pm",
]
