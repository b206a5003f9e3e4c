"""Human-readable labels for date and date-time ranges.

``format_date_range`` collapses ranges that line up with calendar boundaries
and otherwise prints only as much of each side as differs:

    2023                              whole year
    Q1 2023                           whole quarter
    January 2023 / Jan - Feb 2023     whole month(s)
    Dec 30 '23 - Jan 2 '24            across years
    Jan 1 - Feb 12[, 2023]            across months
    Jan 1 - 12[, 2023]                across days
    Jan 1, 12pm - 1pm[, 2023]         same day, different times
    12:30pm - 1pm                     ... when that day is today
    Fri, Jan 1[, 2023]                one full day

The year is left off when the range starts in the current year.  Checks run
in exactly that order and the first match wins, so a range can satisfy more
than one shape (a whole quarter is also whole months).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from babel.dates import format_datetime

from daterange_label.boundaries import is_end_of, is_same, is_start_of, quarter_of
from daterange_label.config import get_settings
from daterange_label.locales import detect_locale, parse_locale
from daterange_label.renderers.time_of_day import make_time_formatter
from daterange_label.schemas import CalendarUnit, DateRangeFormatOptions

logger = logging.getLogger(__name__)

# LDML patterns for the date fragments
YEAR = "yyyy"
MONTH_SHORT = "MMM"
MONTH_YEAR = "MMMM yyyy"
MONTH_SHORT_YEAR = "MMM yyyy"
MONTH_DAY = "MMM d"
MONTH_DAY_SHORT_YEAR = "MMM d ''yy"
DAY = "d"
WEEKDAY_MONTH_DAY = "EEE, MMM d"


def _resolve_options(
    options: DateRangeFormatOptions | None, overrides: dict[str, Any]
) -> DateRangeFormatOptions:
    if options is None:
        return DateRangeFormatOptions(**overrides)
    if not overrides:
        return options
    return DateRangeFormatOptions(**{**options.model_dump(), **overrides})


def format_date_range(
    from_: datetime,
    to: datetime,
    options: DateRangeFormatOptions | None = None,
    **overrides: Any,
) -> str:
    """Format the range ``from_`` .. ``to`` as a compact display label.

    Args:
        from_: Start of the range, already in the display time zone.
        to: End of the range. Ordering is not checked; a reversed range
            still gets a label, just a backwards one.
        options: Formatting options; defaults apply when omitted.
        **overrides: Individual option fields (``today``, ``locale``,
            ``include_time``, ``separator``) applied on top of ``options``.

    Returns:
        The label, never empty. A ``locale`` without locale data falls back
        to its language, then to ``Settings.fallback_locale``, and is only
        looked up when a time is rendered.
    """
    opts = _resolve_options(options, overrides)
    today = opts.today if opts.today is not None else datetime.now()
    locale = opts.locale if opts.locale is not None else detect_locale()
    sep = opts.separator
    date_locale = parse_locale(get_settings().date_locale)

    def fmt(value: datetime, pattern: str) -> str:
        return format_datetime(value, pattern, locale=date_locale)

    format_time = make_time_formatter(locale)

    same_year = is_same(from_, to, CalendarUnit.YEAR)
    same_month = is_same(from_, to, CalendarUnit.MONTH)
    same_day = is_same(from_, to, CalendarUnit.DAY)
    this_year = is_same(from_, today, CalendarUnit.YEAR)
    this_day = is_same(from_, today, CalendarUnit.DAY)

    year_suffix = "" if this_year else f", {fmt(to, YEAR)}"

    start_time_suffix = (
        f", {format_time(from_)}"
        if opts.include_time and not is_start_of(from_, CalendarUnit.DAY)
        else ""
    )
    end_time_suffix = (
        f", {format_time(to)}" if opts.include_time and not is_end_of(to, CalendarUnit.DAY) else ""
    )
    has_time = bool(start_time_suffix or end_time_suffix)

    # Whole year(s), e.g. 2023. Only the start year is printed.
    if is_start_of(from_, CalendarUnit.YEAR) and is_end_of(to, CalendarUnit.YEAR):
        logger.debug("Range %s - %s is a full year", from_, to)
        return fmt(from_, YEAR)

    # Whole quarter, e.g. Q1 2023
    if (
        is_start_of(from_, CalendarUnit.QUARTER)
        and is_end_of(to, CalendarUnit.QUARTER)
        and quarter_of(from_) == quarter_of(to)
    ):
        logger.debug("Range %s - %s is a full quarter", from_, to)
        return f"Q{quarter_of(from_)} {fmt(from_, YEAR)}"

    # Whole month(s)
    if is_start_of(from_, CalendarUnit.MONTH) and is_end_of(to, CalendarUnit.MONTH):
        logger.debug("Range %s - %s is full months", from_, to)
        if same_month and same_year:
            # January 2023
            return fmt(from_, MONTH_YEAR)
        # Jan - Feb 2023
        return f"{fmt(from_, MONTH_SHORT)} {sep} {fmt(to, MONTH_SHORT_YEAR)}"

    # Jan 1 '23 - Feb 12 '24
    if not same_year:
        logger.debug("Range %s - %s crosses years", from_, to)
        return (
            f"{fmt(from_, MONTH_DAY_SHORT_YEAR)}{start_time_suffix} {sep} "
            f"{fmt(to, MONTH_DAY_SHORT_YEAR)}{end_time_suffix}"
        )

    # Jan 1 - Feb 12[, 2023]
    if not same_month:
        logger.debug("Range %s - %s crosses months", from_, to)
        return (
            f"{fmt(from_, MONTH_DAY)}{start_time_suffix} {sep} "
            f"{fmt(to, MONTH_DAY)}{end_time_suffix}{year_suffix}"
        )

    if not same_day:
        logger.debug("Range %s - %s crosses days", from_, to)
        # Times present, so the month is repeated: Jan 1, 12pm - Jan 2, 1pm[, 2023]
        if has_time:
            return (
                f"{fmt(from_, MONTH_DAY)}{start_time_suffix} {sep} "
                f"{fmt(to, MONTH_DAY)}{end_time_suffix}{year_suffix}"
            )
        # Jan 1 - 12[, 2023]
        return f"{fmt(from_, MONTH_DAY)} {sep} {fmt(to, DAY)}{year_suffix}"

    if has_time:
        logger.debug("Range %s - %s is within one day", from_, to)
        # 12:30pm - 1pm
        if this_day:
            return f"{format_time(from_)} {sep} {format_time(to)}"
        # Jan 1, 12pm - 1pm[, 2023]
        return f"{fmt(from_, MONTH_DAY)}{start_time_suffix} {sep} {format_time(to)}{year_suffix}"

    # Fri, Jan 1[, 2023]
    logger.debug("Range %s - %s is a full day", from_, to)
    return f"{fmt(from_, WEEKDAY_MONTH_DAY)}{year_suffix}"
