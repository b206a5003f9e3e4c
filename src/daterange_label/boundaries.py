"""Calendar boundary predicates.

Pure helpers over ``datetime`` values: start/end of a calendar unit, same-unit
comparisons and quarter numbers.  Every value is read by its wall-clock
fields; tzinfo is carried along but never converted.

Quarters are fixed (Jan-Mar = Q1 ... Oct-Dec = Q4) regardless of locale.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from daterange_label.schemas import CalendarUnit

_ONE_MICROSECOND = timedelta(microseconds=1)


def quarter_of(value: datetime) -> int:
    """Quarter number (1-4) of ``value``."""
    return (value.month - 1) // 3 + 1


def _truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def start_of(value: datetime, unit: CalendarUnit | str) -> datetime:
    """First instant of the ``unit`` containing ``value``."""
    unit = CalendarUnit(unit)
    if unit is CalendarUnit.MINUTE:
        return _truncate_to_minute(value)
    day_start = value.replace(hour=0, minute=0, second=0, microsecond=0)
    if unit is CalendarUnit.DAY:
        return day_start
    if unit is CalendarUnit.MONTH:
        return day_start.replace(day=1)
    if unit is CalendarUnit.QUARTER:
        return day_start.replace(month=3 * (quarter_of(value) - 1) + 1, day=1)
    return day_start.replace(month=1, day=1)


def _start_of_next(value: datetime, unit: CalendarUnit) -> datetime:
    start = start_of(value, unit)
    if unit is CalendarUnit.MINUTE:
        return start + timedelta(minutes=1)
    if unit is CalendarUnit.DAY:
        return start + timedelta(days=1)
    months = {CalendarUnit.MONTH: 1, CalendarUnit.QUARTER: 3, CalendarUnit.YEAR: 12}[unit]
    month_index = start.month - 1 + months
    return start.replace(year=start.year + month_index // 12, month=month_index % 12 + 1)


def end_of(value: datetime, unit: CalendarUnit | str) -> datetime:
    """Last instant (to the microsecond) of the ``unit`` containing ``value``.

    Values in the final unit representable by ``datetime`` (December 9999)
    have no following unit; the end is clamped to ``datetime.max``'s fields.
    """
    unit = CalendarUnit(unit)
    try:
        return _start_of_next(value, unit) - _ONE_MICROSECOND
    except (ValueError, OverflowError):
        return datetime.max.replace(tzinfo=value.tzinfo)


def is_same(a: datetime, b: datetime, unit: CalendarUnit | str) -> bool:
    """True when ``a`` and ``b`` fall in the same ``unit``.

    Larger units are always included, so two Januaries of different years are
    not the same month.
    """
    unit = CalendarUnit(unit)
    if unit is CalendarUnit.YEAR:
        return a.year == b.year
    if unit is CalendarUnit.QUARTER:
        return (a.year, quarter_of(a)) == (b.year, quarter_of(b))
    if unit is CalendarUnit.MONTH:
        return (a.year, a.month) == (b.year, b.month)
    if unit is CalendarUnit.DAY:
        return a.date() == b.date()
    return (a.date(), a.hour, a.minute) == (b.date(), b.hour, b.minute)


def is_same_minute(a: datetime, b: datetime) -> bool:
    return is_same(a, b, CalendarUnit.MINUTE)


def is_start_of(value: datetime, unit: CalendarUnit | str) -> bool:
    """True when ``value`` is the start of its ``unit``, at minute precision."""
    return is_same_minute(start_of(value, unit), value)


def is_end_of(value: datetime, unit: CalendarUnit | str) -> bool:
    """True when ``value`` is the end of its ``unit``, at minute precision.

    The end of a day is therefore any time in 23:59.
    """
    return is_same_minute(end_of(value, unit), value)
