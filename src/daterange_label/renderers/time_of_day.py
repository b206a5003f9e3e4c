"""Short clock-time rendering.

``format_time`` renders an instant's time with the locale's short CLDR
pattern (two-digit hour), then shortens it for compact labels:

    02:00 PM  ->  2pm
    09:30 AM  ->  9:30am
    14:00     ->  14:00      (24-hour locales keep their minutes)
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from babel import Locale
from babel.dates import format_time as babel_format_time

from daterange_label.locales import detect_locale, resolve_locale

# Quoted literals in an LDML pattern, e.g. 'h' in "HH 'h' mm"
_QUOTED = re.compile(r"('[^']*')")
# A single-letter hour field
_SHORT_HOUR = re.compile(r"(?<![hHkK])([hHkK])(?![hHkK])")

# CLDR separates the day period with a (narrow) no-break space in newer data
_NBSP = str.maketrans({"\u202f": " ", "\u00a0": " "})


def two_digit_hour_pattern(pattern: str) -> str:
    """Widen single-letter hour fields (``h``, ``H``, ``k``, ``K``) to two digits."""
    parts = _QUOTED.split(pattern)
    return "".join(
        part if part.startswith("'") else _SHORT_HOUR.sub(r"\1\1", part) for part in parts
    )


def shorten_am_pm(text: str) -> str:
    """``"2:00 PM"`` -> ``"2pm"``; leaves ``":00"`` alone without an am/pm marker."""
    shortened = (text or "").replace(" AM", "am").replace(" PM", "pm")
    if "m" in shortened:
        return shortened.replace(":00", "")
    return shortened


def remove_leading_zero(text: str) -> str:
    # Blind prefix strip, not numeric
    return text[1:] if text.startswith("0") else text


def _render_clock(value: datetime, locale: Locale) -> str:
    pattern = two_digit_hour_pattern(locale.time_formats["short"].pattern)
    return babel_format_time(value, format=pattern, locale=locale).translate(_NBSP)


def format_time(value: datetime, locale: str | Locale | None = None) -> str:
    """Render the clock time of ``value`` as a short label like ``"2pm"`` or ``"9:30am"``.

    Args:
        value: Instant to render; its wall-clock time is used as is.
        locale: Locale identifier (``en-US`` or ``en_US``). Detected from the
            host when omitted; identifiers without locale data fall back to
            their language, then to ``Settings.fallback_locale``.
    """
    resolved = resolve_locale(locale if locale is not None else detect_locale())
    return remove_leading_zero(shorten_am_pm(_render_clock(value, resolved)))


def make_time_formatter(locale: str | Locale | None = None) -> Callable[[datetime], str]:
    """Return ``format_time`` bound to one locale.

    The locale is resolved on first use, so a formatter that never renders a
    time never touches locale data.
    """
    resolved: list[Locale] = []

    def _format(value: datetime) -> str:
        if not resolved:
            resolved.append(resolve_locale(locale if locale is not None else detect_locale()))
        return format_time(value, resolved[0])

    return _format
