"""Date Range Label - compact, human-friendly labels for date and time ranges.

Architecture::

    boundaries.py  Calendar predicates (start/end of year, quarter, month, day)
    locales.py     Host locale detection, locale parsing (Babel)
    renderers/     Pure datetime -> str (clock times, range labels)
    config.py      Settings from the environment
    cli.py         Command-line front end

Usage::

    from daterange_label import format_date_range

    format_date_range(datetime(2023, 1, 1), datetime(2023, 12, 31, 23, 59))  # "2023"
"""

__version__ = "0.1.0"

from daterange_label.config import Settings
from daterange_label.renderers import format_date_range, format_time
from daterange_label.schemas import DateRangeFormatOptions

__all__ = [
    "DateRangeFormatOptions",
    "Settings",
    "__version__",
    "format_date_range",
    "format_time",
]
