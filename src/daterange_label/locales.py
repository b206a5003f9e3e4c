"""Locale detection and parsing.

Locales are resolved leniently: unknown identifiers fall back rather than
raise.  The host locale is read from the process environment (``LC_TIME``,
``LANGUAGE``, ``LC_ALL``, ``LC_CTYPE``, ``LANG``; first one set wins) through
Babel.  Headless hosts with no locale, or only the ``C``/``POSIX`` locale, get
``Settings.fallback_locale``.
"""

from __future__ import annotations

import logging

from babel import Locale, UnknownLocaleError, default_locale

from daterange_label.config import get_settings

logger = logging.getLogger(__name__)

# What Babel reports for the C/POSIX locale
_POSIX_LOCALE = "en_US_POSIX"


def detect_locale() -> str:
    """Return the host's time-formatting locale identifier, or the fallback."""
    detected = default_locale("LC_TIME")
    if not detected or detected == _POSIX_LOCALE:
        fallback = get_settings().fallback_locale
        logger.debug("No host locale detected, using %s", fallback)
        return fallback
    return detected


def parse_locale(identifier: str | Locale) -> Locale:
    """Parse a POSIX (``en_US``) or BCP 47 (``en-US``) identifier into a Babel ``Locale``.

    Raises:
        babel.UnknownLocaleError: No locale data exists for the identifier.
        ValueError: The identifier is malformed.
    """
    if isinstance(identifier, Locale):
        return identifier
    sep = "-" if "-" in identifier else "_"
    return Locale.parse(identifier, sep=sep)


def resolve_locale(identifier: str | Locale) -> Locale:
    """Parse ``identifier``, falling back instead of failing.

    An identifier without locale data (``en-XX``) falls back to its language
    (``en``), then to ``Settings.fallback_locale``.  Malformed identifiers go
    straight to the fallback.
    """
    try:
        return parse_locale(identifier)
    except (UnknownLocaleError, ValueError):
        pass
    language = str(identifier).replace("-", "_").split("_")[0]
    if language:
        try:
            resolved = Locale.parse(language)
        except (UnknownLocaleError, ValueError):
            pass
        else:
            logger.debug("No locale data for %s, using %s", identifier, resolved)
            return resolved
    fallback = get_settings().fallback_locale
    logger.debug("No locale data for %s, using %s", identifier, fallback)
    return parse_locale(fallback)
