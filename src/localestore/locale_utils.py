"""Locale code utilities.

Locale codes are plain strings, conventionally ``language_COUNTRY``. The
subcode helpers slice fixed offsets and never validate: a malformed code
yields whatever the slice produces. Display names come from Babel's CLDR
data.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from localestore.constants import FALLBACK_SYSTEM_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "country_subcode",
    "display_name",
    "get_babel_locale",
    "get_system_locale",
    "language_subcode",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def language_subcode(code: str) -> str:
    """Return the 2-letter language part of a locale code.

    Example:
        >>> language_subcode("fr_CA")
        'fr'
    """
    return code[0:2]


def country_subcode(code: str) -> str:
    """Return the 2-letter country part of a locale code.

    Example:
        >>> country_subcode("fr_CA")
        'CA'
        >>> country_subcode("fr")
        ''
    """
    return code[3:5]


def normalize_locale(code: str) -> str:
    """Convert a BCP-47 code to the POSIX form Babel expects.

    Example:
        >>> normalize_locale("en-CA")
        'en_CA'
    """
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(code))


def display_name(code: str, display_locale: str | None = None) -> str:
    """Human-readable name of a locale, falling back to the code itself.

    Args:
        code: Locale code to describe
        display_locale: Locale to write the name in (defaults to `code`)

    Returns:
        CLDR display name, e.g. "français (Canada)" for "fr_CA"
    """
    failed = code
    try:
        locale_obj = get_babel_locale(code)
        target = locale_obj
        if display_locale:
            failed = display_locale
            target = get_babel_locale(display_locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.warning("Unknown locale '%s': %s", failed, e)
        return code
    return locale_obj.get_display_name(target) or code


def get_system_locale() -> str:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable
    3. LC_MESSAGES environment variable
    4. LANG environment variable

    Encoding suffixes are stripped and "C"/"POSIX" pseudo-locales ignored.

    Returns:
        Detected code in POSIX form, or the default locale code
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            system_locale = system_locale.split(".")[0]
            if system_locale not in ("C", "POSIX"):
                return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "").split(".")[0]
        if value and value not in ("C", "POSIX"):
            return normalize_locale(value)

    return FALLBACK_SYSTEM_LOCALE
