"""Shared constants for localestore.

Single source of truth for defaults used by the store, the plural scheme
registry and the directory loader. Placing them here avoids circular
imports between those modules.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE_CODE",
    "FALLBACK_SYSTEM_LOCALE",
    # Plural schemes
    "DEFAULT_SCHEME_KEY",
    "DEFAULT_PLURAL_SCHEME",
    "PLURAL_CATEGORIES",
    "SCHEME_LENGTH",
    # Loading
    "SUPPORTED_SUFFIXES",
    "SOURCE_ENCODING",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE_CODE: str = "en_CA"
"""Active locale code of a freshly constructed Localizer."""

FALLBACK_SYSTEM_LOCALE: str = DEFAULT_LOCALE_CODE
"""Returned by get_system_locale() when nothing can be detected."""

# ============================================================================
# PLURAL SCHEMES
# ============================================================================
#
# A scheme names the grammatical category used for each count bucket:
#
#   | 0       | 1        | 2+      |
#   +---------+----------+---------+
#   | plural  | singular | plural  |
#
# The default above yields "apples" for 0 and 3, "apple" for 1.

DEFAULT_SCHEME_KEY: str = "default"

DEFAULT_PLURAL_SCHEME: tuple[str, str, str] = ("plural", "singular", "plural")

PLURAL_CATEGORIES: frozenset[str] = frozenset({"singular", "plural", "other"})

SCHEME_LENGTH: int = 3

# ============================================================================
# LOADING
# ============================================================================

SUPPORTED_SUFFIXES: tuple[str, ...] = (".json", ".po")
"""File suffixes PathLocaleLoader picks up, one file per locale code."""

SOURCE_ENCODING: str = "utf-8"

# ============================================================================
# CACHE LIMITS
# ============================================================================

MAX_LOCALE_CACHE_SIZE: int = 128
"""Maximum number of parsed Babel Locale objects kept by get_babel_locale()."""
