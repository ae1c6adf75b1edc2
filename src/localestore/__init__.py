"""localestore - in-memory localization store with simple plural forms.

Loads per-locale string tables (one source file per locale code) and
resolves keys to localized strings, choosing between singular, plural and
"other" forms from a count and a per-locale plural scheme.

Public API:
    Localizer - Active locale code, lookups, plural schemes, loading
    LocaleStore - Per-locale string tables
    PluralSchemeRegistry - Per-locale plural schemes with a default
    PathLocaleLoader - Directory loader for .json and .po sources
    PluralCategory - singular / plural / other

Exceptions:
    LocaleError - Base exception class
    InvalidPluralSchemeError - Rejected plural scheme
    LocalePathError - Missing locale directory
    LocaleSourceError - Unusable locale source file

Submodules:
    localestore.types - LocaleCode, MessageKey, Single, Variants, to_entry
    localestore.plural - select_bucket, select_slot
    localestore.locale_utils - Subcodes, display names, system locale
    localestore.loading - Loader protocol and load results
"""

from .enums import PluralCategory
from .errors import (
    InvalidPluralSchemeError,
    LocaleError,
    LocalePathError,
    LocaleSourceError,
)
from .loading import LoadSummary, PathLocaleLoader
from .localizer import Localizer
from .plural import PluralSchemeRegistry
from .store import LocaleStore

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localestore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidPluralSchemeError",
    "LoadSummary",
    "LocaleError",
    "LocalePathError",
    "LocaleSourceError",
    "LocaleStore",
    "Localizer",
    "PathLocaleLoader",
    "PluralCategory",
    "PluralSchemeRegistry",
    "__version__",
]
