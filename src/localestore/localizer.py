"""Localizer: the resolving object of localestore.

Combines a LocaleStore, a PluralSchemeRegistry and an active locale code.
Lookups never raise for missing data: an unknown locale or key resolves to
the key itself.

Example:
    >>> localizer = Localizer("en_CA")
    >>> localizer.get_store().merge("en_CA", {"TEXT_APPLE": ["apple", "apples"]})
    >>> localizer.resolve("TEXT_APPLE", 3)
    'apples'
    >>> localizer.resolve("TEXT_PEAR")
    'TEXT_PEAR'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from localestore.constants import DEFAULT_LOCALE_CODE
from localestore.loading import LoadSummary, LocaleSourceLoader, PathLocaleLoader
from localestore.locale_utils import (
    country_subcode,
    display_name,
    get_system_locale,
    language_subcode,
)
from localestore.plural import PluralScheme, PluralSchemeRegistry, select_bucket, select_slot
from localestore.store import LocaleStore
from localestore.types import LocaleCode, MessageKey

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


class Localizer:
    """Resolves keys to localized strings for the active locale code.

    Attributes:
        code: Active locale code (change with set_code())
    """

    __slots__ = ("_code", "_schemes", "_store")

    def __init__(
        self,
        code: LocaleCode | None = None,
        *,
        store: LocaleStore | None = None,
        schemes: PluralSchemeRegistry | None = None,
    ) -> None:
        """Initialize a Localizer.

        Args:
            code: Active locale code; None or "" keeps the default "en_CA"
            store: Existing store to resolve from (a new empty one by default)
            schemes: Existing scheme registry (a new one by default)
        """
        self._code: LocaleCode = code if code else DEFAULT_LOCALE_CODE
        self._store = store if store is not None else LocaleStore()
        self._schemes = schemes if schemes is not None else PluralSchemeRegistry()

    @classmethod
    def from_system(cls) -> Localizer:
        """Create a Localizer whose active code is the detected system locale."""
        return cls(get_system_locale())

    def __repr__(self) -> str:
        return f"Localizer(code={self._code!r}, locales={list(self._store.locales)!r})"

    # ------------------------------------------------------------------
    # Locale code accessors
    # ------------------------------------------------------------------

    @property
    def code(self) -> LocaleCode:
        """Active locale code read by every lookup."""
        return self._code

    def get_code(self) -> LocaleCode:
        """Return the active locale code."""
        return self._code

    def set_code(self, code: LocaleCode) -> None:
        """Set the active locale code used by every lookup."""
        logger.debug("Active locale changed from %s to %s", self._code, code)
        self._code = code

    @property
    def language_code(self) -> str:
        """2-letter language part of the active code ("fr" for "fr_CA")."""
        return language_subcode(self._code)

    @property
    def country_code(self) -> str:
        """2-letter country part of the active code ("CA" for "fr_CA")."""
        return country_subcode(self._code)

    @property
    def display_name(self) -> str:
        """CLDR display name of the active code, or the code if unknown."""
        return display_name(self._code)

    # ------------------------------------------------------------------
    # Store access
    # ------------------------------------------------------------------

    def get_store(self) -> LocaleStore:
        return self._store

    def get_strings(self, code: LocaleCode | None = None) -> Mapping[str, object] | None:
        """Get the strings in the store, optionally for one locale.

        Args:
            code: Locale code; None or "" returns the whole store

        Returns:
            Whole store, the locale's table, or None if the locale is unknown
        """
        if code:
            return self._store.get_for_locale(code)
        return self._store.get_all()

    def load(self, path: str | Path, loader: LocaleSourceLoader | None = None) -> LoadSummary:
        """Load locale source files from `path` into the store.

        Existing entries are kept; loaded keys overwrite same-named ones.

        Args:
            path: Directory holding one source file per locale code
            loader: Loader to use (PathLocaleLoader by default)

        Returns:
            Summary of the files attempted

        Raises:
            LocalePathError: If `path` does not exist
        """
        active_loader = loader if loader is not None else PathLocaleLoader()
        return active_loader.load_into(self._store, path)

    # ------------------------------------------------------------------
    # Plural schemes
    # ------------------------------------------------------------------

    def get_plural_scheme(self, code: LocaleCode) -> PluralScheme:
        """Scheme for `code`, or the default scheme."""
        return self._schemes.get_scheme(code)

    def set_plural_scheme(self, code: LocaleCode, scheme: Iterable[str]) -> None:
        """Register a plural scheme for `code`.

        Raises:
            InvalidPluralSchemeError: If the scheme is not three known categories
        """
        self._schemes.set_scheme(code, scheme)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, key: MessageKey, count: int = 1) -> str:
        """Get the singular, plural or other form of an entry.

        Missing locales, missing keys and empty variant lists all resolve to
        `key`. Single-form entries ignore `count`.

        Args:
            key: Lookup key
            count: How many items the string describes

        Returns:
            Localized string, or `key` when no translation is available
        """
        table = self._store.get_for_locale(self._code)
        if table is None:
            logger.debug("No strings for locale %s; returning key %r", self._code, key)
            return key

        entry = table.get(key)
        if entry is None:
            logger.debug("Key %r not found for locale %s", key, self._code)
            return key

        forms = entry.forms
        match len(forms):
            case 0:
                return key
            case 1:
                return str(forms[0])

        category = self.get_plural_scheme(self._code)[select_bucket(count)]
        return str(forms[select_slot(category, len(forms))])

    gettext = resolve
