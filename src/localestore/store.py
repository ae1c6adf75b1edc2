"""In-memory store of per-locale string tables.

The store maps a locale code to a table of ``key -> StringEntry``. Tables
only ever grow: merging adds new keys and overwrites colliding ones, and
nothing is removed for the lifetime of the store.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from localestore.types import LocaleCode, MessageKey, StringEntry, to_entry

__all__ = ["LocaleStore"]

logger = logging.getLogger(__name__)


class LocaleStore:
    """String tables keyed by locale code.

    Example:
        >>> store = LocaleStore()
        >>> store.merge("en_CA", {"TEXT_HOME": "Home"})
        >>> store.merge("en_CA", {"TEXT_APPLE": ["apple", "apples"]})
        >>> sorted(store.get_for_locale("en_CA"))
        ['TEXT_APPLE', 'TEXT_HOME']
        >>> store.get_for_locale("fr_CA") is None
        True
    """

    __slots__ = ("_tables",)

    def __init__(self) -> None:
        self._tables: dict[LocaleCode, dict[MessageKey, StringEntry]] = {}

    def __contains__(self, code: object) -> bool:
        return code in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._tables)

    def __repr__(self) -> str:
        return f"LocaleStore(locales={list(self._tables)!r})"

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Registered locale codes in registration order."""
        return tuple(self._tables)

    def merge(self, code: LocaleCode, new_entries: Mapping[MessageKey, object]) -> None:
        """Union `new_entries` into the table for `code`.

        Creates the table if absent. Values in `new_entries` overwrite
        existing values of the same key; other keys are left untouched.
        Values are normalized with to_entry(), so malformed shapes are
        stored rather than rejected.

        Args:
            code: Locale code
            new_entries: Mapping of key to string or list of variant strings
        """
        table = self._tables.setdefault(code, {})
        for key, value in new_entries.items():
            table[key] = to_entry(value)
        logger.debug("Merged %d entries into %s (%d total)", len(new_entries), code, len(table))

    def get_all(self) -> Mapping[LocaleCode, Mapping[MessageKey, StringEntry]]:
        """Read-only view of the whole store (code -> key -> entry)."""
        return MappingProxyType(
            {code: MappingProxyType(table) for code, table in self._tables.items()}
        )

    def get_for_locale(self, code: LocaleCode) -> Mapping[MessageKey, StringEntry] | None:
        """Table for `code`, or None if the locale was never merged.

        A registered locale with no entries returns an empty mapping, so the
        two cases stay distinguishable.
        """
        table = self._tables.get(code)
        if table is None:
            return None
        return MappingProxyType(table)

    def get(self, code: LocaleCode, key: MessageKey) -> StringEntry | None:
        """Entry for `key` in `code`, or None if either is missing."""
        table = self._tables.get(code)
        if table is None:
            return None
        return table.get(key)
