"""Type aliases and the string entry model.

A stored translation is either a single string or an ordered run of
grammatical variants ``(singular, plural, other)``. Loaders hand over raw
Python values; ``to_entry`` turns them into the explicit tagged form.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass

__all__ = [
    "LocaleCode",
    "MessageKey",
    "Single",
    "StringEntry",
    "Variants",
    "to_entry",
]

LocaleCode: TypeAlias = str
"""Locale code, conventionally language_COUNTRY (e.g., 'en_CA', 'fr_CA')."""

MessageKey: TypeAlias = str
"""Lookup key of a translated string (e.g., 'TEXT_HOME', 'TEXT_APPLE')."""


@dataclass(frozen=True, slots=True)
class Single:
    """Entry holding exactly one form.

    The value is usually a string. Loaders may supply other objects; they
    are kept as given and coerced with ``str()`` on resolution.
    """

    text: object

    @property
    def forms(self) -> tuple[object, ...]:
        """The entry as a one-element variant tuple."""
        return (self.text,)


@dataclass(frozen=True, slots=True)
class Variants:
    """Entry holding grammatical variants in slot order.

    Slot 0 is the singular form, slot 1 the plural form and slot 2 the
    optional "other" form. Elements past the third are kept but never
    selected.

    Attributes:
        forms: Variant strings in slot order
    """

    forms: tuple[object, ...]

    def __len__(self) -> int:
        return len(self.forms)


StringEntry: TypeAlias = Single | Variants


def to_entry(value: object) -> StringEntry:
    """Normalize a raw loader value into a StringEntry.

    Args:
        value: A string, a list/tuple of strings, or an existing entry

    Returns:
        Single for strings and unrecognized objects, Variants for sequences

    Example:
        >>> to_entry("Home")
        Single(text='Home')
        >>> to_entry(["apple", "apples"])
        Variants(forms=('apple', 'apples'))
    """
    match value:
        case Single() | Variants():
            return value
        case str():
            return Single(value)
        case list() | tuple():
            return Variants(tuple(value))
        case _:
            return Single(value)
