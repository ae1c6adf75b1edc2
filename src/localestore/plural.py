"""Plural scheme registry and variant selection.

A plural scheme is a triple of categories for the zero, one and many count
buckets. Categories map to FIXED variant slots:

    | category | slot                  |
    +----------+-----------------------+
    | singular | 0                     |
    | plural   | 1                     |
    | other    | 2 if present, else 0  |

The slot never depends on the count itself; only the scheme does.

Python 3.13+.
"""

from __future__ import annotations

from typing import TypeAlias

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from localestore.constants import (
    DEFAULT_PLURAL_SCHEME,
    DEFAULT_SCHEME_KEY,
    PLURAL_CATEGORIES,
    SCHEME_LENGTH,
)
from localestore.diagnostics import Diagnostic, DiagnosticCode
from localestore.enums import CountBucket, PluralCategory
from localestore.errors import InvalidPluralSchemeError
from localestore.types import LocaleCode

__all__ = [
    "PluralScheme",
    "PluralSchemeRegistry",
    "select_bucket",
    "select_slot",
]

logger = logging.getLogger(__name__)

PluralScheme: TypeAlias = tuple[PluralCategory, PluralCategory, PluralCategory]


def select_bucket(count: int) -> CountBucket:
    """Map a count to its scheme bucket.

    Examples:
        >>> select_bucket(1)
        <CountBucket.ONE: 1>
        >>> select_bucket(0)
        <CountBucket.ZERO: 0>
        >>> select_bucket(-1)
        <CountBucket.MANY: 2>
    """
    match count:
        case 1:
            return CountBucket.ONE
        case 0:
            return CountBucket.ZERO
        case _:
            return CountBucket.MANY


def select_slot(category: str, size: int) -> int:
    """Return the variant slot a category reads from an entry of `size` forms.

    Unrecognized categories read the singular slot, as does "other" when the
    entry has no third form.
    """
    match category:
        case PluralCategory.PLURAL:
            return 1
        case PluralCategory.OTHER if size > 2:
            return 2
        case _:
            return 0


def _validate_scheme(code: LocaleCode, scheme: Iterable[str]) -> PluralScheme:
    """Check a candidate scheme and convert it to PluralCategory members.

    Raises:
        InvalidPluralSchemeError: Wrong length or unknown category
    """
    items = tuple(scheme)
    if len(items) != SCHEME_LENGTH:
        diagnostic = Diagnostic(
            code=DiagnosticCode.SCHEME_LENGTH,
            message=(
                f"Plural scheme for '{code}' must have {SCHEME_LENGTH} elements, "
                f"got {len(items)}"
            ),
            hint="give the categories for the 0, 1 and 2+ buckets",
        )
        raise InvalidPluralSchemeError(diagnostic)

    for item in items:
        if not isinstance(item, str) or item not in PLURAL_CATEGORIES:
            diagnostic = Diagnostic(
                code=DiagnosticCode.SCHEME_CATEGORY,
                message=f"Unknown plural category {item!r} in scheme for '{code}'",
                hint="each element must be one of singular, plural or other",
            )
            raise InvalidPluralSchemeError(diagnostic)

    first, second, third = (PluralCategory(item) for item in items)
    return (first, second, third)


class PluralSchemeRegistry:
    """Per-locale plural schemes with a mandatory default.

    Example:
        >>> registry = PluralSchemeRegistry()
        >>> registry.set_scheme("fr_CA", ["singular", "singular", "plural"])
        >>> registry.get_scheme("fr_CA")[0]
        <PluralCategory.SINGULAR: 'singular'>
        >>> registry.get_scheme("de_DE") == registry.get_scheme("default")
        True
    """

    __slots__ = ("_schemes",)

    def __init__(self, schemes: Mapping[LocaleCode, Iterable[str]] | None = None) -> None:
        """Initialize with the built-in default scheme.

        Args:
            schemes: Optional initial overrides, validated like set_scheme()

        Raises:
            InvalidPluralSchemeError: If an initial override is invalid
        """
        self._schemes: dict[LocaleCode, PluralScheme] = {
            DEFAULT_SCHEME_KEY: _validate_scheme(DEFAULT_SCHEME_KEY, DEFAULT_PLURAL_SCHEME),
        }
        if schemes:
            for code, scheme in schemes.items():
                self.set_scheme(code, scheme)

    def __contains__(self, code: object) -> bool:
        return code in self._schemes

    def __repr__(self) -> str:
        return f"PluralSchemeRegistry(codes={list(self._schemes)!r})"

    @property
    def schemes(self) -> Mapping[LocaleCode, PluralScheme]:
        """Read-only view of every registered scheme, default included."""
        return MappingProxyType(self._schemes)

    def get_scheme(self, code: LocaleCode) -> PluralScheme:
        """Scheme registered for `code`, else the default scheme."""
        return self._schemes.get(code, self._schemes[DEFAULT_SCHEME_KEY])

    def set_scheme(self, code: LocaleCode, scheme: Iterable[str]) -> None:
        """Register a scheme for `code`, replacing any previous one.

        Registering under "default" replaces the default scheme.

        Args:
            code: Locale code (or "default")
            scheme: Categories for the 0, 1 and 2+ buckets

        Raises:
            InvalidPluralSchemeError: If the scheme does not have exactly
                three elements drawn from singular/plural/other
        """
        validated = _validate_scheme(code, scheme)
        self._schemes[code] = validated
        logger.debug("Registered plural scheme for %s: %s", code, validated)
