"""Enumerations for localestore type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion, so
``PluralCategory.PLURAL == "plural"`` holds and schemes may be written with
plain strings.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class PluralCategory(StrEnum):
    """Grammatical category a plural scheme assigns to a count bucket."""

    SINGULAR = "singular"
    """Reads variant slot 0."""

    PLURAL = "plural"
    """Reads variant slot 1."""

    OTHER = "other"
    """Reads variant slot 2 when present, else slot 0."""


class CountBucket(IntEnum):
    """Index into a plural scheme selected by a count."""

    ZERO = 0
    ONE = 1
    MANY = 2


class LoadStatus(StrEnum):
    """Outcome of loading one locale source file."""

    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "CountBucket",
    "LoadStatus",
    "PluralCategory",
]
