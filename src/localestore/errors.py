"""localestore exception hierarchy.

Hierarchy:
    LocaleError (base)
    ├─ InvalidPluralSchemeError (also ValueError)
    ├─ LocalePathError (also FileNotFoundError)
    └─ LocaleSourceError (also ValueError)

Missing translations are deliberately absent from this hierarchy: an
unknown locale or key resolves to the key itself.

Python 3.13+. Zero external dependencies.
"""

from .diagnostics import Diagnostic

__all__ = [
    "InvalidPluralSchemeError",
    "LocaleError",
    "LocalePathError",
    "LocaleSourceError",
]


class LocaleError(Exception):
    """Base exception for all localestore errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidPluralSchemeError(LocaleError, ValueError):
    """Plural scheme is not three known categories.

    Raised by PluralSchemeRegistry.set_scheme(); the registry is left
    unmodified.
    """


class LocalePathError(LocaleError, FileNotFoundError):
    """Directory of locale sources does not exist."""


class LocaleSourceError(LocaleError, ValueError):
    """A locale source file could not be turned into string entries."""
