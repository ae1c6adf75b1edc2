"""Diagnostic codes and structured error messages.

Errors raised by localestore carry a Diagnostic so callers and log
aggregation get a stable code alongside the human-readable text.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Plural scheme errors
        2000-2999: Loading errors
    """

    # Plural scheme errors (1000-1999)
    SCHEME_LENGTH = 1001
    SCHEME_CATEGORY = 1002

    # Loading errors (2000-2999)
    PATH_NOT_FOUND = 2001
    SOURCE_INVALID = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Error code
        message: Primary error message
        hint: Suggestion for fixing the problem (optional)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def format_error(self) -> str:
        """Format as a single-line error string.

        Example:
            >>> Diagnostic(DiagnosticCode.SCHEME_LENGTH, "bad length").format_error()
            'error[SCHEME_LENGTH]: bad length'
        """
        text = f"error[{self.code.name}]: {self.message}"
        if self.hint:
            text = f"{text} (hint: {self.hint})"
        return text
