"""Locale source loading for LocaleStore.

Discovers one source file per locale code in a directory and merges each
into a store. The locale code is the file stem (``en_CA.json`` loads as
``en_CA``).

Supported formats:
    .json - Top-level object of key -> string or list of variant strings
    .po   - gettext catalog read with Babel; plural messages become variant
            lists in msgstr index order

Components:
    LocaleSourceLoader - Protocol for loaders used by Localizer.load()
    PathLocaleLoader - Directory-based loader
    LocaleLoadResult - Immutable result of loading one source file
    LoadSummary - Immutable aggregate of a load run

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from babel.messages.pofile import read_po

from localestore.constants import SOURCE_ENCODING, SUPPORTED_SUFFIXES
from localestore.diagnostics import Diagnostic, DiagnosticCode
from localestore.enums import LoadStatus
from localestore.errors import LocalePathError, LocaleSourceError
from localestore.types import LocaleCode, MessageKey

if TYPE_CHECKING:
    from localestore.store import LocaleStore

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LocaleSourceLoader",
    # Concrete loader
    "PathLocaleLoader",
    # Load result types
    "LocaleLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


class LocaleSourceLoader(Protocol):
    """Protocol for loaders that populate a LocaleStore from a path.

    Example:
        >>> class StaticLoader:
        ...     def load_into(self, store, path):
        ...         store.merge("en_CA", {"TEXT_HOME": "Home"})
        ...         return LoadSummary(results=())
        >>> from localestore import Localizer
        >>> Localizer().load("unused", loader=StaticLoader())
        LoadSummary(total=0, ok=0, errors=0)
    """

    def load_into(self, store: LocaleStore, path: str | Path) -> LoadSummary:
        """Merge every locale source under `path` into `store`.

        Raises:
            LocalePathError: If `path` does not exist
        """


@dataclass(frozen=True, slots=True)
class LocaleLoadResult:
    """Result of loading a single locale source file.

    Attributes:
        code: Locale code taken from the file stem
        source_path: Path of the source file
        status: Load status (success or error)
        error: Exception if status is ERROR, None otherwise
        entry_count: Number of entries merged into the store
    """

    code: LocaleCode
    source_path: str
    status: LoadStatus
    error: Exception | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the source loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the source failed to load."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of the results of one load run.

    Example:
        >>> summary = localizer.load("locales")
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.source_path}: {result.error}")
    """

    results: tuple[LocaleLoadResult, ...]

    def __repr__(self) -> str:
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of source files attempted."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def errors(self) -> int:
        """Number of failed loads."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any source failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted source loaded."""
        return self.errors == 0

    def get_errors(self) -> tuple[LocaleLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_by_locale(self, code: LocaleCode) -> tuple[LocaleLoadResult, ...]:
        """Get all results for a specific locale code."""
        return tuple(r for r in self.results if r.code == code)


def _source_error(path: Path, message: str) -> LocaleSourceError:
    diagnostic = Diagnostic(
        code=DiagnosticCode.SOURCE_INVALID,
        message=f"{path.name}: {message}",
    )
    return LocaleSourceError(diagnostic)


def _read_json(path: Path) -> dict[MessageKey, object]:
    """Parse a JSON locale source into key -> raw value."""
    try:
        data = json.loads(path.read_text(encoding=SOURCE_ENCODING))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise _source_error(path, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        msg = f"expected a JSON object, got {type(data).__name__}"
        raise _source_error(path, msg)
    return data


def _read_po(path: Path) -> dict[MessageKey, object]:
    """Parse a gettext catalog into key -> raw value.

    The header and untranslated messages are skipped. Plural messages are
    keyed by their singular msgid.
    """
    with path.open("rb") as f:
        try:
            catalog = read_po(f)
        except ValueError as e:
            raise _source_error(path, f"invalid PO catalog: {e}") from e

    entries: dict[MessageKey, object] = {}
    for message in catalog:
        if not message.id:
            continue
        if message.pluralizable:
            if any(message.string):
                entries[message.id[0]] = list(message.string)
        elif message.string:
            entries[message.id] = message.string
    return entries


_READERS = {
    ".json": _read_json,
    ".po": _read_po,
}


@dataclass(frozen=True, slots=True)
class PathLocaleLoader:
    """Loads every locale source file found directly in a directory.

    Files are visited in name order; later files overwrite colliding keys
    of the same locale. Loading is additive across calls because each file
    goes through LocaleStore.merge().

    Attributes:
        suffixes: File suffixes to pick up (subset of SUPPORTED_SUFFIXES)
    """

    suffixes: tuple[str, ...] = SUPPORTED_SUFFIXES

    def __post_init__(self) -> None:
        """Reject suffixes without a reader.

        Raises:
            ValueError: If a suffix is not supported
        """
        unknown = [s for s in self.suffixes if s not in _READERS]
        if unknown:
            msg = f"Unsupported locale source suffixes: {unknown}; supported: {list(_READERS)}"
            raise ValueError(msg)

    def discover(self, path: str | Path) -> list[Path]:
        """List locale source files under `path` in name order.

        Raises:
            LocalePathError: If `path` does not exist
        """
        stripped = str(path).rstrip("/\\")
        directory = Path(stripped)
        if not stripped or not directory.is_dir():
            diagnostic = Diagnostic(
                code=DiagnosticCode.PATH_NOT_FOUND,
                message=f"Path to locales does not exist: '{path}'",
            )
            raise LocalePathError(diagnostic)
        return sorted(
            p for p in directory.iterdir() if p.is_file() and p.suffix in self.suffixes
        )

    def load_into(self, store: LocaleStore, path: str | Path) -> LoadSummary:
        """Merge every locale source under `path` into `store`.

        Per-file failures are recorded in the summary and logged; they do
        not stop the remaining files from loading.

        Raises:
            LocalePathError: If `path` does not exist
        """
        results = [self._load_file(store, source) for source in self.discover(path)]
        return LoadSummary(results=tuple(results))

    @staticmethod
    def _load_file(store: LocaleStore, source: Path) -> LocaleLoadResult:
        code = source.stem
        try:
            entries = _READERS[source.suffix](source)
        except (OSError, LocaleSourceError) as e:
            logger.warning("Failed to load locale source %s: %s", source, e)
            return LocaleLoadResult(
                code=code,
                source_path=str(source),
                status=LoadStatus.ERROR,
                error=e,
            )

        store.merge(code, entries)
        logger.info("Loaded %d entries for %s from %s", len(entries), code, source.name)
        return LocaleLoadResult(
            code=code,
            source_path=str(source),
            status=LoadStatus.SUCCESS,
            entry_count=len(entries),
        )
