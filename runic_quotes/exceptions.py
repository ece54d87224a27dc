"""
Project-wide custom exception hierarchy.
All modules raise subclasses of RunicQuotesError — never bare Exception.
The transliteration engine is total and raises nothing.
"""

from typing import Optional

__all__ = [
    "RunicQuotesError",
    "QuoteStoreError",
    "SeedDataUnavailable",
    "InvalidSeedData",
    "NoQuotesAvailable",
    "QuoteNotFound",
    "PersistenceError",
    "PreferencesError",
    "IncompatibleFontError",
]


class RunicQuotesError(Exception):
    """Root exception for all runic-quotes errors."""


# ── Quote store ───────────────────────────────────────────────────────────────

class QuoteStoreError(RunicQuotesError):
    """Base class for errors surfaced by the quote repository."""


class SeedDataUnavailable(QuoteStoreError):
    """Raised when the seed corpus cannot be found or read."""


class InvalidSeedData(SeedDataUnavailable):
    """Raised when the seed corpus exists but is malformed."""


class NoQuotesAvailable(QuoteStoreError):
    """Raised when a selection is requested from an empty store or collection."""


class QuoteNotFound(QuoteStoreError):
    """Raised when no stored quote has the requested id."""


class PersistenceError(QuoteStoreError):
    """
    Opaque wrapper around an underlying store read/write failure.

    The original exception is kept on ``cause`` (and chained via ``from``).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is None:
            return base
        return f"{base}: {self.cause}"


# ── Preferences ───────────────────────────────────────────────────────────────

class PreferencesError(RunicQuotesError):
    """Base class for invalid preference changes."""


class IncompatibleFontError(PreferencesError):
    """Raised when a font cannot render the selected script."""
