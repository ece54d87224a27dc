"""
runic-quotes — daily quotes transliterated into runic scripts.

Public API
──────────
transliterate / transliterate_all — pure Latin → runic conversion
Script                            — Elder Futhark, Younger Futhark, Cirth
QuoteRepository                   — seeding, quote of the day, random quote
SeedingCoordinator                — single-flight wrapper around seeding
SQLiteQuoteStore / InMemoryQuoteStore — store adapters
AppConfig                         — database + corpus locations
"""

__version__ = "0.1.0"

from runic_quotes.exceptions import (
    IncompatibleFontError,
    InvalidSeedData,
    NoQuotesAvailable,
    PersistenceError,
    PreferencesError,
    QuoteNotFound,
    QuoteStoreError,
    RunicQuotesError,
    SeedDataUnavailable,
)
from runic_quotes.transliteration import Script, transliterate, transliterate_all
from runic_quotes.preferences import Preferences
from runic_quotes.quotes.models import Quote, QuoteCollection, QuoteRecord
from runic_quotes.quotes.base import AbstractQuoteStore
from runic_quotes.quotes.db import SQLiteQuoteStore
from runic_quotes.quotes.memory import InMemoryQuoteStore
from runic_quotes.quotes.repository import QuoteRepository
from runic_quotes.quotes.coordinator import SeedingCoordinator
from runic_quotes.config import AppConfig

__all__ = [
    "__version__",
    "AbstractQuoteStore",
    "AppConfig",
    "IncompatibleFontError",
    "InMemoryQuoteStore",
    "InvalidSeedData",
    "NoQuotesAvailable",
    "PersistenceError",
    "Preferences",
    "PreferencesError",
    "Quote",
    "QuoteCollection",
    "QuoteNotFound",
    "QuoteRecord",
    "QuoteRepository",
    "QuoteStoreError",
    "RunicQuotesError",
    "SQLiteQuoteStore",
    "Script",
    "SeedDataUnavailable",
    "SeedingCoordinator",
    "transliterate",
    "transliterate_all",
]
