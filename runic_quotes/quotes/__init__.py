"""
quotes — quote entities, the seed corpus and the persistence layer.

Public API
──────────
QuoteCollection   — curated collection tags (ALL is a filter only)
Quote             — mutable store entity with a per-script runic cache
QuoteRecord       — immutable snapshot returned to callers
SeedQuote         — one seed corpus entry
load_seed_corpus  — read the bundled (or a custom) corpus file

Store adapters, QuoteRepository and SeedingCoordinator live in their own
submodules (base, db, memory, repository, coordinator) and are re-exported
from the top-level ``runic_quotes`` package.
"""

from runic_quotes.quotes.models import DEFAULT_COLLECTION, Quote, QuoteCollection, QuoteRecord
from runic_quotes.quotes.corpus import (
    DEFAULT_CORPUS_PATH,
    SeedQuote,
    load_seed_corpus,
    parse_seed_corpus,
)

__all__ = [
    "DEFAULT_COLLECTION",
    "DEFAULT_CORPUS_PATH",
    "Quote",
    "QuoteCollection",
    "QuoteRecord",
    "SeedQuote",
    "load_seed_corpus",
    "parse_seed_corpus",
]
