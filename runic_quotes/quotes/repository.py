"""
QuoteRepository — seeding, quote-of-the-day and random selection.

The repository is the only component that writes to a quote store.  Every
selection returns an immutable QuoteRecord whose transliteration for the
requested script is guaranteed to be present (computed and persisted on the
fly when the store lacks it).

Usage::

    repo = QuoteRepository(SQLiteQuoteStore("~/.runic-quotes/quotes.db"))
    repo.seed_if_needed()
    today = repo.quote_of_the_day(Script.ELDER)
    print(today.runic_text(Script.ELDER), "—", today.author)
"""

import logging
import random
import unicodedata
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional

from runic_quotes.exceptions import NoQuotesAvailable, PersistenceError
from runic_quotes.preferences.models import Preferences
from runic_quotes.transliteration.engine import transliterate, transliterate_all
from runic_quotes.transliteration.models import Script

from .base import AbstractQuoteStore
from .corpus import SeedQuote, load_seed_corpus
from .models import Quote, QuoteCollection, QuoteRecord

__all__ = ["QuoteRepository", "days_since_epoch"]

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def days_since_epoch(day: Optional[date] = None) -> int:
    """
    Whole days elapsed from the Unix epoch to the start of *day* in local time.

    *day* defaults to today.  The result only changes at local midnight, so
    every call within one local day yields the same value.
    """
    day = day or date.today()
    local_midnight = datetime.combine(day, time.min).astimezone()
    return (local_midnight - _EPOCH).days


def _normalize(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold().strip()


def _seed_key(text: str, author: str) -> tuple[str, str]:
    return _normalize(text), _normalize(author)


class QuoteRepository:
    """
    Quote store operations exposed to callers.

    Args:
        store:         AbstractQuoteStore adapter holding quotes + preferences.
        corpus_loader: Zero-argument callable returning the ordered seed corpus.
                       Defaults to the bundled quotes.json.
        rng:           random.Random used by random_quote() (seedable in tests).
    """

    def __init__(
        self,
        store: AbstractQuoteStore,
        corpus_loader: Callable[[], list[SeedQuote]] = load_seed_corpus,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._store = store
        self._corpus_loader = corpus_loader
        self._rng = rng or random.Random()

    @property
    def store(self) -> AbstractQuoteStore:
        return self._store

    # ── Seeding ───────────────────────────────────────────────────────────

    def seed_if_needed(self) -> int:
        """
        Populate an empty store from the seed corpus.

        When the store already holds quotes nothing is inserted; existing
        quotes with a missing or unknown collection tag are re-tagged from the
        corpus instead (see backfill_collections()).  Each seeded quote has
        all scripts precomputed.  The batch commits only if the store is
        still empty at commit time, so a concurrent seeder in another
        process cannot produce duplicates.

        Returns:
            Number of quotes inserted (0 when nothing was done).

        Raises:
            SeedDataUnavailable: corpus missing or malformed (nothing written).
            PersistenceError:    the batch could not be committed.
        """
        existing = self._store.fetch_all()
        if existing:
            self.backfill_collections(existing)
            logger.info("Database already seeded with %d quotes", len(existing))
            return 0

        logger.info("Seeding database with quotes...")
        corpus = self._corpus_loader()

        # Strictly increasing timestamps keep corpus order stable.
        started = datetime.now(tz=timezone.utc)
        try:
            for offset, entry in enumerate(corpus):
                self._store.insert(Quote(
                    text_latin=entry.text_latin,
                    author=entry.author,
                    collection=entry.collection,
                    runic=transliterate_all(entry.text_latin),
                    created_at=started + timedelta(microseconds=offset),
                ))
            committed = self._store.save(if_empty=True)
        except PersistenceError:
            self._store.rollback()
            raise

        if not committed:
            logger.info("Another writer seeded the database first")
            return 0
        logger.info("Database seeded with %d quotes", len(corpus))
        return len(corpus)

    def backfill_collections(self, quotes: Optional[list[Quote]] = None) -> int:
        """
        Re-tag stored quotes whose collection is missing or unknown.

        Each such quote is matched to a corpus entry by text and author,
        ignoring case, diacritics and surrounding whitespace, and takes that
        entry's collection.  Unmatched quotes keep the fallback tag.  The
        corpus is only loaded, and the store only written, when at least
        one quote needs re-tagging.

        Returns:
            Number of quotes re-tagged.
        """
        if quotes is None:
            quotes = self._store.fetch_all()
        untagged = [q for q in quotes if not q.collection_known]
        if not untagged:
            return 0

        by_key = {
            _seed_key(entry.text_latin, entry.author): entry.collection
            for entry in self._corpus_loader()
        }
        updated = 0
        try:
            for quote in untagged:
                collection = by_key.get(_seed_key(quote.text_latin, quote.author))
                if collection is None:
                    continue
                quote.collection = collection
                quote.collection_known = True
                self._store.update(quote)
                updated += 1
            if updated:
                self._store.save()
        except PersistenceError:
            self._store.rollback()
            raise

        if updated:
            logger.info("Backfilled collection tags for %d existing quotes", updated)
        return updated

    # ── Quote retrieval ───────────────────────────────────────────────────

    def quote_of_the_day(
        self,
        script: Script,
        collection: QuoteCollection = QuoteCollection.ALL,
        day: Optional[date] = None,
    ) -> QuoteRecord:
        """
        Deterministic daily quote: index ``days_since_epoch(day) % count``
        over the quotes of *collection* in creation order.

        Raises:
            NoQuotesAvailable: the store (or collection) is empty.
            PersistenceError:  read or backfill write failed.
        """
        quotes = self._fetch(collection)
        quote = quotes[days_since_epoch(day) % len(quotes)]
        self._ensure_transliteration(quote, script)
        return QuoteRecord.from_quote(quote)

    def random_quote(
        self,
        script: Script,
        collection: QuoteCollection = QuoteCollection.ALL,
    ) -> QuoteRecord:
        """Uniformly random quote of *collection*; same errors as quote_of_the_day()."""
        quotes = self._fetch(collection)
        quote = quotes[self._rng.randrange(len(quotes))]
        self._ensure_transliteration(quote, script)
        return QuoteRecord.from_quote(quote)

    def all_quotes(self, collection: QuoteCollection = QuoteCollection.ALL) -> list[QuoteRecord]:
        """Every quote of *collection* in creation order; no backfill."""
        return [
            QuoteRecord.from_quote(q)
            for q in self._store.fetch_all()
            if collection.contains(q)
        ]

    def _fetch(self, collection: QuoteCollection) -> list[Quote]:
        quotes = [q for q in self._store.fetch_all() if collection.contains(q)]
        if not quotes:
            if collection is QuoteCollection.ALL:
                raise NoQuotesAvailable("No quotes available in the database")
            raise NoQuotesAvailable(
                f"No quotes available in the {collection.display_name} collection"
            )
        return quotes

    def _ensure_transliteration(self, quote: Quote, script: Script) -> None:
        """Compute and persist the *script* cache entry if it is missing."""
        if quote.runic_text(script) is not None:
            return
        quote.set_runic_text(script, transliterate(quote.text_latin, script))
        logger.debug("Backfilling %s transliteration for quote %s", script.value, quote.id)
        try:
            self._store.update(quote)
            self._store.save()
        except PersistenceError:
            self._store.rollback()
            raise

    # ── Preferences ───────────────────────────────────────────────────────

    def load_preferences(self) -> Preferences:
        """Return the stored preferences, creating defaults on first access."""
        return self._store.get_or_create_preferences()

    def save_preferences(self, preferences: Preferences) -> None:
        try:
            self._store.put_preferences(preferences)
            self._store.save()
        except PersistenceError:
            self._store.rollback()
            raise

    def toggle_saved_quote(self, quote_id: str) -> bool:
        """Flip the saved state of *quote_id* and persist it; return the new state."""
        preferences = self.load_preferences()
        saved = preferences.toggle_saved_quote(quote_id)
        self.save_preferences(preferences)
        return saved

    def saved_quotes(self) -> list[QuoteRecord]:
        """Saved quotes in creation order; ids without a matching quote are ignored."""
        saved_ids = self.load_preferences().saved_quote_ids
        return [q for q in self.all_quotes() if q.id in saved_ids]
