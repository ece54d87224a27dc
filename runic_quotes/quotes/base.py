"""Abstract base class for quote store adapters."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from runic_quotes.preferences.models import Preferences

from .models import Quote

__all__ = ["AbstractQuoteStore"]


class AbstractQuoteStore(ABC):
    """
    Minimal record-store contract consumed by QuoteRepository.

    Mutations (insert / update / put_preferences) are queued and become
    visible to other readers only after save().  The queue belongs to the
    calling thread: save() and rollback() only ever touch the batch that
    thread built, so one caller cannot commit or discard another's writes.
    Implementations must be safe to share between threads and must raise
    PersistenceError (with the underlying exception attached) on any
    read/write failure.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _pending(self) -> list[tuple[str, object]]:
        """The calling thread's queue of (operation, object) pairs."""
        pending = getattr(self._local, "pending", None)
        if pending is None:
            pending = self._local.pending = []
        return pending

    def _take_pending(self) -> list[tuple[str, object]]:
        """Remove and return the calling thread's queued batch."""
        batch = self._pending()
        self._local.pending = []
        return batch

    @abstractmethod
    def fetch_all(self) -> list[Quote]:
        """
        Return every committed quote ordered by created_at ascending,
        ties broken by insertion order.  Returned objects are detached
        copies; changing them has no effect until update() + save().
        """

    @abstractmethod
    def insert(self, quote: Quote) -> None:
        """Queue *quote* for insertion."""

    @abstractmethod
    def update(self, quote: Quote) -> None:
        """Queue the collection tag and cached transliterations of *quote* to be written."""

    @abstractmethod
    def save(self, if_empty: bool = False) -> bool:
        """
        Commit the calling thread's queued mutations as one atomic batch.

        With *if_empty* set, the batch is discarded (and False returned)
        when the store already holds at least one quote at commit time;
        the check and the write happen under the same write lock.

        Returns True if the batch was committed.
        """

    @abstractmethod
    def rollback(self) -> None:
        """Discard the calling thread's queued mutations."""

    @abstractmethod
    def get_or_create_preferences(self) -> Preferences:
        """Return the singleton preferences, creating and committing defaults if absent."""

    @abstractmethod
    def put_preferences(self, preferences: Preferences) -> None:
        """Queue *preferences* to replace the stored singleton (last writer wins)."""
