"""In-memory AbstractQuoteStore, for previews and tests."""

import copy
import threading
from typing import Optional

from runic_quotes.preferences.models import Preferences

from .base import AbstractQuoteStore
from .models import Quote

__all__ = ["InMemoryQuoteStore"]


class InMemoryQuoteStore(AbstractQuoteStore):
    """
    Process-local store with the same commit semantics as SQLiteQuoteStore.

    Committed state is guarded by one lock, so the if_empty check and the
    batch write are atomic with respect to other threads.  Each thread
    queues its own batch.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()
        self._quotes: list[Quote] = []            # insertion order
        self._preferences: Optional[Preferences] = None

    def fetch_all(self) -> list[Quote]:
        with self._lock:
            ordered = sorted(
                enumerate(self._quotes),
                key=lambda pair: (pair[1].created_at, pair[0]),
            )
            return [copy.deepcopy(q) for _, q in ordered]

    def insert(self, quote: Quote) -> None:
        self._pending().append(("insert", copy.deepcopy(quote)))

    def update(self, quote: Quote) -> None:
        self._pending().append(("update", copy.deepcopy(quote)))

    def put_preferences(self, preferences: Preferences) -> None:
        self._pending().append(("preferences", copy.deepcopy(preferences)))

    def rollback(self) -> None:
        self._take_pending()

    def save(self, if_empty: bool = False) -> bool:
        batch = self._take_pending()
        if not batch:
            return True
        with self._lock:
            if if_empty and self._quotes:
                return False

            by_id = {q.id: q for q in self._quotes}
            for op, obj in batch:
                if op == "insert":
                    self._quotes.append(obj)
                    by_id[obj.id] = obj
                elif op == "update" and obj.id in by_id:
                    stored = by_id[obj.id]
                    if obj.collection_known:
                        stored.collection = obj.collection
                        stored.collection_known = True
                    stored.runic.update(obj.runic)
                elif op == "preferences":
                    self._preferences = obj
            return True

    def get_or_create_preferences(self) -> Preferences:
        with self._lock:
            if self._preferences is None:
                self._preferences = Preferences()
            return copy.deepcopy(self._preferences)
