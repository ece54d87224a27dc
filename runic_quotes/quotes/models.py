"""Data models for the quotes module."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from runic_quotes.transliteration.models import Script

__all__ = ["QuoteCollection", "DEFAULT_COLLECTION", "Quote", "QuoteRecord"]


# ── Collections ───────────────────────────────────────────────────────────────

class QuoteCollection(str, Enum):
    """Curated quote collections.  ALL is a filter, never a quote's own tag."""
    ALL        = "All"
    MOTIVATION = "Motivation"
    STOIC      = "Stoic"
    TOLKIEN    = "Tolkien"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def subtitle(self) -> str:
        return _SUBTITLES[self]

    def contains(self, quote: "Quote | QuoteRecord") -> bool:
        """ALL matches every quote; any other tag matches only itself."""
        if self is QuoteCollection.ALL:
            return True
        return quote.collection is self

    @classmethod
    def parse_tag(cls, raw: Optional[str]) -> Optional["QuoteCollection"]:
        """Return the quote tag named by *raw*, or None if missing, unknown, or "All"."""
        try:
            collection = cls((raw or "").strip())
        except ValueError:
            return None
        return None if collection is cls.ALL else collection

    @classmethod
    def from_tag(cls, raw: Optional[str]) -> "QuoteCollection":
        """
        Map a corpus or database tag to a quote tag.

        Missing, unknown, and "All" tags fall back to DEFAULT_COLLECTION.
        """
        return cls.parse_tag(raw) or DEFAULT_COLLECTION

    def __str__(self) -> str:
        return self.value


DEFAULT_COLLECTION = QuoteCollection.MOTIVATION

_SUBTITLES = {
    QuoteCollection.ALL:        "Every tradition, one stream",
    QuoteCollection.MOTIVATION: "Action, courage, momentum",
    QuoteCollection.STOIC:      "Discipline, fate, inner order",
    QuoteCollection.TOLKIEN:    "Middle-earth voices and lore",
}


# ── Quote ─────────────────────────────────────────────────────────────────────

def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Quote:
    """
    Persistent quote entity, owned by the quote store.

    Fields
    ──────
    text_latin        — original Latin-alphabet text (non-empty)
    author            — attribution, may be empty
    collection        — QuoteCollection tag (never ALL)
    runic             — Script → cached transliteration; a missing key means
                        "not computed yet"
    id                — UUID4 string, assigned once and never changed
    created_at        — UTC insert time, used only for ordering
    is_user_generated — user-authored rather than seeded
    collection_known  — False when the stored tag was missing or unknown and
                        *collection* is only the fallback
    """
    text_latin:        str
    author:            str
    collection:        QuoteCollection     = DEFAULT_COLLECTION
    runic:             dict[Script, str]   = field(default_factory=dict)
    id:                str                 = field(default_factory=_new_id)
    created_at:        Optional[datetime]  = None
    is_user_generated: bool                = False
    collection_known:  bool                = field(default=True, compare=False)

    def __post_init__(self) -> None:
        if not self.text_latin:
            raise ValueError("Quote text must not be empty")
        if self.collection is QuoteCollection.ALL:
            self.collection = DEFAULT_COLLECTION
        if self.created_at is None:
            self.created_at = datetime.now(tz=timezone.utc)

    def runic_text(self, script: Script) -> Optional[str]:
        return self.runic.get(script)

    def set_runic_text(self, script: Script, text: str) -> None:
        self.runic[script] = text

    def missing_scripts(self) -> list[Script]:
        """Scripts that have no cached transliteration yet, in enum order."""
        return [s for s in Script if s not in self.runic]

    def __str__(self) -> str:
        return f"Quote(id={self.id}, author={self.author!r}, collection={self.collection.value})"


@dataclass(frozen=True)
class QuoteRecord:
    """Immutable snapshot of a Quote handed to callers outside the store."""
    id:                str
    text_latin:        str
    author:            str
    collection:        QuoteCollection
    runic:             Mapping[Script, str]
    created_at:        datetime
    is_user_generated: bool = False

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteRecord":
        return cls(
            id=quote.id,
            text_latin=quote.text_latin,
            author=quote.author,
            collection=quote.collection,
            runic=MappingProxyType(dict(quote.runic)),
            created_at=quote.created_at,
            is_user_generated=quote.is_user_generated,
        )

    def runic_text(self, script: Script) -> Optional[str]:
        return self.runic.get(script)
