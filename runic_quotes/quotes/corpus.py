"""
Seed corpus loader.

The corpus is a JSON array bundled with the package::

    [
      {"textLatin": "The only way out is through.",
       "author": "Robert Frost",
       "collection": "Motivation"},
      ...
    ]

"text" is accepted as an alias of "textLatin".  A missing or unknown
"collection" falls back to DEFAULT_COLLECTION.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from runic_quotes.exceptions import InvalidSeedData, SeedDataUnavailable
from runic_quotes.quotes.models import QuoteCollection

__all__ = ["SeedQuote", "DEFAULT_CORPUS_PATH", "load_seed_corpus", "parse_seed_corpus"]

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path(__file__).parent / "data" / "quotes.json"


@dataclass(frozen=True)
class SeedQuote:
    """One corpus entry, after collection fallback."""
    text_latin: str
    author:     str
    collection: QuoteCollection


def parse_seed_corpus(raw: str) -> list[SeedQuote]:
    """
    Decode corpus JSON text.

    Raises:
        InvalidSeedData: not JSON, not a list, or an entry without text.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidSeedData(f"Seed data is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise InvalidSeedData("Seed data must be a JSON array of quote objects")

    quotes: list[SeedQuote] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise InvalidSeedData(f"Seed entry #{index} is not an object")
        text = entry.get("textLatin", entry.get("text"))
        if not isinstance(text, str) or not text:
            raise InvalidSeedData(f"Seed entry #{index} has no text")
        author = entry.get("author") or ""
        if not isinstance(author, str):
            raise InvalidSeedData(f"Seed entry #{index} has a non-string author")
        tag = entry.get("collection")
        quotes.append(SeedQuote(
            text_latin=text,
            author=author,
            collection=QuoteCollection.from_tag(tag if isinstance(tag, str) else None),
        ))
    return quotes


def load_seed_corpus(path: Optional[Union[str, Path]] = None) -> list[SeedQuote]:
    """
    Load the ordered seed corpus from *path* (default: the bundled file).

    Raises:
        SeedDataUnavailable: the file is missing or unreadable.
        InvalidSeedData:     the file is malformed.
    """
    corpus_path = Path(path).expanduser() if path else DEFAULT_CORPUS_PATH
    try:
        raw = corpus_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read seed data %s: %s", corpus_path, exc)
        raise SeedDataUnavailable(f"Could not find seed data file ({corpus_path})") from exc

    quotes = parse_seed_corpus(raw)
    logger.debug("Loaded %d seed quotes from %s", len(quotes), corpus_path)
    return quotes
