"""
SQLiteQuoteStore — SQLite-backed persistence for quotes and preferences.

Usage::

    store = SQLiteQuoteStore(db_path="~/.runic-quotes/quotes.db")

    quotes = store.fetch_all()
    quote.set_runic_text(Script.CIRTH, text)
    store.update(quote)
    store.save()

The file may be shared by several processes (e.g. an app and a background
refresher).  Batches are committed inside ``BEGIN IMMEDIATE`` so a
``save(if_empty=True)`` check-and-insert cannot interleave with another
writer.
"""

import copy
import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, TypeVar

from runic_quotes.exceptions import PersistenceError
from runic_quotes.preferences.models import (
    AppTheme,
    Preferences,
    ReadingPreset,
    RunicFont,
    WidgetMode,
    WidgetStyle,
)
from runic_quotes.transliteration.models import Script

from .base import AbstractQuoteStore
from .models import Quote, QuoteCollection

__all__ = ["SQLiteQuoteStore"]

logger = logging.getLogger(__name__)

# Path to the SQL schema file bundled with this package
_SCHEMA_PATH = Path(__file__).parent / "migrations" / "schema.sql"

_E = TypeVar("_E", bound=Enum)


def _ts(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def _dt(s: Optional[str]) -> Optional[datetime]:
    if not s:
        return None
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        return None


def _enum_or(cls: type[_E], raw: Optional[str], default: _E) -> _E:
    try:
        return cls(raw)
    except ValueError:
        return default


class SQLiteQuoteStore(AbstractQuoteStore):
    """
    AbstractQuoteStore on a local SQLite file.

    The database file and schema are created automatically on first open.
    No connection is kept open between calls; queued mutations are held in
    memory, per thread, until save().
    """

    def __init__(self, db_path: str, busy_timeout: float = 5.0) -> None:
        super().__init__()
        self._db_path = Path(db_path).expanduser()
        self._busy_timeout = busy_timeout
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._ensure_schema()
        except (OSError, sqlite3.Error) as exc:
            raise PersistenceError(f"Could not open quote store at {self._db_path}", exc) from exc

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ── Internal helpers ──────────────────────────────────────────────────

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(
            str(self._db_path),
            timeout=self._busy_timeout,
            isolation_level=None,          # explicit BEGIN / COMMIT
        )
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA foreign_keys=ON")
            yield conn
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        """Create tables if they don't already exist."""
        sql = _SCHEMA_PATH.read_text(encoding="utf-8")
        with self._connect() as conn:
            conn.executescript(sql)

    @staticmethod
    def _row_to_quote(row: sqlite3.Row, runic: dict[Script, str]) -> Quote:
        return Quote(
            id=row["id"],
            text_latin=row["text_latin"],
            author=row["author"],
            collection=QuoteCollection.from_tag(row["collection"]),
            collection_known=QuoteCollection.parse_tag(row["collection"]) is not None,
            runic=runic,
            created_at=_dt(row["created_at"]),
            is_user_generated=bool(row["is_user_generated"]),
        )

    @staticmethod
    def _row_to_preferences(row: sqlite3.Row) -> Preferences:
        try:
            saved = set(json.loads(row["saved_quote_ids"] or "[]"))
        except (TypeError, ValueError):
            logger.warning("Discarding unreadable saved_quote_ids: %r", row["saved_quote_ids"])
            saved = set()
        preset = row["last_preset"]
        return Preferences(
            selected_script=Script.parse(row["selected_script"]) or Script.ELDER,
            selected_font=_enum_or(RunicFont, row["selected_font"], RunicFont.NOTO),
            widget_mode=_enum_or(WidgetMode, row["widget_mode"], WidgetMode.DAILY),
            widget_style=_enum_or(WidgetStyle, row["widget_style"], WidgetStyle.RUNE_FIRST),
            theme=_enum_or(AppTheme, row["theme"], AppTheme.OBSIDIAN),
            selected_collection=_enum_or(
                QuoteCollection, row["selected_collection"], QuoteCollection.ALL
            ),
            last_preset=_enum_or(ReadingPreset, preset, None) if preset else None,
            saved_quote_ids=saved,
            updated_at=_dt(row["updated_at"]) or datetime.now(tz=timezone.utc),
        )

    @staticmethod
    def _write_transliterations(conn: sqlite3.Connection, quote: Quote) -> None:
        conn.executemany(
            """
            INSERT OR REPLACE INTO quote_transliterations (quote_id, script, runic_text)
            VALUES (?, ?, ?)
            """,
            [(quote.id, script.value, text) for script, text in quote.runic.items()],
        )

    @staticmethod
    def _write_preferences(conn: sqlite3.Connection, prefs: Preferences, replace: bool) -> None:
        verb = "INSERT OR REPLACE" if replace else "INSERT OR IGNORE"
        conn.execute(
            f"""
            {verb} INTO preferences
                (id, selected_script, selected_font, widget_mode, widget_style,
                 theme, selected_collection, last_preset, saved_quote_ids, updated_at)
            VALUES (1, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                prefs.selected_script.value,
                prefs.selected_font.value,
                prefs.widget_mode.value,
                prefs.widget_style.value,
                prefs.theme.value,
                prefs.selected_collection.value,
                prefs.last_preset.value if prefs.last_preset else None,
                json.dumps(sorted(prefs.saved_quote_ids)),
                _ts(prefs.updated_at),
            ),
        )

    def _apply(self, conn: sqlite3.Connection, op: str, obj) -> None:
        if op == "insert":
            conn.execute(
                """
                INSERT INTO quotes
                    (id, text_latin, author, collection, created_at, is_user_generated)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    obj.id,
                    obj.text_latin,
                    obj.author,
                    obj.collection.value,
                    _ts(obj.created_at),
                    int(obj.is_user_generated),
                ),
            )
            self._write_transliterations(conn, obj)
        elif op == "update":
            if obj.collection_known:
                conn.execute(
                    "UPDATE quotes SET collection = ? WHERE id = ?",
                    (obj.collection.value, obj.id),
                )
            self._write_transliterations(conn, obj)
        elif op == "preferences":
            self._write_preferences(conn, obj, replace=True)

    # ── Public API ────────────────────────────────────────────────────────

    def fetch_all(self) -> list[Quote]:
        try:
            with self._connect() as conn:
                conn.execute("BEGIN")
                rows = conn.execute(
                    "SELECT * FROM quotes ORDER BY created_at, seq"
                ).fetchall()
                cached = conn.execute(
                    "SELECT quote_id, script, runic_text FROM quote_transliterations"
                ).fetchall()
                conn.execute("COMMIT")
        except sqlite3.Error as exc:
            raise PersistenceError("Failed to read quotes", exc) from exc

        runic_by_quote: dict[str, dict[Script, str]] = {}
        for r in cached:
            script = Script.parse(r["script"])
            if script is not None:
                runic_by_quote.setdefault(r["quote_id"], {})[script] = r["runic_text"]

        return [self._row_to_quote(r, runic_by_quote.get(r["id"], {})) for r in rows]

    def insert(self, quote: Quote) -> None:
        self._pending().append(("insert", copy.deepcopy(quote)))

    def update(self, quote: Quote) -> None:
        self._pending().append(("update", copy.deepcopy(quote)))

    def put_preferences(self, preferences: Preferences) -> None:
        self._pending().append(("preferences", copy.deepcopy(preferences)))

    def rollback(self) -> None:
        dropped = len(self._take_pending())
        if dropped:
            logger.debug("Discarded %d pending store operations", dropped)

    def save(self, if_empty: bool = False) -> bool:
        """
        Commit this thread's queued mutations in one IMMEDIATE transaction.

        The queue is emptied whether or not the commit succeeds; on failure
        nothing from the batch is visible.
        """
        batch = self._take_pending()
        if not batch:
            return True

        try:
            with self._connect() as conn:
                conn.execute("BEGIN IMMEDIATE")
                try:
                    if if_empty and conn.execute("SELECT 1 FROM quotes LIMIT 1").fetchone():
                        conn.execute("ROLLBACK")
                        logger.info("Store already populated; discarded %d queued writes", len(batch))
                        return False
                    for op, obj in batch:
                        self._apply(conn, op, obj)
                    conn.execute("COMMIT")
                except BaseException:
                    if conn.in_transaction:
                        conn.execute("ROLLBACK")
                    raise
        except sqlite3.Error as exc:
            raise PersistenceError("Failed to commit quote store changes", exc) from exc

        logger.debug("Committed %d store operations", len(batch))
        return True

    def get_or_create_preferences(self) -> Preferences:
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT * FROM preferences WHERE id = 1").fetchone()
                if row is None:
                    # Another process may create the row concurrently; keep whichever won.
                    self._write_preferences(conn, Preferences(), replace=False)
                    row = conn.execute("SELECT * FROM preferences WHERE id = 1").fetchone()
                    logger.info("Created default preferences")
        except sqlite3.Error as exc:
            raise PersistenceError("Failed to load preferences", exc) from exc
        return self._row_to_preferences(row)
