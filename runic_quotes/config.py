"""
Runtime configuration for runic-quotes.

Environment variables
─────────────────────
RUNIC_QUOTES_DB      — SQLite database path (default: ~/.runic-quotes/quotes.db)
RUNIC_QUOTES_CORPUS  — seed corpus JSON (default: the bundled quotes.json)

User-facing settings (script, font, theme, ...) are not configuration; they
live in Preferences inside the store.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from runic_quotes.quotes.corpus import DEFAULT_CORPUS_PATH

__all__ = ["AppConfig", "DEFAULT_DB_PATH"]

DEFAULT_DB_PATH = "~/.runic-quotes/quotes.db"

_ENV_DB = "RUNIC_QUOTES_DB"
_ENV_CORPUS = "RUNIC_QUOTES_CORPUS"


@dataclass
class AppConfig:
    """
    Where the store and the seed corpus live.

    Fields
    ──────
    db_path     — SQLite file path; ``~`` is expanded
    corpus_path — seed corpus JSON path
    """
    db_path:     Path = Path(DEFAULT_DB_PATH).expanduser()
    corpus_path: Path = DEFAULT_CORPUS_PATH

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from *environ* (default: ``os.environ``); empty values are ignored."""
        env = os.environ if environ is None else environ
        db = env.get(_ENV_DB) or DEFAULT_DB_PATH
        corpus = env.get(_ENV_CORPUS)
        return cls(
            db_path=Path(db).expanduser(),
            corpus_path=Path(corpus).expanduser() if corpus else DEFAULT_CORPUS_PATH,
        )

    def with_overrides(
        self,
        db_path: Optional[str] = None,
        corpus_path: Optional[str] = None,
    ) -> "AppConfig":
        """Return a copy with any non-empty override applied (CLI flags win over env)."""
        return AppConfig(
            db_path=Path(db_path).expanduser() if db_path else self.db_path,
            corpus_path=Path(corpus_path).expanduser() if corpus_path else self.corpus_path,
        )
