"""
CLI entry point for runic-quotes.

Usage
─────
  # Today's quote in Younger Futhark
  runic-quotes today --script younger

  # A random Stoic quote
  runic-quotes random --collection stoic

  # Transliterate free text (no database needed)
  runic-quotes transliterate "hello world" --script cirth

  # Change preferences / bookmark a quote
  runic-quotes prefs --preset cirth_lore
  runic-quotes save --id 5f0c...

Subcommands are implemented as standalone functions (cmd_seed, cmd_today, ...)
so they can be unit-tested without invoking argparse.
"""

import argparse
import functools
import logging
import sys
from enum import Enum
from typing import Callable, Optional, TypeVar

from runic_quotes.config import AppConfig
from runic_quotes.exceptions import QuoteNotFound, RunicQuotesError
from runic_quotes.preferences.models import (
    AppTheme,
    Preferences,
    ReadingPreset,
    RunicFont,
    WidgetMode,
)
from runic_quotes.quotes.coordinator import SeedingCoordinator
from runic_quotes.quotes.corpus import load_seed_corpus
from runic_quotes.quotes.db import SQLiteQuoteStore
from runic_quotes.quotes.models import QuoteCollection, QuoteRecord
from runic_quotes.quotes.repository import QuoteRepository
from runic_quotes.transliteration import Script, transliterate

__all__ = [
    "build_parser",
    "cmd_seed",
    "cmd_today",
    "cmd_random",
    "cmd_list",
    "cmd_transliterate",
    "cmd_prefs",
    "cmd_save",
    "main",
]

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


# ── Argument types ────────────────────────────────────────────────────────────


def _script_arg(raw: str) -> Script:
    script = Script.parse(raw)
    if script is None:
        names = ", ".join(s.name.lower() for s in Script)
        raise argparse.ArgumentTypeError(f"unknown script {raw!r} (choose from {names})")
    return script


def _enum_arg(cls: type[_E]) -> Callable[[str], _E]:
    """argparse type accepting a member name ("nordic_dawn") or value ("Nordic Dawn")."""
    def parse(raw: str) -> _E:
        needle = raw.strip().casefold()
        for member in cls:
            if needle in (member.name.casefold(), member.value.casefold()):
                return member
        names = ", ".join(m.name.lower() for m in cls)
        raise argparse.ArgumentTypeError(f"invalid choice {raw!r} (choose from {names})")
    parse.__name__ = cls.__name__
    return parse


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: seed | today | random | list | transliterate | prefs | save
    """
    parser = argparse.ArgumentParser(
        prog="runic-quotes",
        description="Daily quotes in Elder Futhark, Younger Futhark and Cirth",
    )
    parser.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help="SQLite database path (default: $RUNIC_QUOTES_DB or ~/.runic-quotes/quotes.db)",
    )
    parser.add_argument(
        "--corpus",
        default=None,
        metavar="PATH",
        help="Seed corpus JSON (default: $RUNIC_QUOTES_CORPUS or the bundled corpus)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── seed ──────────────────────────────────────────────────────────────
    sub.add_parser("seed", help="Populate an empty database from the seed corpus")

    # ── today / random ────────────────────────────────────────────────────
    for name, help_text in (
        ("today", "Show the quote of the day"),
        ("random", "Show a random quote"),
    ):
        pick = sub.add_parser(name, help=help_text)
        pick.add_argument(
            "--script",
            type=_script_arg,
            default=None,
            metavar="SCRIPT",
            help="elder | younger | cirth (default: preferred script)",
        )
        pick.add_argument(
            "--collection",
            type=_enum_arg(QuoteCollection),
            default=None,
            metavar="NAME",
            help="all | motivation | stoic | tolkien (default: preferred collection)",
        )

    # ── list ──────────────────────────────────────────────────────────────
    lst = sub.add_parser("list", help="List stored quotes")
    lst.add_argument(
        "--collection",
        type=_enum_arg(QuoteCollection),
        default=QuoteCollection.ALL,
        metavar="NAME",
        help="Filter by collection (default: all)",
    )
    lst.add_argument(
        "--saved",
        action="store_true",
        default=False,
        help="Only list saved quotes",
    )

    # ── transliterate ─────────────────────────────────────────────────────
    tr = sub.add_parser("transliterate", help="Transliterate text (no database needed)")
    tr.add_argument("text", nargs="+", metavar="TEXT", help="Latin text")
    tr.add_argument(
        "--script",
        type=_script_arg,
        default=None,
        metavar="SCRIPT",
        help="Target script (default: all scripts)",
    )

    # ── prefs ─────────────────────────────────────────────────────────────
    prefs = sub.add_parser("prefs", help="Show or change preferences")
    prefs.add_argument("--script", type=_script_arg, default=None, metavar="SCRIPT")
    prefs.add_argument("--font", type=_enum_arg(RunicFont), default=None, metavar="FONT")
    prefs.add_argument("--mode", type=_enum_arg(WidgetMode), default=None, metavar="MODE")
    prefs.add_argument("--theme", type=_enum_arg(AppTheme), default=None, metavar="THEME")
    prefs.add_argument("--preset", type=_enum_arg(ReadingPreset), default=None, metavar="PRESET")

    # ── save ──────────────────────────────────────────────────────────────
    sv = sub.add_parser("save", help="Toggle the saved state of a quote")
    sv.add_argument("--id", required=True, metavar="ID", help="Quote id")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _print_quote(quote: QuoteRecord, script: Script) -> None:
    print(quote.runic_text(script) or transliterate(quote.text_latin, script))
    print(quote.text_latin)
    if quote.author:
        print(f"  — {quote.author}")
    print(f"[{quote.collection.value}] {quote.id}")


def _build_repository(config: AppConfig) -> QuoteRepository:
    store = SQLiteQuoteStore(db_path=str(config.db_path))
    loader = functools.partial(load_seed_corpus, config.corpus_path)
    return QuoteRepository(store, corpus_loader=loader)


# ── Command implementations ───────────────────────────────────────────────────


def cmd_seed(coordinator: SeedingCoordinator) -> int:
    """Seed the database; print and return the number of inserted quotes."""
    inserted = coordinator.seed_if_needed()
    if inserted:
        print(f"Seeded {inserted} quotes.")
    else:
        print("Database already seeded.")
    return inserted


def cmd_today(
    repository: QuoteRepository,
    script: Optional[Script] = None,
    collection: Optional[QuoteCollection] = None,
) -> QuoteRecord:
    """Print the quote of the day; unset options fall back to preferences."""
    prefs = repository.load_preferences()
    script = script or prefs.selected_script
    quote = repository.quote_of_the_day(script, collection or prefs.selected_collection)
    _print_quote(quote, script)
    return quote


def cmd_random(
    repository: QuoteRepository,
    script: Optional[Script] = None,
    collection: Optional[QuoteCollection] = None,
) -> QuoteRecord:
    """Print a random quote; unset options fall back to preferences."""
    prefs = repository.load_preferences()
    script = script or prefs.selected_script
    quote = repository.random_quote(script, collection or prefs.selected_collection)
    _print_quote(quote, script)
    return quote


def cmd_list(
    repository: QuoteRepository,
    collection: QuoteCollection = QuoteCollection.ALL,
    saved_only: bool = False,
) -> None:
    """Print stored quotes to stdout."""
    if saved_only:
        quotes = [q for q in repository.saved_quotes() if collection.contains(q)]
    else:
        quotes = repository.all_quotes(collection)
    if not quotes:
        print("0 quotes found.")
        return
    for q in quotes:
        print(f"[{q.id[:8]}]  {q.collection.value:<10} {q.author:<24} {q.text_latin}")


def cmd_transliterate(text: str, script: Optional[Script] = None) -> dict[Script, str]:
    """Print *text* in *script*, or in every script when none is given."""
    scripts = [script] if script else list(Script)
    results = {s: transliterate(text, s) for s in scripts}
    if script:
        print(results[script])
    else:
        for s, runic in results.items():
            print(f"{s.value:<18} {runic}")
    return results


def cmd_prefs(
    repository: QuoteRepository,
    script: Optional[Script] = None,
    font: Optional[RunicFont] = None,
    mode: Optional[WidgetMode] = None,
    theme: Optional[AppTheme] = None,
    preset: Optional[ReadingPreset] = None,
) -> Preferences:
    """
    Apply any given changes, persist them, and print the resulting preferences.

    Raises:
        IncompatibleFontError: *font* cannot render the (new) script.
    """
    prefs = repository.load_preferences()
    changed = any(v is not None for v in (script, font, mode, theme, preset))
    if preset is not None:
        prefs.apply_preset(preset)
    if script is not None:
        prefs.set_script(script)
    if font is not None:
        prefs.set_font(font)
    if mode is not None:
        prefs.set_widget_mode(mode)
    if theme is not None:
        prefs.set_theme(theme)
    if changed:
        repository.save_preferences(prefs)
        logger.info("Preferences updated")

    print(f"script:     {prefs.selected_script.value}")
    print(f"font:       {prefs.selected_font.value}")
    print(f"mode:       {prefs.widget_mode.value}")
    print(f"style:      {prefs.widget_style.value}")
    print(f"theme:      {prefs.theme.value}")
    print(f"collection: {prefs.selected_collection.value}")
    print(f"saved:      {len(prefs.saved_quote_ids)} quotes")
    return prefs


def cmd_save(repository: QuoteRepository, quote_id: str) -> bool:
    """Toggle *quote_id* in the saved list; return the new saved state."""
    if not any(q.id == quote_id for q in repository.all_quotes()):
        raise QuoteNotFound(f"No quote with id={quote_id}")
    saved = repository.toggle_saved_quote(quote_id)
    print("Saved." if saved else "Removed from saved quotes.")
    return saved


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    if ns.subcommand == "transliterate":
        cmd_transliterate(" ".join(ns.text), script=ns.script)
        return 0

    config = AppConfig.from_env().with_overrides(db_path=ns.db, corpus_path=ns.corpus)
    try:
        repository = _build_repository(config)
        coordinator = SeedingCoordinator(repository)

        if ns.subcommand == "seed":
            cmd_seed(coordinator)
            return 0

        coordinator.seed_if_needed()

        if ns.subcommand == "today":
            cmd_today(repository, script=ns.script, collection=ns.collection)
        elif ns.subcommand == "random":
            cmd_random(repository, script=ns.script, collection=ns.collection)
        elif ns.subcommand == "list":
            cmd_list(repository, collection=ns.collection, saved_only=ns.saved)
        elif ns.subcommand == "prefs":
            cmd_prefs(
                repository,
                script=ns.script,
                font=ns.font,
                mode=ns.mode,
                theme=ns.theme,
                preset=ns.preset,
            )
        elif ns.subcommand == "save":
            cmd_save(repository, quote_id=ns.id)
        else:
            parser.print_help()
    except RunicQuotesError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
