"""
ViewModels — pure-Python state containers for quote and settings screens.

No UI toolkit imports here; every class is testable without a display.
A front end (widget, desktop app, TUI) reads ``state`` after calling an
operation and redraws itself.

Public API
──────────
QuoteUiState       — everything the quote screen renders
QuoteSearchResult  — compact search suggestion
QuoteViewModel     — loads, cycles, searches and saves quotes
SettingsViewModel  — edits script / font / widget mode / theme / preset
"""

import logging
from dataclasses import dataclass
from typing import Optional

from runic_quotes.exceptions import RunicQuotesError
from runic_quotes.preferences.models import (
    AppTheme,
    Preferences,
    ReadingPreset,
    RunicFont,
    WidgetMode,
)
from runic_quotes.quotes.models import QuoteCollection, QuoteRecord
from runic_quotes.quotes.repository import QuoteRepository
from runic_quotes.transliteration.engine import transliterate
from runic_quotes.transliteration.models import Script

__all__ = [
    "QuoteUiState",
    "QuoteSearchResult",
    "QuoteViewModel",
    "SettingsViewModel",
]

logger = logging.getLogger(__name__)

_SEARCH_LIMIT = 8


# ── QuoteViewModel ─────────────────────────────────────────────────────────────

@dataclass
class QuoteUiState:
    """Render state of the quote screen."""
    runic_text:    str                   = ""
    latin_text:    str                   = ""
    author:        str                   = ""
    quote_id:      Optional[str]         = None
    is_saved:      bool                  = False
    script:        Script                = Script.ELDER
    font:          RunicFont             = RunicFont.NOTO
    widget_mode:   WidgetMode            = WidgetMode.DAILY
    collection:    QuoteCollection       = QuoteCollection.ALL
    theme:         AppTheme              = AppTheme.OBSIDIAN
    is_loading:    bool                  = False
    error_message: Optional[str]         = None


@dataclass(frozen=True)
class QuoteSearchResult:
    id:         str
    latin_text: str
    author:     str
    collection: QuoteCollection


class QuoteViewModel:
    """
    Drives the main quote screen.

    Preference changes made here (script, font, collection, saved quotes)
    are persisted through the repository straight away.  Store errors never
    escape; they end up in ``state.error_message`` and the previous quote
    stays on screen.
    """

    def __init__(self, repository: QuoteRepository) -> None:
        self._repository = repository
        self._preferences: Optional[Preferences] = None
        self._cached: list[QuoteRecord] = []
        self.state = QuoteUiState()

    # ── Lifecycle ─────────────────────────────────────────────────────────

    def on_appear(self) -> None:
        """Load preferences, then the quote for the preferred widget mode."""
        if self._load_preferences():
            self._load_quote(self.state.widget_mode)

    def next_quote(self) -> None:
        self._load_quote(WidgetMode.RANDOM)

    def refresh(self) -> None:
        self._load_quote(WidgetMode.DAILY)

    # ── User actions ──────────────────────────────────────────────────────

    def change_script(self, script: Script) -> None:
        """Switch script (and font, if incompatible) and reload the quote."""
        prefs = self._ensure_preferences()
        if prefs is None:
            return
        prefs.set_script(script)
        self.state.script = prefs.selected_script
        self.state.font = prefs.selected_font
        if self._persist():
            self._load_quote(self.state.widget_mode)

    def change_font(self, font: RunicFont) -> None:
        prefs = self._ensure_preferences()
        if prefs is None:
            return
        try:
            prefs.set_font(font)
        except RunicQuotesError as exc:
            self.state.error_message = str(exc)
            return
        self.state.font = font
        self._persist()

    def change_collection(self, collection: QuoteCollection) -> None:
        if collection is self.state.collection:
            return
        prefs = self._ensure_preferences()
        if prefs is None:
            return
        prefs.set_collection(collection)
        self.state.collection = collection
        if self._persist():
            self._load_quote(self.state.widget_mode)

    def toggle_saved(self) -> None:
        """Flip the saved state of the quote on screen (no-op without one)."""
        quote_id = self.state.quote_id
        if quote_id is None:
            return
        prefs = self._ensure_preferences()
        if prefs is None:
            return
        saved = prefs.toggle_saved_quote(quote_id)
        if self._persist():
            self.state.is_saved = saved

    def search(self, query: str, limit: int = _SEARCH_LIMIT) -> list[QuoteSearchResult]:
        """
        Case-insensitive substring search over text and author within the
        current collection.  Blank queries return nothing.
        """
        needle = query.strip().casefold()
        if not needle:
            return []
        results = []
        for quote in self._cached:
            if not self.state.collection.contains(quote):
                continue
            if needle in quote.text_latin.casefold() or needle in quote.author.casefold():
                results.append(QuoteSearchResult(
                    id=quote.id,
                    latin_text=quote.text_latin,
                    author=quote.author,
                    collection=quote.collection,
                ))
                if len(results) >= limit:
                    break
        return results

    def show_quote(self, quote_id: str) -> bool:
        """Display a quote picked from search results; False if it is unknown."""
        match = next((q for q in self._cached if q.id == quote_id), None)
        if match is None:
            return False
        self._show(match)
        return True

    # ── Internals ─────────────────────────────────────────────────────────

    def _load_preferences(self) -> bool:
        try:
            prefs = self._repository.load_preferences()
        except RunicQuotesError as exc:
            self.state.error_message = f"Failed to load preferences: {exc}"
            return False
        self._preferences = prefs
        self.state.script = prefs.selected_script
        self.state.font = prefs.selected_font
        self.state.widget_mode = prefs.widget_mode
        self.state.collection = prefs.selected_collection
        self.state.theme = prefs.theme
        self._sync_saved()
        return True

    def _ensure_preferences(self) -> Optional[Preferences]:
        if self._preferences is None:
            self._load_preferences()
        return self._preferences

    def _persist(self) -> bool:
        try:
            self._repository.save_preferences(self._preferences)
        except RunicQuotesError as exc:
            self.state.error_message = f"Failed to save preferences: {exc}"
            return False
        return True

    def _load_quote(self, mode: WidgetMode) -> None:
        self.state.is_loading = True
        self.state.error_message = None
        script, collection = self.state.script, self.state.collection
        try:
            if mode is WidgetMode.RANDOM:
                quote = self._repository.random_quote(script, collection)
            else:
                quote = self._repository.quote_of_the_day(script, collection)
            self._cached = self._repository.all_quotes()
        except RunicQuotesError as exc:
            logger.debug("Quote load failed", exc_info=True)
            self.state.error_message = str(exc)
        else:
            self._show(quote)
        finally:
            self.state.is_loading = False

    def _show(self, quote: QuoteRecord) -> None:
        script = self.state.script
        self.state.latin_text = quote.text_latin
        self.state.author = quote.author
        self.state.runic_text = quote.runic_text(script) or transliterate(quote.text_latin, script)
        self.state.quote_id = quote.id
        self._sync_saved()

    def _sync_saved(self) -> None:
        quote_id = self.state.quote_id
        self.state.is_saved = bool(
            quote_id and self._preferences and self._preferences.is_quote_saved(quote_id)
        )


# ── SettingsViewModel ──────────────────────────────────────────────────────────

class SettingsViewModel:
    """
    Manages the settings screen.

    Attributes
    ──────────
    preferences     — the loaded Preferences, or None before load()
    error_message   — last failure shown to the user, or None
    available_fonts — derived: fonts that can render the selected script
    """

    def __init__(self, repository: QuoteRepository) -> None:
        self._repository = repository
        self.preferences:   Optional[Preferences] = None
        self.error_message: Optional[str]         = None

    def load(self) -> None:
        self.error_message = None
        try:
            self.preferences = self._repository.load_preferences()
        except RunicQuotesError as exc:
            self.error_message = f"Failed to load preferences: {exc}"

    @property
    def available_fonts(self) -> list[RunicFont]:
        script = self.preferences.selected_script if self.preferences else Script.ELDER
        return RunicFont.compatible_with(script)

    def update_script(self, script: Script) -> None:
        if self._require():
            self.preferences.set_script(script)
            self._save()

    def update_font(self, font: RunicFont) -> None:
        if not self._require():
            return
        try:
            self.preferences.set_font(font)
        except RunicQuotesError as exc:
            self.error_message = str(exc)
            return
        self._save()

    def update_widget_mode(self, mode: WidgetMode) -> None:
        if self._require():
            self.preferences.set_widget_mode(mode)
            self._save()

    def update_theme(self, theme: AppTheme) -> None:
        if self._require():
            self.preferences.set_theme(theme)
            self._save()

    def apply_preset(self, preset: ReadingPreset) -> None:
        if self._require():
            self.preferences.apply_preset(preset)
            self._save()

    def _require(self) -> bool:
        if self.preferences is None:
            self.load()
        return self.preferences is not None

    def _save(self) -> None:
        try:
            self._repository.save_preferences(self.preferences)
        except RunicQuotesError as exc:
            self.error_message = f"Failed to save preferences: {exc}"
        else:
            self.error_message = None
