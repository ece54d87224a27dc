"""Data models for user preferences."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from runic_quotes.exceptions import IncompatibleFontError
from runic_quotes.quotes.models import QuoteCollection
from runic_quotes.transliteration.models import Script

__all__ = [
    "RunicFont",
    "WidgetMode",
    "WidgetStyle",
    "AppTheme",
    "ReadingPreset",
    "Preferences",
]


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


# ── Enumerations ──────────────────────────────────────────────────────────────

class RunicFont(str, Enum):
    """Fonts available for rendering runic glyphs."""
    NOTO       = "Noto Sans Runic"
    BABELSTONE = "BabelStone Runic"
    CIRTH      = "Cirth Angerthas"

    @property
    def display_name(self) -> str:
        return _FONT_LABELS[self]

    @property
    def file_name(self) -> str:
        return _FONT_FILES[self]

    def is_compatible(self, script: Script) -> bool:
        """The Angerthas font renders only Cirth; the others only the futharks."""
        if self is RunicFont.CIRTH:
            return script is Script.CIRTH
        return script is not Script.CIRTH

    @classmethod
    def recommended_for(cls, script: Script) -> "RunicFont":
        return cls.CIRTH if script is Script.CIRTH else cls.NOTO

    @classmethod
    def compatible_with(cls, script: Script) -> list["RunicFont"]:
        return [f for f in cls if f.is_compatible(script)]


_FONT_LABELS = {
    RunicFont.NOTO:       "Noto Sans",
    RunicFont.BABELSTONE: "BabelStone",
    RunicFont.CIRTH:      "Angerthas",
}

_FONT_FILES = {
    RunicFont.NOTO:       "NotoSansRunic-Regular.ttf",
    RunicFont.BABELSTONE: "BabelStoneRunic.ttf",
    RunicFont.CIRTH:      "CirthAngerthas.ttf",
}


class WidgetMode(str, Enum):
    DAILY  = "Daily"    # same quote for everyone each day
    RANDOM = "Random"   # new quote on each refresh


class WidgetStyle(str, Enum):
    RUNE_FIRST        = "Rune-first"
    TRANSLATION_FIRST = "Translation-first"


class AppTheme(str, Enum):
    OBSIDIAN    = "Obsidian"
    PARCHMENT   = "Parchment"
    NORDIC_DAWN = "Nordic Dawn"


class ReadingPreset(str, Enum):
    """Curated script + font combinations."""
    ELDER_SCHOLAR  = "Elder Scholar"
    YOUNGER_CARVED = "Younger Carved"
    CIRTH_LORE     = "Cirth Lore"

    @property
    def script(self) -> Script:
        return _PRESETS[self][0]

    @property
    def font(self) -> RunicFont:
        return _PRESETS[self][1]


_PRESETS = {
    ReadingPreset.ELDER_SCHOLAR:  (Script.ELDER,   RunicFont.NOTO),
    ReadingPreset.YOUNGER_CARVED: (Script.YOUNGER, RunicFont.BABELSTONE),
    ReadingPreset.CIRTH_LORE:     (Script.CIRTH,   RunicFont.CIRTH),
}


# ── Preferences ───────────────────────────────────────────────────────────────

@dataclass
class Preferences:
    """
    The single preferences record of a quote store.

    Obtained through QuoteRepository.load_preferences() (load-or-default)
    and written back with QuoteRepository.save_preferences().  Every
    setter refreshes ``updated_at``.
    """
    selected_script:     Script                  = Script.ELDER
    selected_font:       RunicFont               = RunicFont.NOTO
    widget_mode:         WidgetMode              = WidgetMode.DAILY
    widget_style:        WidgetStyle             = WidgetStyle.RUNE_FIRST
    theme:               AppTheme                = AppTheme.OBSIDIAN
    selected_collection: QuoteCollection         = QuoteCollection.ALL
    last_preset:         Optional[ReadingPreset] = None
    saved_quote_ids:     set[str]                = field(default_factory=set)
    updated_at:          datetime                = field(default_factory=_now)

    def _touch(self) -> None:
        self.updated_at = _now()

    def set_script(self, script: Script) -> None:
        """Select *script*, switching to its recommended font if needed."""
        self.selected_script = script
        if not self.selected_font.is_compatible(script):
            self.selected_font = RunicFont.recommended_for(script)
        self._touch()

    def set_font(self, font: RunicFont) -> None:
        if not font.is_compatible(self.selected_script):
            raise IncompatibleFontError(
                f"{font.display_name} is not compatible with "
                f"{self.selected_script.display_name}"
            )
        self.selected_font = font
        self._touch()

    def set_widget_mode(self, mode: WidgetMode) -> None:
        self.widget_mode = mode
        self._touch()

    def set_widget_style(self, style: WidgetStyle) -> None:
        self.widget_style = style
        self._touch()

    def set_theme(self, theme: AppTheme) -> None:
        self.theme = theme
        self._touch()

    def set_collection(self, collection: QuoteCollection) -> None:
        self.selected_collection = collection
        self._touch()

    def apply_preset(self, preset: ReadingPreset) -> None:
        self.selected_script = preset.script
        self.selected_font = preset.font
        self.last_preset = preset
        self._touch()

    def is_quote_saved(self, quote_id: str) -> bool:
        return quote_id in self.saved_quote_ids

    def toggle_saved_quote(self, quote_id: str) -> bool:
        """Flip the saved state of *quote_id*; return the new state."""
        if quote_id in self.saved_quote_ids:
            self.saved_quote_ids.discard(quote_id)
            saved = False
        else:
            self.saved_quote_ids.add(quote_id)
            saved = True
        self._touch()
        return saved
