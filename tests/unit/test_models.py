"""
Unit tests for runic_quotes/quotes/models.py and runic_quotes/preferences/models.py

Coverage plan
─────────────
QuoteCollection → 6 tests  (from_tag fallbacks, parse_tag, contains, ALL never a tag)
Quote           → 6 tests  (validation, defaults, keyed runic cache)
QuoteRecord     → 2 tests  (immutability)
RunicFont       → 3 tests  (compatibility matrix, recommendations)
Preferences     → 8 tests  (defaults, script/font rules, presets, saved ids)
─────────────────────────────────────────────────────────────────
Total           = 25 tests
"""

import dataclasses

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# 1. QuoteCollection
# ─────────────────────────────────────────────────────────────────────────────

class TestQuoteCollection:

    def test_from_tag_known_value(self):
        from runic_quotes.quotes.models import QuoteCollection
        assert QuoteCollection.from_tag("Stoic") is QuoteCollection.STOIC
        assert QuoteCollection.from_tag(" Tolkien ") is QuoteCollection.TOLKIEN

    def test_from_tag_missing_or_unknown_defaults_to_motivation(self):
        from runic_quotes.quotes.models import QuoteCollection
        assert QuoteCollection.from_tag(None) is QuoteCollection.MOTIVATION
        assert QuoteCollection.from_tag("Poetry") is QuoteCollection.MOTIVATION

    def test_from_tag_all_is_not_a_quote_tag(self):
        from runic_quotes.quotes.models import QuoteCollection
        assert QuoteCollection.from_tag("All") is QuoteCollection.MOTIVATION

    def test_parse_tag_reports_unrecognized_tags(self):
        from runic_quotes.quotes.models import QuoteCollection
        assert QuoteCollection.parse_tag("Stoic") is QuoteCollection.STOIC
        for raw in (None, "", "Poetry", "All"):
            assert QuoteCollection.parse_tag(raw) is None

    def test_all_contains_every_quote(self):
        from runic_quotes.quotes.models import Quote, QuoteCollection
        for tag in (QuoteCollection.STOIC, QuoteCollection.TOLKIEN):
            assert QuoteCollection.ALL.contains(Quote("x", "y", collection=tag))

    def test_specific_collection_contains_only_itself(self):
        from runic_quotes.quotes.models import Quote, QuoteCollection
        stoic = Quote("x", "y", collection=QuoteCollection.STOIC)
        assert QuoteCollection.STOIC.contains(stoic)
        assert not QuoteCollection.TOLKIEN.contains(stoic)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Quote
# ─────────────────────────────────────────────────────────────────────────────

class TestQuote:

    def test_empty_text_rejected(self):
        from runic_quotes.quotes.models import Quote
        with pytest.raises(ValueError):
            Quote(text_latin="", author="Nobody")

    def test_defaults(self):
        from runic_quotes.quotes.models import Quote, QuoteCollection
        q = Quote(text_latin="Fortune favors the bold.", author="Virgil")
        assert q.collection is QuoteCollection.MOTIVATION
        assert q.runic == {}
        assert q.is_user_generated is False
        assert q.created_at.tzinfo is not None

    def test_ids_are_unique(self):
        from runic_quotes.quotes.models import Quote
        assert Quote("a", "b").id != Quote("a", "b").id

    def test_all_collection_is_replaced_with_default(self):
        from runic_quotes.quotes.models import Quote, QuoteCollection
        q = Quote("a", "b", collection=QuoteCollection.ALL)
        assert q.collection is QuoteCollection.MOTIVATION

    def test_runic_cache_is_keyed_by_script(self):
        from runic_quotes.quotes.models import Quote
        from runic_quotes.transliteration import Script
        q = Quote("a", "b")
        assert q.runic_text(Script.CIRTH) is None
        q.set_runic_text(Script.CIRTH, "\ue001")
        assert q.runic_text(Script.CIRTH) == "\ue001"
        assert q.runic_text(Script.ELDER) is None

    def test_missing_scripts_in_enum_order(self):
        from runic_quotes.quotes.models import Quote
        from runic_quotes.transliteration import Script
        q = Quote("a", "b", runic={Script.YOUNGER: "ᚨ"})
        assert q.missing_scripts() == [Script.ELDER, Script.CIRTH]


# ─────────────────────────────────────────────────────────────────────────────
# 3. QuoteRecord
# ─────────────────────────────────────────────────────────────────────────────

class TestQuoteRecord:

    def _record(self):
        from runic_quotes.quotes.models import Quote, QuoteRecord
        from runic_quotes.transliteration import Script
        return QuoteRecord.from_quote(Quote("a", "b", runic={Script.ELDER: "ᚨ"}))

    def test_fields_cannot_be_reassigned(self):
        rec = self._record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            rec.author = "someone else"

    def test_runic_mapping_is_read_only_snapshot(self):
        from runic_quotes.transliteration import Script
        rec = self._record()
        assert rec.runic_text(Script.ELDER) == "ᚨ"
        with pytest.raises(TypeError):
            rec.runic[Script.CIRTH] = "x"


# ─────────────────────────────────────────────────────────────────────────────
# 4. RunicFont
# ─────────────────────────────────────────────────────────────────────────────

class TestRunicFont:

    def test_cirth_font_only_renders_cirth(self):
        from runic_quotes.preferences import RunicFont
        from runic_quotes.transliteration import Script
        assert RunicFont.compatible_with(Script.CIRTH) == [RunicFont.CIRTH]

    def test_futhark_fonts(self):
        from runic_quotes.preferences import RunicFont
        from runic_quotes.transliteration import Script
        assert RunicFont.compatible_with(Script.ELDER) == [RunicFont.NOTO, RunicFont.BABELSTONE]

    def test_recommended_font(self):
        from runic_quotes.preferences import RunicFont
        from runic_quotes.transliteration import Script
        assert RunicFont.recommended_for(Script.CIRTH) is RunicFont.CIRTH
        assert RunicFont.recommended_for(Script.YOUNGER) is RunicFont.NOTO


# ─────────────────────────────────────────────────────────────────────────────
# 5. Preferences
# ─────────────────────────────────────────────────────────────────────────────

class TestPreferences:

    def test_defaults(self):
        from runic_quotes.preferences import (
            AppTheme, Preferences, RunicFont, WidgetMode, WidgetStyle,
        )
        from runic_quotes.quotes.models import QuoteCollection
        from runic_quotes.transliteration import Script
        p = Preferences()
        assert p.selected_script is Script.ELDER
        assert p.selected_font is RunicFont.NOTO
        assert p.widget_mode is WidgetMode.DAILY
        assert p.widget_style is WidgetStyle.RUNE_FIRST
        assert p.theme is AppTheme.OBSIDIAN
        assert p.selected_collection is QuoteCollection.ALL
        assert p.last_preset is None
        assert p.saved_quote_ids == set()

    def test_set_script_switches_incompatible_font(self):
        from runic_quotes.preferences import Preferences, RunicFont
        from runic_quotes.transliteration import Script
        p = Preferences()
        p.set_script(Script.CIRTH)
        assert p.selected_font is RunicFont.CIRTH

    def test_set_script_keeps_compatible_font(self):
        from runic_quotes.preferences import Preferences, RunicFont
        from runic_quotes.transliteration import Script
        p = Preferences(selected_font=RunicFont.BABELSTONE)
        p.set_script(Script.YOUNGER)
        assert p.selected_font is RunicFont.BABELSTONE

    def test_set_incompatible_font_raises_and_keeps_old_font(self):
        from runic_quotes.exceptions import IncompatibleFontError
        from runic_quotes.preferences import Preferences, RunicFont
        p = Preferences()
        with pytest.raises(IncompatibleFontError):
            p.set_font(RunicFont.CIRTH)
        assert p.selected_font is RunicFont.NOTO

    def test_apply_preset_sets_script_font_and_remembers_preset(self):
        from runic_quotes.preferences import Preferences, ReadingPreset, RunicFont
        from runic_quotes.transliteration import Script
        p = Preferences()
        p.apply_preset(ReadingPreset.YOUNGER_CARVED)
        assert p.selected_script is Script.YOUNGER
        assert p.selected_font is RunicFont.BABELSTONE
        assert p.last_preset is ReadingPreset.YOUNGER_CARVED

    def test_every_preset_pairs_compatible_font(self):
        from runic_quotes.preferences import ReadingPreset
        for preset in ReadingPreset:
            assert preset.font.is_compatible(preset.script)

    def test_toggle_saved_quote(self):
        from runic_quotes.preferences import Preferences
        p = Preferences()
        assert p.toggle_saved_quote("q1") is True
        assert p.is_quote_saved("q1")
        assert p.toggle_saved_quote("q1") is False
        assert not p.is_quote_saved("q1")

    def test_setters_refresh_updated_at(self):
        from datetime import datetime, timezone
        from runic_quotes.preferences import AppTheme, Preferences
        p = Preferences(updated_at=datetime(2000, 1, 1, tzinfo=timezone.utc))
        p.set_theme(AppTheme.PARCHMENT)
        assert p.updated_at.year > 2000
