"""
transliteration — Latin → runic script conversion.

Public API
──────────
Script            — supported target scripts
ScriptTables      — per-script single-character + digraph mapping data
get_tables        — Script → ScriptTables lookup
transliterate     — pure, total Latin → glyph conversion
transliterate_all — one transliteration per supported script
"""

from runic_quotes.transliteration.models import Script, ScriptTables
from runic_quotes.transliteration.tables import get_tables
from runic_quotes.transliteration.engine import transliterate, transliterate_all

__all__ = ["Script", "ScriptTables", "get_tables", "transliterate", "transliterate_all"]
