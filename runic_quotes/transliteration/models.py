"""Data models for the transliteration module."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

__all__ = ["Script", "ScriptTables"]


class Script(str, Enum):
    """Supported target writing systems."""
    ELDER   = "Elder Futhark"
    YOUNGER = "Younger Futhark"
    CIRTH   = "Cirth (Angerthas)"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def unicode_range(self) -> Optional[tuple[int, int]]:
        """Inclusive codepoint range of the glyphs, None for Private Use Area scripts."""
        if self is Script.CIRTH:
            return None
        return (0x16A0, 0x16EA)

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Script"]:
        """
        Resolve a user- or database-supplied string to a Script.

        Accepts the member value ("Elder Futhark") or the member name
        ("elder"), trimmed and case-insensitive.  Returns None when nothing
        matches.
        """
        if raw is None:
            return None
        needle = raw.strip().casefold()
        for script in cls:
            if needle in (script.value.casefold(), script.name.casefold()):
                return script
        return None

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    Script.ELDER:   "Ancient Germanic runes (2nd-8th century)",
    Script.YOUNGER: "Scandinavian runes (9th-11th century)",
    Script.CIRTH:   "Tolkien's Elvish runes",
}


@dataclass(frozen=True)
class ScriptTables:
    """
    Static mapping data for one script.

    single   — one lower-case Latin character → glyph
    digraphs — two lower-case Latin characters → glyph (checked first)

    A missing key means "unmapped".
    """
    script:   Script
    single:   Mapping[str, str]
    digraphs: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "single", MappingProxyType(dict(self.single)))
        object.__setattr__(self, "digraphs", MappingProxyType(dict(self.digraphs)))
