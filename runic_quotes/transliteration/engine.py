"""
Transliteration engine — Latin text → runic glyphs.

Algorithm (greedy longest match over grapheme clusters)
──────────────────────────────────────────────────────
1. Lower-case the whole input.
2. Split into extended grapheme clusters and scan left to right.
3. If two clusters remain and their concatenation is a digraph of the
   script, emit the digraph glyph and advance two.
4. Otherwise emit the single-character glyph if the cluster is mapped.
5. Otherwise pass through: numbers and punctuation unchanged, any
   whitespace as one regular space.  Everything else is dropped.

The function is pure and total: it never raises for any ``str`` input.
"""

import unicodedata

import regex

from .models import Script
from .tables import get_tables

__all__ = ["transliterate", "transliterate_all", "graphemes"]

# One extended grapheme cluster (UAX #29).
_CLUSTER = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    return _CLUSTER.findall(text)


def _passes_through(cluster: str) -> bool:
    first = cluster[0]
    if unicodedata.numeric(first, None) is not None:
        return True
    # Only single-codepoint clusters count as punctuation.
    return len(cluster) == 1 and unicodedata.category(first).startswith("P")


def transliterate(text: str, script: Script) -> str:
    """
    Transliterate Latin *text* into *script*.

    Args:
        text:   Any string; case is ignored.
        script: Target Script.

    Returns:
        The glyph string.  Empty input gives an empty string.
    """
    if not text:
        return ""

    tables = get_tables(script)
    clusters = graphemes(text.lower())
    out: list[str] = []

    i = 0
    while i < len(clusters):
        if i + 1 < len(clusters):
            glyph = tables.digraphs.get(clusters[i] + clusters[i + 1])
            if glyph is not None:
                out.append(glyph)
                i += 2
                continue

        cluster = clusters[i]
        glyph = tables.single.get(cluster)
        if glyph is not None:
            out.append(glyph)
        elif cluster[0].isspace():
            out.append(" ")
        elif _passes_through(cluster):
            out.append(cluster)
        i += 1

    return "".join(out)


def transliterate_all(text: str) -> dict[Script, str]:
    """Return the transliteration of *text* for every supported script."""
    return {script: transliterate(text, script) for script in Script}
