"""
Younger Futhark (16 runes, subset of the Unicode Runic block).

The reduced alphabet merged several sounds onto one rune, so every Latin
letter still has an entry:

  e, o → ár        p → bjarkan      g, q, x → kaun
  v → fé           w → úr           y → íss         z → sól
"""

from .models import Script, ScriptTables

__all__ = ["YOUNGER_FUTHARK"]

_SINGLE = {
    # Vowels
    "a": "ᚨ",  # ᚨ ár
    "e": "ᚨ",
    "i": "ᛁ",  # ᛁ íss
    "o": "ᚨ",
    "u": "ᚢ",  # ᚢ úr
    "y": "ᛁ",

    # Consonants
    "b": "ᛒ",  # ᛒ bjarkan
    "c": "ᚴ",  # ᚴ kaun
    "d": "ᛞ",  # ᛞ dagr
    "f": "ᚠ",  # ᚠ fé
    "g": "ᚴ",
    "h": "ᚻ",  # ᚻ hagall
    "j": "ᛃ",  # ᛃ ár (year)
    "k": "ᚴ",
    "l": "ᛚ",  # ᛚ lögr
    "m": "ᛗ",  # ᛗ maðr
    "n": "ᚾ",  # ᚾ nauðr
    "p": "ᛒ",
    "q": "ᚴ",
    "r": "ᚱ",  # ᚱ reið
    "s": "ᛊ",  # ᛊ sól
    "t": "ᛏ",  # ᛏ týr
    "v": "ᚠ",
    "w": "ᚢ",
    "x": "ᚴ",
    "z": "ᛊ",
}

_DIGRAPHS = {
    "th": "ᚦ",  # ᚦ þurs
    "ng": "ᚾ",  # ᚾ nauðr, no separate ng rune
}

YOUNGER_FUTHARK = ScriptTables(script=Script.YOUNGER, single=_SINGLE, digraphs=_DIGRAPHS)
