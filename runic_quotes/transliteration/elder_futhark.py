"""
Elder Futhark (24 runes, Unicode Runic block U+16A0–U+16EA).

Latin letters without a rune of their own share one: c/k/q/x → kauna,
y → isaz.
"""

from .models import Script, ScriptTables

__all__ = ["ELDER_FUTHARK"]

_SINGLE = {
    # Vowels
    "a": "ᚨ",  # ᚨ ansuz
    "e": "ᛖ",  # ᛖ ehwaz
    "i": "ᛁ",  # ᛁ isaz
    "o": "ᚩ",  # ᚩ os
    "u": "ᚢ",  # ᚢ uruz

    # Consonants
    "b": "ᛒ",  # ᛒ berkanan
    "c": "ᚴ",  # ᚴ kauna
    "d": "ᛞ",  # ᛞ dagaz
    "f": "ᚠ",  # ᚠ fehu
    "g": "ᚷ",  # ᚷ gebo
    "h": "ᚻ",  # ᚻ haglaz
    "j": "ᛃ",  # ᛃ jeran
    "k": "ᚴ",  # ᚴ kauna
    "l": "ᛚ",  # ᛚ laukaz
    "m": "ᛗ",  # ᛗ mannaz
    "n": "ᚾ",  # ᚾ naudiz
    "p": "ᛈ",  # ᛈ pertho
    "q": "ᚴ",  # ᚴ kauna
    "r": "ᚱ",  # ᚱ raido
    "s": "ᛊ",  # ᛊ sowilo
    "t": "ᛏ",  # ᛏ tiwaz
    "v": "ᚡ",  # ᚡ v
    "w": "ᚹ",  # ᚹ wunjo
    "x": "ᚴ",  # ᚴ kauna
    "y": "ᛁ",  # ᛁ isaz
    "z": "ᛉ",  # ᛉ algiz
}

_DIGRAPHS = {
    "th": "ᚦ",  # ᚦ thurisaz
    "ng": "ᛜ",  # ᛜ ingwaz
    "ei": "ᛇ",  # ᛇ iwaz
}

ELDER_FUTHARK = ScriptTables(script=Script.ELDER, single=_SINGLE, digraphs=_DIGRAPHS)
