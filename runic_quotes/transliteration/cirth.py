"""
Cirth / Angerthas mappings.

Glyphs live in the Private Use Area starting at U+E000 and match the
Angerthas Moria font layout; the trailing comments give the Cirth number.
Codepoints differ between Cirth fonts, so only this table needs changing
to target another one.
"""

from .models import Script, ScriptTables

__all__ = ["CIRTH"]

_SINGLE = {
    # Vowels
    "a": "\ue001",  # 1
    "e": "\ue003",  # 3
    "i": "\ue006",  # 6
    "o": "\ue00c",  # 12
    "u": "\ue009",  # 9

    # Consonants
    "b": "\ue002",  # 2
    "c": "\ue004",  # 4 (k/c)
    "d": "\ue009",  # 9
    "f": "\ue003",  # 3
    "g": "\ue005",  # 5
    "h": "\ue008",  # 8
    "j": "\ue02a",  # 42 (y/j)
    "k": "\ue004",  # 4
    "l": "\ue016",  # 22
    "m": "\ue012",  # 18
    "n": "\ue015",  # 21
    "p": "\ue001",  # 1
    "q": "\ue010",  # 16 (kw)
    "r": "\ue018",  # 24
    "s": "\ue021",  # 33
    "t": "\ue007",  # 7
    "v": "\ue002",  # 2 (v/b)
    "w": "\ue011",  # 17
    "x": "\ue025",  # 37 (ks)
    "y": "\ue02a",  # 42
    "z": "\ue01f",  # 31
}

_DIGRAPHS = {
    "th": "\ue00b",  # 11, as in "thin"
    "dh": "\ue00c",  # 12, as in "this"
    "sh": "\ue01d",  # 29
    "ch": "\ue004",  # 4
    "gh": "\ue00d",  # 13
    "ng": "\ue024",  # 36
    "nd": "\ue024",  # 36
    "mb": "\ue013",  # 19
    "kh": "\ue008",  # 8
    "wh": "\ue029",  # 41 (hw)
}

CIRTH = ScriptTables(script=Script.CIRTH, single=_SINGLE, digraphs=_DIGRAPHS)

