"""Lookup function — returns the mapping tables for a given script."""

from __future__ import annotations

from .cirth import CIRTH
from .elder_futhark import ELDER_FUTHARK
from .models import Script, ScriptTables
from .younger_futhark import YOUNGER_FUTHARK

__all__ = ["get_tables"]

_TABLE_MAP: dict[Script, ScriptTables] = {
    Script.ELDER:   ELDER_FUTHARK,
    Script.YOUNGER: YOUNGER_FUTHARK,
    Script.CIRTH:   CIRTH,
}


def get_tables(script: Script) -> ScriptTables:
    """
    Return the single-character and digraph tables for *script*.

    Parameters
    ----------
    script : Script member, or its value string (e.g. "Elder Futhark")

    Raises
    ------
    ValueError if *script* is not a supported script value.
    """
    return _TABLE_MAP[Script(script)]
