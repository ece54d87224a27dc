"""
cli — command-line interface for runic-quotes.

Entry points
────────────
  python -m runic_quotes   (via runic_quotes/__main__.py)
  runic-quotes             (via pyproject.toml [project.scripts])

Subcommands: seed | today | random | list | transliterate | prefs | save
"""

from runic_quotes.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
