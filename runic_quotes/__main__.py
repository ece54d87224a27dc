"""Allow ``python -m runic_quotes``."""

from runic_quotes.cli.main import main

raise SystemExit(main())
