"""Shared symbol tables and run-time settings for the blueprint parser.

Every marker the parser recognises lives here.  The **command** classifier,
the **header** parser and the **layer** grouper all read from the single
``PARSER_RULES`` instance, so a symbol changed here is picked up by each
stage without touching the parsing code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ParserRules:
    """Symbols of the blueprint cell grammar."""

    allowed_commands: frozenset[str] = frozenset("djuihrx")
    """Cell symbols kept in the parsed layers."""

    no_ops: frozenset[str] = frozenset("#~`")
    """Cell symbols that do nothing."""

    comment: str = "#"
    """A cell holding only this marker is a comment."""

    layer_up: str = "#<"
    layer_down: str = "#>"

    header_marker: str = "#"
    """First-line prefix that introduces the blueprint header."""

    start_keyword: str = "start("
    start_separator: str = ";"

    expansion_open: str = "("
    expansion_close: str = ")"
    expansion_delimiter: str = "x"

    max_expansion_area: int = 10_000
    """Largest XxY block a single cell may expand to."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def navigation(self) -> frozenset[str]:
        """Markers that open a new layer group."""
        return frozenset((self.layer_up, self.layer_down))


# Module-level singleton — importable everywhere.
PARSER_RULES = ParserRules()


# ── Run-time settings ─────────────────────────────────────────────

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

LOG_LEVEL = os.environ.get("QUICKFORT_LOG_LEVEL", "WARNING").upper()
