"""Single-cell command tokens.

A cell holds either a bare symbol (``d``) or a symbol with an area
expansion (``d(3x3)``).  Classification is a set of independent
predicates; a symbol may in principle satisfy more than one of them.
"""

from __future__ import annotations

import logging

from quickfort.config import PARSER_RULES, ParserRules

from .models import Expansion


log = logging.getLogger("quickfort.parser.command")


class Command:
    """A normalised cell token: lowercased symbol plus expansion."""

    def __init__(self, text: str | None, rules: ParserRules = PARSER_RULES) -> None:
        self.rules = rules
        self.symbol, self.expansion = self._parse(self._normalize(text or ""))

    @staticmethod
    def _normalize(text: str) -> str:
        return text.strip().lower()

    def _parse(self, text: str) -> tuple[str, Expansion]:
        rules = self.rules
        if rules.expansion_open not in text:
            return text, Expansion()

        # The closing paren is optional: "d(3x3" parses like "d(3x3)".
        symbol, _, body = text.rstrip(rules.expansion_close).partition(rules.expansion_open)
        parts = body.split(rules.expansion_delimiter)
        try:
            if len(parts) != 2:
                raise ValueError(body)
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            log.warning("Malformed expansion in cell %r, leaving it unparsed", text)
            return text, Expansion()
        if x < 1 or y < 1:
            log.warning("Expansion %dx%d in cell %r must be at least 1x1", x, y, text)
            return text, Expansion()
        if x * y > rules.max_expansion_area:
            log.warning("Expansion %dx%d in cell %r exceeds %d cells", x, y, text, rules.max_expansion_area)
            return text, Expansion()
        return symbol.strip(), Expansion(x, y)

    # ── Classification ─────────────────────────────────────────────

    def is_layer_up(self) -> bool:
        return self.symbol == self.rules.layer_up

    def is_layer_down(self) -> bool:
        return self.symbol == self.rules.layer_down

    def is_allowed_command(self) -> bool:
        return self.symbol in self.rules.allowed_commands

    def is_no_op(self) -> bool:
        return self.symbol in self.rules.no_ops

    def is_comment(self) -> bool:
        return self.symbol == self.rules.comment

    def has_expansion(self) -> bool:
        return self.expansion.x > 1 or self.expansion.y > 1

    # ── Accessors ──────────────────────────────────────────────────

    def get_expansion(self) -> Expansion:
        return self.expansion

    def get_command(self) -> str:
        """The symbol without expansion information."""
        return self.symbol

    def get_formatted(self) -> str:
        """Canonical cell text: ``symbol`` or ``symbol(XxY)``."""
        if not self.has_expansion():
            return self.symbol
        return f"{self.symbol}({self.expansion.x}x{self.expansion.y})"

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Command({self.get_formatted()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return (self.symbol, self.expansion) == (other.symbol, other.expansion)

    def __hash__(self) -> int:
        return hash((self.symbol, self.expansion))
