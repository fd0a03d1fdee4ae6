"""Blueprint parsers — hold one blueprint and expose its header and layers.

``BlueprintParser`` handles any blueprint generically.  Kind-specific
subclasses (``Dig``) only add a header keyword check.
"""

from __future__ import annotations

import copy
import logging

from quickfort.config import PARSER_RULES, ParserRules

from .header import parse_header, text_to_lines
from .layers import process_lines
from .models import BlueprintKindError, Header, Layer


log = logging.getLogger("quickfort.parser")


class BlueprintParser:
    """Parses QuickFort-style CSV blueprints into layers of cell commands.

    Blueprint text is a block of CSV lines, optionally headed by a
    ``#<keyword>`` line:

        #dig
        d,d,d,#
        ~,i,d,#
        d,d,d,#
        #,#,#,#

    All derived state is recomputed by ``set_blueprint``.
    """

    kind: str | None = None     # header keyword this parser accepts

    def __init__(self, blueprint_text: str | None = None, rules: ParserRules = PARSER_RULES) -> None:
        self.rules = rules
        self._original: str = ""
        self._header = Header()
        self._lines: list[str] = []
        self._layers: list[Layer] = []
        if blueprint_text:
            self.set_blueprint(blueprint_text)

    def set_blueprint(self, blueprint_text: str | None) -> None:
        """Replace the blueprint.  Header, lines and layers are rebuilt
        before any of them is swapped in."""
        text = blueprint_text or ""
        lines = text_to_lines(text)
        header = parse_header(lines[0] if lines else "", self.rules)

        # We parsed a header, so drop the line that contained it
        if header.command:
            lines = lines[1:]

        layers = process_lines(lines, self.rules)

        self._original = text
        self._header = header
        self._lines = lines
        self._layers = layers
        log.debug(
            "Parsed blueprint: command=%r, %d data lines, %d layers",
            header.command, len(lines), len(layers),
        )

    def get_blueprint(self) -> str:
        """The blueprint text exactly as it was set."""
        return self._original

    def get_header(self) -> Header:
        return copy.deepcopy(self._header)

    def get_lines(self) -> list[str]:
        """Trimmed data lines, header line excluded."""
        return list(self._lines)

    def get_layers(self) -> list[Layer]:
        """Grouped, reordered, filtered and expanded layers."""
        return copy.deepcopy(self._layers)

    def check_header(self) -> bool:
        """True when the header keyword matches this parser's kind.

        The generic parser has no kind and accepts any blueprint.
        """
        if self.kind is None:
            return True
        return self._header.command == self.kind

    def require_header(self) -> None:
        """Raise BlueprintKindError unless check_header() passes."""
        if not self.check_header():
            found = self._header.command
            raise BlueprintKindError(
                f"Expected a '#{self.kind}' blueprint, "
                + (f"got '#{found}'" if found else "found no header")
            )


class Dig(BlueprintParser):
    """Dig blueprints: ``#dig`` header."""

    kind = "dig"


# ── Registry ───────────────────────────────────────────────────────

PARSERS: dict[str, type[BlueprintParser]] = {
    Dig.kind: Dig,
}


def get_parser(kind: str | None = None) -> BlueprintParser:
    """Return a fresh parser for *kind*, or the generic parser for None."""
    if kind is None:
        return BlueprintParser()
    try:
        return PARSERS[kind.lower()]()
    except KeyError:
        raise BlueprintKindError(
            f"Unknown blueprint kind '{kind}', expected one of {sorted(PARSERS)}"
        ) from None
