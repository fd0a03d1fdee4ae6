"""Blueprint dataclasses and errors — the parser's output structure."""

from __future__ import annotations

from dataclasses import dataclass


# A row maps column index -> command symbol.  Filtered cells leave gaps.
Row = dict[int, str]
Layer = list[Row]


@dataclass(frozen=True)
class Expansion:
    """Repeat factor of a ``symbol(XxY)`` cell.  (1, 1) means a single cell."""
    x: int = 1
    y: int = 1


@dataclass
class StartPosition:
    x: int
    y: int
    comment: str | None = None


@dataclass
class Header:
    """Metadata from the first blueprint line.

    command is None only when the first line carries no header marker.
    """
    command: str | None = None
    start: StartPosition | None = None
    comment: str | None = None


# ── Errors ─────────────────────────────────────────────────────────

class BlueprintError(Exception):
    """Base class for blueprint parsing failures."""


class HeaderError(BlueprintError):
    """The header line holds a malformed ``start(...)`` block."""


class BlueprintKindError(BlueprintError):
    """The blueprint is not of the kind a parser was asked to handle."""


class CellError(BlueprintError):
    """A blueprint line cannot be split into cells."""
