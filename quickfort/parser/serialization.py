"""Blueprint serialization — JSON-safe dicts and dense text grids."""

from __future__ import annotations

from quickfort.config import PARSER_RULES

from .blueprint import BlueprintParser
from .models import Header, Layer, StartPosition


def header_to_dict(header: Header) -> dict:
    """Convert a Header to a JSON-serializable dict."""
    start = header.start
    return {
        "command": header.command,
        "start": (
            {"x": start.x, "y": start.y, "comment": start.comment}
            if start is not None else None
        ),
        "comment": header.comment,
    }


def parse_header_dict(data: dict) -> Header:
    """Parse a header dict back into a Header."""
    start = data.get("start")
    return Header(
        command=data.get("command"),
        start=(
            StartPosition(x=int(start["x"]), y=int(start["y"]), comment=start.get("comment"))
            if start else None
        ),
        comment=data.get("comment"),
    )


def layers_to_dict(layers: list[Layer]) -> list:
    """Serialize layers.  Row keys become strings (JSON object keys)."""
    return [
        [{str(idx): cell for idx, cell in sorted(row.items())} for row in layer]
        for layer in layers
    ]


def parse_layers(data: list) -> list[Layer]:
    """Parse serialized layers back into int-keyed rows."""
    return [
        [{int(idx): cell for idx, cell in row.items()} for row in layer]
        for layer in data
    ]


def blueprint_to_dict(parser: BlueprintParser) -> dict:
    """Full parse result of *parser* as a JSON-serializable dict."""
    return {
        "kind": parser.kind,
        "header": header_to_dict(parser.get_header()),
        "header_ok": parser.check_header(),
        "layers": layers_to_dict(parser.get_layers()),
    }


def layers_to_grid(layers: list[Layer], blank: str = "`") -> str:
    """Render layers as dense CSV-like text.

    Gaps are filled with *blank* up to the widest column of each layer,
    and consecutive layers are separated by a layer-down row.
    """
    blocks = []
    for layer in layers:
        width = max((max(row) + 1 for row in layer if row), default=0)
        lines = [
            ",".join(row.get(idx, blank) for idx in range(width))
            for row in layer
        ]
        blocks.append("\n".join(lines))
    return f"\n{PARSER_RULES.layer_down}\n".join(blocks)
