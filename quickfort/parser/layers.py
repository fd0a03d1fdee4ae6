"""Layer processing — turn blueprint data lines into parsed layers.

The stages in order:

  group_lines_by_layer   split lines into groups on #< / #> navigation rows
  adjust_layer_order     move #< groups behind the most recent placement
  process_layer_lines    CSV-split every line into sparse command rows
  expand_areas           rewrite d(3x3)-style cells into blocks of cells
"""

from __future__ import annotations

import csv
import logging

from quickfort.config import PARSER_RULES, ParserRules

from .command import Command
from .models import CellError, Layer, Row


log = logging.getLogger("quickfort.parser.layers")


def split_cells(line: str) -> list[str]:
    """CSV-split a single blueprint line.

    A stray carriage return inside the line is read as a space.
    """
    try:
        return next(csv.reader([line.replace("\r", " ")]), [])
    except csv.Error as e:
        raise CellError(f"Cannot split blueprint line {line!r}: {e}") from None


def leading_command(line: str, rules: ParserRules = PARSER_RULES) -> Command:
    """The command in the first cell of *line*."""
    cells = split_cells(line)
    return Command(cells[0] if cells else "", rules)


# ── Grouping ───────────────────────────────────────────────────────

def group_lines_by_layer(lines: list[str], rules: ParserRules = PARSER_RULES) -> list[list[str]]:
    """Group lines into layers.  A navigation line opens a new group and
    becomes that group's first line."""
    groups: list[list[str]] = [[]]
    for line in lines:
        command = leading_command(line, rules)
        if command.get_command() in rules.navigation:
            groups.append([])
        groups[-1].append(line)

    log.debug("Grouped %d lines into %d layers", len(lines), len(groups))
    return groups


def adjust_layer_order(groups: list[list[str]], rules: ParserRules = PARSER_RULES) -> list[list[str]]:
    """Reorder groups by their navigation commands.

    A #< (layer up) group is inserted just before the most recently placed
    group.  Everything else, including a #< group with nothing placed
    yet, is appended.
    """
    adjusted: list[list[str]] = []
    for group in groups:
        command = leading_command(group[0], rules) if group else Command("", rules)
        if command.is_layer_up() and adjusted:
            adjusted.insert(len(adjusted) - 1, group)
        else:
            adjusted.append(group)
    return adjusted


# ── Cells ──────────────────────────────────────────────────────────

def parse_line(line: str, rules: ParserRules = PARSER_RULES) -> Row:
    """Parse one line into a sparse row of allowed commands.

    Disallowed cells are dropped and leave a gap at their column index.
    """
    row: Row = {}
    for idx, cell in enumerate(split_cells(line.strip())):
        command = Command(cell, rules)
        if command.is_allowed_command():
            row[idx] = command.get_formatted()
    return row


def process_layer_lines(groups: list[list[str]], rules: ParserRules = PARSER_RULES) -> list[Layer]:
    return [[parse_line(line, rules) for line in group] for group in groups]


# ── Area expansion ─────────────────────────────────────────────────

def expand_areas(layers: list[Layer], rules: ParserRules = PARSER_RULES) -> list[Layer]:
    """Replace expansion cells with blocks of the bare symbol, in place.

    ``d(2x2)`` at (row, col) becomes ``d`` at (row, col), (row, col+1),
    (row+1, col) and (row+1, col+1).  Cells are visited top-to-bottom,
    left-to-right over the layer as it was before any expansion, and
    later rectangles overwrite earlier ones.
    """
    for layer in layers:
        snapshot = [dict(row) for row in layer]
        for idx_y, row in enumerate(snapshot):
            for idx_x, cell in row.items():
                command = Command(cell, rules)
                if not command.has_expansion():
                    continue
                _fill(layer, idx_x, idx_y, command)
    return layers


def _fill(layer: Layer, idx_x: int, idx_y: int, command: Command) -> None:
    expansion = command.get_expansion()
    symbol = command.get_command()
    log.debug("Expanding %s at (%d, %d) to %dx%d", symbol, idx_x, idx_y, expansion.x, expansion.y)
    for iy in range(expansion.y):
        y = idx_y + iy
        # Rectangles can run past the last row of the layer
        while len(layer) <= y:
            layer.append({})
        for ix in range(expansion.x):
            layer[y][idx_x + ix] = symbol


# ── Pipeline ───────────────────────────────────────────────────────

def process_lines(lines: list[str], rules: ParserRules = PARSER_RULES) -> list[Layer]:
    """Run all layer stages over the blueprint's data lines."""
    if not lines:
        return []

    groups = group_lines_by_layer(lines, rules)
    groups = adjust_layer_order(groups, rules)
    layers = process_layer_lines(groups, rules)
    return expand_areas(layers, rules)
