"""Blueprint parser — commands, header, layers, and serialization.

Submodules:
  models         Header / StartPosition / Expansion dataclasses and errors.
  command        Single-cell command tokens and their classification.
  header         Line splitting and header-line parsing.
  layers         Grouping, reordering, cell filtering and area expansion.
  blueprint      BlueprintParser, kind subclasses and the kind registry.
  serialization  JSON conversion and text-grid rendering.
"""

from .models import (
    Expansion, StartPosition, Header, Row, Layer,
    BlueprintError, HeaderError, BlueprintKindError, CellError,
)
from .command import Command
from .header import parse_header, text_to_lines
from .layers import (
    group_lines_by_layer, adjust_layer_order, parse_line,
    process_layer_lines, expand_areas, process_lines, split_cells,
)
from .blueprint import BlueprintParser, Dig, PARSERS, get_parser
from .serialization import (
    header_to_dict, parse_header_dict, layers_to_dict, parse_layers,
    blueprint_to_dict, layers_to_grid,
)

__all__ = [
    # Models
    "Expansion", "StartPosition", "Header", "Row", "Layer",
    "BlueprintError", "HeaderError", "BlueprintKindError", "CellError",
    # Parsing
    "Command", "parse_header", "text_to_lines",
    "group_lines_by_layer", "adjust_layer_order", "parse_line",
    "process_layer_lines", "expand_areas", "process_lines", "split_cells",
    # Parsers
    "BlueprintParser", "Dig", "PARSERS", "get_parser",
    # Serialization
    "header_to_dict", "parse_header_dict", "layers_to_dict", "parse_layers",
    "blueprint_to_dict", "layers_to_grid",
]
