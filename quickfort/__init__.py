"""QuickFort blueprint parsing.

Stages:

  header  — read the #<keyword> line (kind, start position, comment)
  layers  — group lines on #< / #> rows and reorder them
  cells   — keep allowed commands, drop no-ops and comments
  expand  — turn d(3x3) cells into blocks of individual cells
"""

__version__ = "0.1.0"
