"""Blueprint test fixtures — small hand-written dig blueprints.

  SIMPLE_DIG      one layer with no-ops and comments in between commands
  STAIRS_DOWN     a #> layer below the first one
  UP_AND_DOWN     #> then #< : the up layer lands between the other two
  TWO_UPS         two #< layers, each placed behind the previous one
  AREA_DIG        a single d(3x3) cell expanded to a 3x3 block
"""

from __future__ import annotations


def blueprint(*lines: str) -> str:
    return "\n".join(lines)


SIMPLE_DIG = blueprint(
    "#dig",
    "d,d,d,#",
    "d,~,i,#",
    "j,`,d,#",
    "#,#,#,#",
)

STAIRS_DOWN = blueprint(
    "#dig Stairs leading down to a small room below",
    "j,`,`,#",
    "`,`,`,#",
    "`,`,`,#",
    "#>,#,#,#",
    "u,d,d,#",
    "d,d,d,#",
    "d,d,d,#",
    "#,#,#,#",
)

UP_AND_DOWN = blueprint(
    "# dig",
    "`,`,`,#",
    "j,`,j,#",
    "`,`,`,#",
    "#>,#,#,#",
    "u,d,d,#",
    "d,d,d,#",
    "d,d,d,#",
    "#<,#,#,#",
    "j,d,j,#",
    "j,d,j,#",
    "d,j,d,#",
    "#,#,#,#",
)

TWO_UPS = blueprint(
    "#dig Stairs leading down to a small room below",
    "j,`,`,#",
    "`,`,`,#",
    "`,`,`,#",
    "#<,#,#,#",
    "d,j,i,#",
    "d,d,d,#",
    "d,d,d,#",
    "#,#,#,#",
    "#<,#,#,#",
    "u,u,u,#",
    "d,d,d,#",
    "d,d,d,#",
    "#,#,#,#",
)

AREA_DIG = blueprint(
    "#dig",
    "d(3x3),#",
    "~,~,~,#",
    "`,`,`,#",
    "#,#,#,#",
)
