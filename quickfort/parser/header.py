"""Header parsing — split blueprint text into lines and read line one.

Header line format:
    #<keyword>[ |,][start(X;Y[;comment])][ comment][,,,]

    #dig
    #dig start(3; 3; Center tile) Stairs down to a small room,,,
"""

from __future__ import annotations

from quickfort.config import PARSER_RULES, ParserRules

from .models import Header, HeaderError, StartPosition


def text_to_lines(text: str | None) -> list[str]:
    """Split blueprint text on newlines, trimming each line.

    Empty or whitespace-only text has no lines at all.
    """
    if not text or not text.strip():
        return []
    return [line.strip() for line in text.split("\n")]


def parse_header(line: str, rules: ParserRules = PARSER_RULES) -> Header:
    """Parse the first blueprint line into a Header.

    A line without the header marker gives an all-empty Header.
    Raises HeaderError for a malformed ``start(...)`` block.
    """
    line = line.strip()
    if not line.startswith(rules.header_marker):
        return Header()

    line = line[len(rules.header_marker):].strip()

    # Keyword ends at the first space or comma, else runs to end of line
    ends = [pos for pos in (line.find(" "), line.find(",")) if pos != -1]
    end = min(ends, default=len(line))
    command = line[:end].strip().lower()
    line = line[end:].strip()

    start = None
    if line.startswith(rules.start_keyword):
        start, line = _parse_start(line, rules)

    # Header might be CSV formatted, so clean the commas off the comment ends
    comment = line.strip().strip(",").strip() or None

    return Header(command=command, start=start, comment=comment)


def _parse_start(line: str, rules: ParserRules) -> tuple[StartPosition, str]:
    """Parse ``start(X;Y;comment)`` at the head of *line*.

    Returns the start position and the text following the closing paren.
    """
    close = line.find(")")
    if close == -1:
        raise HeaderError(f"Unterminated start block in header: {line!r}")

    body = line[len(rules.start_keyword):close]
    fields = body.split(rules.start_separator)
    if len(fields) not in (2, 3):
        raise HeaderError(
            f"Start block needs 'x{rules.start_separator}y[{rules.start_separator}comment]', "
            f"got {body!r}"
        )

    try:
        x, y = int(fields[0].strip()), int(fields[1].strip())
    except ValueError:
        raise HeaderError(f"Start block coordinates must be integers, got {body!r}") from None

    comment = fields[2].strip() if len(fields) == 3 else ""
    return StartPosition(x=x, y=y, comment=comment or None), line[close + 1:].strip()
