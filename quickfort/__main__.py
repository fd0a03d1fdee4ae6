"""
QuickFort — entry point.

Usage:
    python -m quickfort parse FILE                  # JSON header + layers
    python -m quickfort parse FILE --kind dig       # require a #dig header
    python -m quickfort parse FILE --format grid    # dense CSV-like grid
    python -m quickfort serve                       # start web server on :8000
    python -m quickfort serve --port 3000
"""

import json
import logging
import sys
from pathlib import Path

from quickfort.config import DEFAULT_HOST, DEFAULT_PORT, LOG_LEVEL

USAGE = (
    "Usage: python -m quickfort parse FILE [--kind KIND] [--format json|grid]\n"
    "       python -m quickfort serve [--port PORT] [--host HOST]"
)

log = logging.getLogger("quickfort")


def _option(args: list[str], name: str, default=None):
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def parse_file(args: list[str]) -> int:
    from quickfort.parser import BlueprintError, blueprint_to_dict, get_parser, layers_to_grid

    if not args or args[0].startswith("--"):
        print(USAGE, file=sys.stderr)
        return 1

    path = Path(args[0])
    kind = _option(args, "--kind")
    fmt = _option(args, "--format", "json")
    if fmt not in ("json", "grid"):
        print(f"Unknown format: {fmt}", file=sys.stderr)
        return 1

    try:
        text = path.read_text(encoding="utf-8")
        parser = get_parser(kind)
        parser.set_blueprint(text)
        parser.require_header()
    except (OSError, BlueprintError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.info("Parsed %s: %d layers", path, len(parser.get_layers()))
    if fmt == "grid":
        print(layers_to_grid(parser.get_layers()))
    else:
        print(json.dumps(blueprint_to_dict(parser), indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    cmd = args[0] if args else ""

    if cmd == "parse":
        return parse_file(args[1:])

    if cmd == "serve":
        port = int(_option(args, "--port", DEFAULT_PORT))
        host = _option(args, "--host", DEFAULT_HOST)

        from quickfort.web.server import main as serve
        serve(host=host, port=port)
        return 0

    print(f"Unknown command: {cmd}" if cmd else USAGE, file=sys.stderr)
    if cmd:
        print(USAGE, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
