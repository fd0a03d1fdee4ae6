"""
FastAPI web server — parse blueprint text posted by a client.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from quickfort.config import DEFAULT_HOST, DEFAULT_PORT
from quickfort.parser import PARSERS, BlueprintError, blueprint_to_dict, get_parser


log = logging.getLogger("quickfort.server")

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="QuickFort")


# ── Models ─────────────────────────────────────────────────────────

class ParseRequest(BaseModel):
    text: str
    kind: str | None = None


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/kinds")
def list_kinds():
    """Blueprint kinds with a dedicated parser."""
    return {"kinds": sorted(PARSERS)}


@app.post("/api/parse")
def parse_blueprint(req: ParseRequest):
    """Parse a blueprint and return its header and layers.

    With a kind, the header keyword must match it.
    """
    try:
        parser = get_parser(req.kind)
        parser.set_blueprint(req.text)
        parser.require_header()
    except BlueprintError as e:
        log.info("Rejected blueprint: %s", e)
        raise HTTPException(400, str(e))
    return blueprint_to_dict(parser)


def main(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
    import uvicorn
    uvicorn.run("quickfort.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
