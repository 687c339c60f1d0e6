"""``ziggy generate`` — write the route table to a file.

Resolves the route source, builds the export, and writes an ES module
(or plain JSON with ``--json``) for client-side bundles.
"""

import argparse
import logging
import sys
from pathlib import Path

from ziggy.cli._common import build_ziggy
from ziggy.output import routes_module
from ziggy.serializer import to_json

logger = logging.getLogger("ziggy.cli")

DEFAULT_PATH = "resources/js/ziggy.js"
DEFAULT_JSON_PATH = "resources/js/ziggy.json"


def run_generate(args: argparse.Namespace) -> None:
    """Write the route export for ``args.app`` to ``args.path``."""
    snapshot = build_ziggy(args).snapshot()

    if args.json:
        content = to_json(snapshot, indent=2) + "\n"
        path = Path(args.path or DEFAULT_JSON_PATH)
    else:
        content = routes_module(snapshot)
        path = Path(args.path or DEFAULT_PATH)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write {path}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug("Wrote %d bytes to %s", len(content), path)
    print(f"Ziggy route file generated: {path} ({len(snapshot.routes)} routes)")
