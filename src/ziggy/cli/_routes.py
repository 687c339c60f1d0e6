"""``ziggy routes`` — list the routes an export would contain.

Prints NAME, METHOD, URI, and resolved bindings for every route that
survives filtering.
"""

import argparse

from ziggy.cli._common import build_ziggy


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of the exported routes for ``args.app``."""
    snapshot = build_ziggy(args).snapshot()
    if not snapshot.routes:
        print("No routes exported.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for name, route in snapshot.routes.items():
        uri = f"{route.domain}/{route.uri}" if route.domain else route.uri
        bindings = ", ".join(f"{param}:{field}" for param, field in route.bindings.items())
        rows.append((name, "|".join(route.methods), uri, bindings))

    widths = [max(len(r[i]) for r in rows) for i in range(3)]
    widths = [max(w, len(h)) for w, h in zip(widths, ("NAME", "METHOD", "URI"), strict=True)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("NAME", "METHOD", "URI", "BINDINGS").rstrip())
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
