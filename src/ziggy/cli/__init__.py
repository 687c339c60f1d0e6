"""Ziggy CLI — export an application's named routes.

Entry point registered as ``ziggy`` in ``pyproject.toml``::

    [project.scripts]
    ziggy = "ziggy.cli:main"
"""

import argparse
import logging
import sys

from ziggy.cli._common import add_export_arguments


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``ziggy`` command."""
    parser = argparse.ArgumentParser(
        prog="ziggy",
        description="Ziggy — export named routes for client-side URL generation.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- ziggy generate ---------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Write the route file")
    add_export_arguments(generate_parser)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Output file (default: resources/js/ziggy.js)",
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Write plain JSON instead of an ES module",
    )

    # -- ziggy routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List exported routes")
    add_export_arguments(routes_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        from ziggy.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from ziggy.cli._routes import run_routes

        run_routes(args)
