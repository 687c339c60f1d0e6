"""Shared argument handling for ziggy subcommands."""

import argparse
import sys

from ziggy.cli._resolve import resolve_config, resolve_router
from ziggy.config import ZiggyConfig
from ziggy.errors import ConfigurationError
from ziggy.ziggy import Ziggy


def add_export_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the arguments every exporting subcommand accepts."""
    parser.add_argument("app", help="Import string for the router (e.g. myapp:router)")
    parser.add_argument("--url", default=None, help="Base URL of the application")
    parser.add_argument(
        "--group",
        action="append",
        default=None,
        help="Only export routes in this configured group (repeatable)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Import string for a ZiggyConfig (e.g. myapp.settings:ziggy)",
    )


def build_ziggy(args: argparse.Namespace) -> Ziggy:
    """Resolve ``args`` into a Ziggy export, exiting with status 1 on failure."""
    try:
        router = resolve_router(args.app)
        config = resolve_config(args.config) if args.config else ZiggyConfig()
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    group = args.group[0] if args.group and len(args.group) == 1 else args.group
    try:
        return Ziggy(router, group=group, url=args.url, config=config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
