"""Boomerang CLI — inspect a route table and run one-off lookups.

Entry point registered as ``boomerang`` in ``pyproject.toml``::

    [project.scripts]
    boomerang = "boomerang.cli:main"
"""

import argparse
import sys

from boomerang.routing.table import Channel

_CHANNELS = [c.value for c in Channel]


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``boomerang`` command."""
    parser = argparse.ArgumentParser(
        prog="boomerang",
        description="Boomerang — bidirectional URL routing.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- boomerang routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:routes)")
    routes_parser.add_argument(
        "--channel",
        choices=_CHANNELS,
        default=None,
        help="Only list routes on this channel",
    )

    # -- boomerang match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a path to its params")
    match_parser.add_argument("app", help="Import string (e.g. myapp:routes)")
    match_parser.add_argument("path", help="Path to resolve (e.g. /blog/42)")
    match_parser.add_argument(
        "--channel",
        choices=_CHANNELS,
        default=None,
        help="Channel to match on (default: the routes' configured default channel)",
    )

    # -- boomerang url ----------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Build a path from params")
    url_parser.add_argument("app", help="Import string (e.g. myapp:routes)")
    url_parser.add_argument("params", nargs="*", metavar="key=value", help="Params to match")
    url_parser.add_argument(
        "--channel",
        choices=_CHANNELS,
        default=None,
        help="Channel to build for (default: the routes' configured default channel)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from boomerang.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from boomerang.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from boomerang.cli._match import run_url

        run_url(args)
