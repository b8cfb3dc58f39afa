"""``boomerang match`` and ``boomerang url`` — one-off lookups.

``match`` resolves a path to params and prints them as JSON.
``url`` builds a path from ``key=value`` pairs, appending any leftover
params as a query string.
"""

import argparse
import json
import logging
import sys
from urllib.parse import urlencode

from boomerang.cli._resolve import load_routes
from boomerang.routing.forward import NOT_FOUND
from boomerang.routing.reverse import METHOD_KEY

logger = logging.getLogger("boomerang.cli")


def _parse_pairs(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: expected key=value, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        params[key] = value
    return params


def run_match(args: argparse.Namespace) -> None:
    """Print the params for ``args.path``; exit 1 when nothing matches."""
    routes = load_routes(args.app)
    channel = args.channel or routes.config.default_channel

    params = routes.url_to_params(channel, args.path)
    if params is NOT_FOUND:
        print(f"No route matches {channel} {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps(params, indent=2, sort_keys=True, default=str))


def run_url(args: argparse.Namespace) -> None:
    """Print the URL for ``args.params``; exit 1 when nothing matches."""
    routes = load_routes(args.app)

    params = _parse_pairs(args.params)
    params[METHOD_KEY] = args.channel or routes.config.default_channel
    logger.debug("Building URL for %r", params)

    path, leftover = routes.params_to_url(params)
    if path is None:
        print("No route matches the given params", file=sys.stderr)
        raise SystemExit(1)

    if leftover:
        path = f"{path}?{urlencode(leftover)}"
    print(path)
