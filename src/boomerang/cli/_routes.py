"""``boomerang routes`` — list registered routes.

One row per registration, in the order lookups see them: grouped by
channel, then registration order within a channel.
"""

import argparse
from collections.abc import Sequence

from boomerang.cli._resolve import load_routes
from boomerang.routing.table import RouteEntry

HEADERS = ("CHANNEL", "PATH", "PARAMS")


def _row(entry: RouteEntry) -> tuple[str, str, str]:
    params = " ".join(f"{key}={value!r}" for key, value in entry.params.items())
    kind = "" if entry.is_direct else " *"
    return entry.channel.value.upper(), entry.template + kind, params


def render_table(rows: Sequence[tuple[str, str, str]]) -> str:
    """Left-align the first two columns; the last column runs free."""
    table = [HEADERS, *rows]
    channel_width = max(len(row[0]) for row in table)
    path_width = max(len(row[1]) for row in table)
    rule = ("-" * channel_width, "-" * path_width, "-" * len(HEADERS[2]))
    lines = [
        f"{channel:<{channel_width}}  {path:<{path_width}}  {params}".rstrip()
        for channel, path, params in (table[0], rule, *table[1:])
    ]
    return "\n".join(lines)


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table; ``*`` marks routes with bindings."""
    entries = load_routes(args.app).routes
    if args.channel:
        entries = [e for e in entries if e.channel.value == args.channel]

    if not entries:
        print("No routes registered.")
        return

    print(render_table([_row(e) for e in entries]))
