"""Params -> path matching.

Reverse rules are tried in registration order; the first rule whose
pattern the params satisfy rebuilds the path. Whatever the pattern and
the bindings did not consume is handed back so the caller can append it
as a query string.
"""

from collections.abc import Mapping
from typing import Any

from boomerang.routing.patterns import consume
from boomerang.routing.segments import SEPARATOR, Segment, join_path
from boomerang.routing.table import Channel, RouteTables

METHOD_KEY = "method"


def build_path(
    segments: tuple[Segment, ...],
    params: Mapping[str, Any],
) -> tuple[str, dict[str, Any]] | None:
    """Rebuild a path from a compiled template.

    Literal segments are emitted as-is; each binding takes (and removes)
    its value from a copy of *params*. Returns ``(path, leftover)``, or
    ``None`` when a bound value is empty or contains ``/``: such a path
    would not resolve back to the same params.
    """
    leftover = dict(params)
    parts: list[str] = []
    for seg in segments:
        if seg.name is None:
            parts.append(seg.value)
        else:
            value = str(params[seg.name])
            if not value or SEPARATOR in value:
                return None
            parts.append(value)
            leftover.pop(seg.name, None)
    return join_path(parts), leftover


def params_to_url(
    tables: RouteTables,
    params: Mapping[Any, Any],
    default_channel: Channel = Channel.CLIENT,
) -> tuple[str, dict[str, Any]] | tuple[None, None]:
    """Find the first reverse rule satisfied by *params* and build its path.

    A rule whose bound values cannot form a path segment is skipped.

    An optional ``method`` key selects the channel. Returns
    ``(path, leftover)`` or ``(None, None)``. *params* is not mutated and
    this never raises.
    """
    normalized = {str(key): value for key, value in params.items()}
    method = normalized.pop(METHOD_KEY, None)

    table = tables.get(method) if method is not None else tables[default_channel]
    if table is None:
        return None, None

    for rule in table.rules:
        remaining = consume(rule.pattern, normalized)
        if remaining is None:
            continue
        built = build_path(rule.segments, remaining)
        if built is not None:
            return built

    return None, None
