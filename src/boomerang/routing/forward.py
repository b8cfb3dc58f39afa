"""Path -> params matching.

Direct routes are a single dict lookup. Routes with bindings walk the
trie one segment at a time, preferring the literal edge over the
wildcard edge at every level.
"""

from copy import deepcopy
from typing import Any, Final

from boomerang.routing.segments import join_path, split_path
from boomerang.routing.table import RouteTable, _TrieNode


class _NotFound:
    """Sentinel returned when no route matches a path. Always falsy."""

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = _NotFound()


def url_to_params(table: RouteTable, path: str) -> dict[str, Any] | _NotFound:
    """Resolve *path* against one channel's table.

    Returns a deep copy of the stored params (bound values substituted
    from the path) or ``NOT_FOUND``. Never raises.
    """
    parts = split_path(path)

    direct = table.direct.get(join_path(parts))
    if direct is not None:
        return deepcopy(direct)

    node = _match_node(table.root, parts, 0)
    if node is None or node.leaf is None:
        return NOT_FOUND
    return node.leaf.resolve(parts)


def _match_node(node: _TrieNode, parts: list[str], index: int) -> _TrieNode | None:
    """Recursively walk the trie, returning the node the path ends on."""
    # All parts consumed, only a terminal node is a match
    if index == len(parts):
        return node if node.leaf is not None else None

    part = parts[index]

    child = node.children.get(part)
    if child is None:
        child = node.wildcard
    if child is None:
        return None
    return _match_node(child, parts, index + 1)
