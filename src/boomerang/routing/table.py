"""Per-channel route tables.

Each channel owns three structures, all filled during registration and
only read afterwards:

* a direct map for templates without bindings (exact path -> params),
* a trie for templates with bindings, with literal edges, one wildcard
  edge per node, and an explicit terminal leaf,
* an ordered list of reverse rules used to rebuild URLs from params.

Using the routes::

    client "/blog/{{ id }}/edit"  {_view: "blog/edit", _action: "edit"}
    client "/blog/{{ id }}"       {_view: "blog/show", _action: "show"}
    client "/blog"                {_view: "blog"}

the client table holds::

    direct = {"/blog": {"_view": "blog"}}
    root   = "blog" -> * -> leaf {id: Capture(1), _view: "blog/show", ...}
                          -> "edit" -> leaf {id: Capture(1), _view: "blog/edit", ...}
    rules  = [({id: Present, _view: "blog/edit", ...}, /blog/{{ id }}/edit), ...]
"""

import logging
from collections.abc import Iterator, Mapping
from copy import deepcopy
from types import MappingProxyType
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from boomerang.errors import RoutesFrozenError, UnknownChannelError
from boomerang.routing.patterns import Pattern, pattern_for
from boomerang.routing.segments import Segment, compile_path, join_path

logger = logging.getLogger("boomerang.routing")


class Channel(Enum):
    """Routing namespace: one per HTTP verb, plus client-side only routes."""

    CLIENT = "client"
    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    OPTIONS = "options"

    @classmethod
    def parse(cls, value: "Channel | str") -> "Channel":
        """Resolve a channel from an enum member or a case-insensitive name.

        Raises ``UnknownChannelError`` for names outside the fixed set.
        """
        if isinstance(value, Channel):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownChannelError(value) from None


@dataclass(frozen=True, slots=True)
class Capture:
    """Placeholder for a bound value: the segment at *index* of the path."""

    index: int


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal payload of the trie: the params of a complete route."""

    params: Mapping[str, Any]

    def resolve(self, parts: list[str]) -> dict[str, Any]:
        """Deep-copy the params, replacing each ``Capture`` with its path segment."""
        resolved = deepcopy(dict(self.params))
        for key, value in self.params.items():
            if isinstance(value, Capture):
                resolved[key] = parts[value.index]
        return resolved


class _TrieNode:
    """A node in the route trie. Mutable during registration only."""

    __slots__ = ("children", "leaf", "wildcard")

    def __init__(self) -> None:
        # Literal segment children: "blog" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single binding child, shared by every binding at this depth
        self.wildcard: _TrieNode | None = None
        # Set when a registered path ends at this node
        self.leaf: Leaf | None = None


@dataclass(frozen=True, slots=True)
class ReverseRule:
    """A reverse-match pattern and the template used to rebuild the path."""

    pattern: Pattern
    segments: tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A registered route, kept in registration order for introspection."""

    channel: Channel
    template: str
    params: Mapping[str, Any]
    segments: tuple[Segment, ...] = field(repr=False)

    @property
    def is_direct(self) -> bool:
        return not any(seg.is_binding for seg in self.segments)


class RouteTable:
    """Direct map, trie and reverse rules for one channel.

    Usage::

        table = RouteTable(Channel.CLIENT)
        table.register("/blog/{{ id }}", {"_view": "blog/show"})
        table.freeze()
    """

    __slots__ = ("_frozen", "channel", "direct", "entries", "root", "rules", "warn_on_overwrite")

    def __init__(self, channel: Channel, *, warn_on_overwrite: bool = True) -> None:
        self.channel = channel
        self.warn_on_overwrite = warn_on_overwrite
        self.direct: dict[str, dict[str, Any]] = {}
        self.root = _TrieNode()
        self.rules: list[ReverseRule] = []
        self.entries: list[RouteEntry] = []
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._frozen = True

    def register(self, template: str, params: Mapping[str, Any] | None = None) -> RouteEntry:
        """Add a route to the table. Must be called before freeze()."""
        if self._frozen:
            raise RoutesFrozenError(
                f"Cannot add {self.channel.value} route {template!r}: route tables are frozen."
            )

        # The table owns its params; nothing the caller holds can reach them
        params = {str(key): deepcopy(value) for key, value in (params or {}).items()}
        segments = compile_path(template)
        entry = RouteEntry(
            channel=self.channel,
            template=template,
            params=MappingProxyType(deepcopy(params)),
            segments=segments,
        )

        if entry.is_direct:
            self._add_direct(segments, params)
        else:
            self._add_indirect(template, segments, params)

        bound = tuple(seg.name for seg in segments if seg.name is not None)
        self.rules.append(ReverseRule(pattern=pattern_for(params, bound), segments=segments))
        self.entries.append(entry)

        logger.debug("Registered %s route %r -> %r", self.channel.value, template, params)
        return entry

    def _add_direct(self, segments: tuple[Segment, ...], params: dict[str, Any]) -> None:
        path = join_path(seg.value for seg in segments)
        if path in self.direct:
            self._overwritten(path)
        self.direct[path] = params

    def _add_indirect(
        self,
        template: str,
        segments: tuple[Segment, ...],
        params: dict[str, Any],
    ) -> None:
        node = self.root
        leaf_params: dict[str, Any] = dict(params)

        for index, seg in enumerate(segments):
            if seg.name is not None:
                leaf_params[seg.name] = Capture(index)
                if node.wildcard is None:
                    node.wildcard = _TrieNode()
                node = node.wildcard
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        if node.leaf is not None:
            self._overwritten(template)
        node.leaf = Leaf(params=leaf_params)

    def _overwritten(self, path: str) -> None:
        if self.warn_on_overwrite:
            logger.warning(
                "%s route %r registered twice; the later registration wins",
                self.channel.value,
                path,
            )


class RouteTables:
    """One ``RouteTable`` per channel."""

    __slots__ = ("_tables",)

    def __init__(self, *, warn_on_overwrite: bool = True) -> None:
        self._tables: dict[Channel, RouteTable] = {
            channel: RouteTable(channel, warn_on_overwrite=warn_on_overwrite) for channel in Channel
        }

    def __getitem__(self, channel: Channel | str) -> RouteTable:
        return self._tables[Channel.parse(channel)]

    def get(self, channel: Channel | str) -> RouteTable | None:
        """Return the table for *channel*, or ``None`` for unknown names."""
        try:
            return self[channel]
        except UnknownChannelError:
            return None

    def __iter__(self) -> Iterator[RouteTable]:
        return iter(self._tables.values())

    def register(
        self,
        channel: Channel | str,
        template: str,
        params: Mapping[str, Any] | None = None,
    ) -> RouteEntry:
        return self[channel].register(template, params)

    def freeze(self) -> None:
        for table in self._tables.values():
            table.freeze()

    @property
    def entries(self) -> list[RouteEntry]:
        """All registered routes, grouped by channel in registration order."""
        return [entry for table in self._tables.values() for entry in table.entries]
