"""Route declaration and lookup.

Mutable during setup (route registration). Frozen on the first lookup,
or explicitly via ``freeze()``; lookups then only read the tables.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from boomerang.config import RoutesConfig
from boomerang.errors import ConfigurationError, RoutesFrozenError
from boomerang.routing.forward import NOT_FOUND, _NotFound
from boomerang.routing.forward import url_to_params as _url_to_params
from boomerang.routing.reverse import params_to_url as _params_to_url
from boomerang.routing.segments import path_with_id
from boomerang.routing.table import Channel, RouteEntry, RouteTables

logger = logging.getLogger("boomerang.routing")


class RestEndpoint(Enum):
    """The conventional endpoints generated by ``Routes.rest()``."""

    INDEX = "index"
    SHOW = "show"
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"
    OPTIONS = "options"

    @classmethod
    def parse(cls, value: "RestEndpoint | str") -> "RestEndpoint":
        if isinstance(value, RestEndpoint):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(e.value for e in cls)
            msg = f"Unknown REST endpoint {value!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg) from None


def _rest_route(endpoint: RestEndpoint, base_path: str) -> tuple[Channel, str]:
    """Channel and path template for one REST endpoint."""
    match endpoint:
        case RestEndpoint.INDEX:
            return Channel.GET, base_path
        case RestEndpoint.CREATE:
            return Channel.POST, base_path
        case RestEndpoint.SHOW:
            return Channel.GET, path_with_id(base_path)
        case RestEndpoint.UPDATE:
            return Channel.PUT, path_with_id(base_path)
        case RestEndpoint.DESTROY:
            return Channel.DELETE, path_with_id(base_path)
        case RestEndpoint.OPTIONS:
            return Channel.OPTIONS, base_path


def _merge(params: Mapping[str, Any] | None, extra: Mapping[str, Any]) -> dict[str, Any]:
    """Combine a params mapping with keyword params; keywords win."""
    return {**(params or {}), **extra}


class Routes:
    """A set of bidirectional routes.

    Usage::

        routes = Routes()
        routes.client("/about", _view="about")
        routes.client("/blog/{{ id }}/edit", _view="blog/edit", _action="edit")
        routes.rest("/api/posts", {"controller": "posts"})

        routes.url_to_params("/blog/42/edit")
        # {"_view": "blog/edit", "_action": "edit", "id": "42"}

        routes.params_to_url({"_view": "blog/edit", "_action": "edit", "id": 42, "page": 2})
        # ("/blog/42/edit", {"page": 2})

    Thread safety:
        Registration is single-threaded (setup code at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread freezes the tables; frozen tables are safe to read from
        any number of threads.
    """

    __slots__ = ("_default_channel", "_freeze_lock", "_frozen", "_tables", "config")

    def __init__(self, config: RoutesConfig | None = None) -> None:
        self.config: RoutesConfig = config or RoutesConfig()
        self._default_channel: Channel = Channel.parse(self.config.default_channel)
        self._tables = RouteTables(warn_on_overwrite=self.config.warn_on_overwrite)
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def register(
        self,
        channel: Channel | str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> RouteEntry:
        """Register *path* on *channel* with the given fixed params.

        Raises ``UnknownChannelError`` for an unknown channel and
        ``RoutesFrozenError`` once the routes are frozen.
        """
        self._check_not_frozen()
        return self._tables.register(channel, path, params)

    def define(self, func: Callable[["Routes"], Any]) -> "Routes":
        """Run a block of declarations against these routes.

        Usable as a decorator::

            @routes.define
            def _(r):
                r.client("/about", _view="about")
        """
        func(self)
        return self

    def client(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        """Register a client-side route.

        Fixed params come from the optional *params* mapping and from
        keywords, so keys such as ``path`` or ``data-id`` are allowed::

            routes.client("/files", {"path": "root"}, _view="files")
        """
        return self.register(Channel.CLIENT, path, _merge(params, extra))

    def get(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        return self.register(Channel.GET, path, _merge(params, extra))

    def post(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        return self.register(Channel.POST, path, _merge(params, extra))

    def put(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        return self.register(Channel.PUT, path, _merge(params, extra))

    def patch(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        return self.register(Channel.PATCH, path, _merge(params, extra))

    def delete(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        return self.register(Channel.DELETE, path, _merge(params, extra))

    def options(self, path: str, params: Mapping[str, Any] | None = None, /, **extra: Any) -> RouteEntry:
        return self.register(Channel.OPTIONS, path, _merge(params, extra))

    def rest(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        only: Iterable[RestEndpoint | str] | None = None,
        exclude: Iterable[RestEndpoint | str] | None = None,
    ) -> list[RouteEntry]:
        """Register the conventional REST endpoints for *path*.

        Generates up to six routes, each with ``action`` set to the
        endpoint name: index (GET), create (POST), options (OPTIONS) on
        *path*; show (GET), update (PUT), destroy (DELETE) on
        ``path/{{ id }}``. *only* and *exclude* select the subset.

        Raises ``ConfigurationError`` for unknown endpoint names.
        """
        endpoints = [RestEndpoint.parse(e) for e in only] if only is not None else list(RestEndpoint)
        excluded = {RestEndpoint.parse(e) for e in exclude or ()}

        entries: list[RouteEntry] = []
        for endpoint in endpoints:
            if endpoint in excluded:
                continue
            channel, template = _rest_route(endpoint, path)
            entries.append(self.register(channel, template, {**(params or {}), "action": endpoint.value}))
        return entries

    @property
    def routes(self) -> list[RouteEntry]:
        """All registered routes, grouped by channel in registration order."""
        return self._tables.entries

    # -- Lookups --

    def url_to_params(self, *args: Channel | str) -> dict[str, Any] | _NotFound:
        """Resolve a path to its params.

        Accepts ``(path)`` or ``(channel, path)``; the channel defaults to
        ``config.default_channel``. Returns ``NOT_FOUND`` when nothing
        matches, including for an unknown channel.
        """
        if len(args) == 1:
            channel, path = self._default_channel, args[0]
        elif len(args) == 2:
            channel, path = args
        else:
            msg = f"url_to_params() takes a path and an optional channel, got {len(args)} arguments"
            raise TypeError(msg)

        self._ensure_frozen()
        table = self._tables.get(channel)
        if table is None:
            return NOT_FOUND
        return _url_to_params(table, str(path))

    def params_to_url(self, params: Mapping[Any, Any]) -> tuple[str, dict[str, Any]] | tuple[None, None]:
        """Build the path for *params*.

        An optional ``method`` key selects the channel. Returns
        ``(path, leftover_params)`` or ``(None, None)`` when no route
        matches.
        """
        self._ensure_frozen()
        return _params_to_url(self._tables, params, self._default_channel)

    # -- Freezing --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Freeze the route tables. Safe to call more than once."""
        self._ensure_frozen()

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._tables.freeze()
            self._frozen = True
            logger.debug("Froze route tables with %d routes", len(self._tables.entries))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RoutesFrozenError(
                "Cannot register routes after the first lookup. "
                "Declare every route before calling url_to_params() or params_to_url()."
            )

