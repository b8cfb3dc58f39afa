"""Boomerang — bidirectional URL routing.

Maps paths to params and params back to paths, per channel (one per
HTTP verb, plus a client-side only channel).

Basic usage::

    from boomerang import Routes

    routes = Routes()
    routes.client("/blog", _view="blog")
    routes.client("/blog/{{ id }}/edit", _view="blog/edit", _action="edit")

    routes.url_to_params("/blog/42/edit")
    # {"_view": "blog/edit", "_action": "edit", "id": "42"}

    routes.params_to_url({"_view": "blog/edit", "_action": "edit", "id": "42"})
    # ("/blog/42/edit", {})
"""

__version__ = "0.1.0-dev"
__all__ = [
    "NOT_FOUND",
    "BoomerangError",
    "Channel",
    "ConfigurationError",
    "RestEndpoint",
    "Routes",
    "RoutesConfig",
    "RoutesFrozenError",
    "UnknownChannelError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import boomerang`` fast while providing a clean top-level API.
    """
    if name in ("Routes", "RestEndpoint"):
        from boomerang import routes as _routes

        return getattr(_routes, name)

    if name == "RoutesConfig":
        from boomerang.config import RoutesConfig

        return RoutesConfig

    if name == "Channel":
        from boomerang.routing.table import Channel

        return Channel

    if name == "NOT_FOUND":
        from boomerang.routing.forward import NOT_FOUND

        return NOT_FOUND

    if name in ("BoomerangError", "ConfigurationError", "RoutesFrozenError", "UnknownChannelError"):
        from boomerang import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
