"""Locate the Routes a CLI command should inspect.

``TARGET`` is ``module`` or ``module:attribute``; the attribute defaults
to ``routes`` and may name a zero-argument factory. The resolved routes
are frozen before they are returned, so every subcommand reads the same
immutable tables a running application would.
"""

import importlib
import logging
import sys
from collections.abc import Callable

from boomerang.errors import ConfigurationError
from boomerang.routes import Routes

logger = logging.getLogger("boomerang.cli")

DEFAULT_ATTRIBUTE = "routes"


def _from_factory(target: str, factory: Callable[[], object]) -> Routes:
    try:
        built = factory()
    except Exception as exc:
        msg = f"Routes factory {target!r} failed: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(built, Routes):
        msg = f"Routes factory {target!r} returned {type(built).__name__}, expected Routes"
        raise ConfigurationError(msg)
    return built


def resolve_routes(target: str) -> Routes:
    """Import *target* and return its frozen Routes.

    Raises ``ConfigurationError`` when the module cannot be imported, the
    attribute is missing, or it is neither Routes nor a factory of Routes.
    """
    module_name, _, attribute = target.partition(":")
    attribute = attribute or DEFAULT_ATTRIBUTE

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import routes module {module_name!r}: {exc}"
        raise ConfigurationError(msg) from exc

    if not hasattr(module, attribute):
        msg = f"Module {module_name!r} has no {attribute!r} attribute"
        raise ConfigurationError(msg)

    match getattr(module, attribute):
        case Routes() as routes:
            pass
        case factory if callable(factory):
            routes = _from_factory(target, factory)
        case other:
            msg = f"{target!r} is a {type(other).__name__}, not Routes or a Routes factory"
            raise ConfigurationError(msg)

    routes.freeze()
    logger.debug("Loaded %d routes from %s", len(routes.routes), target)
    return routes


def load_routes(target: str) -> Routes:
    """``resolve_routes`` for CLI use: report the error and exit with status 1."""
    try:
        return resolve_routes(target)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
