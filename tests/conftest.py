"""Shared fixtures for the boomerang test suite."""

import sys
import types

import pytest

from boomerang.config import RoutesConfig
from boomerang.routes import Routes


def _build_routes() -> Routes:
    routes = Routes()
    routes.client("/about", _view="about")
    routes.client("/blog", _view="blog")
    routes.client("/blog/{{ id }}/edit", _view="blog/edit", _action="edit")
    routes.rest("/api/posts", {"controller": "posts"}, only=["index", "show"])
    return routes


@pytest.fixture
def fake_routes_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    """Register a fake module exposing Routes instances on sys.modules."""
    mod = types.ModuleType("_fake_boomerang_routes")
    mod.routes = _build_routes()  # type: ignore[attr-defined]
    mod.custom = _build_routes()  # type: ignore[attr-defined]
    mod.empty = Routes()  # type: ignore[attr-defined]
    mod.make_routes = _build_routes  # type: ignore[attr-defined]
    mod.not_routes = "just a string"  # type: ignore[attr-defined]
    mod.not_a_factory = lambda: "nope"  # type: ignore[attr-defined]

    get_routes = Routes(RoutesConfig(default_channel="get"))
    get_routes.get("/status", action="status")
    mod.get_default = get_routes  # type: ignore[attr-defined]

    def broken_factory() -> Routes:
        msg = "boom"
        raise RuntimeError(msg)

    mod.broken = broken_factory  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_boomerang_routes", mod)
    return mod
