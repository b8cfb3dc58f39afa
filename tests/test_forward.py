"""Tests for boomerang.routing.forward — path to params matching."""

import pytest

from boomerang.routing.forward import NOT_FOUND, url_to_params
from boomerang.routing.table import Channel, RouteTable


def _table(*routes: tuple[str, dict[str, object]]) -> RouteTable:
    table = RouteTable(Channel.CLIENT)
    for path, params in routes:
        table.register(path, params)
    table.freeze()
    return table


class TestNotFound:
    def test_falsy(self) -> None:
        assert not NOT_FOUND

    def test_repr(self) -> None:
        assert repr(NOT_FOUND) == "NOT_FOUND"


class TestDirectRoutes:
    def test_hit(self) -> None:
        table = _table(("/blog", {"_view": "blog"}))
        assert url_to_params(table, "/blog") == {"_view": "blog"}

    def test_root(self) -> None:
        table = _table(("/", {"_view": "home"}))
        assert url_to_params(table, "/") == {"_view": "home"}

    def test_trailing_slash_ignored(self) -> None:
        table = _table(("/blog", {"_view": "blog"}))
        assert url_to_params(table, "/blog/") == {"_view": "blog"}

    def test_returns_copy(self) -> None:
        table = _table(("/blog", {"_view": "blog"}))
        result = url_to_params(table, "/blog")
        assert isinstance(result, dict)
        result["_view"] = "changed"
        assert url_to_params(table, "/blog") == {"_view": "blog"}

    def test_empty_params_is_still_a_match(self) -> None:
        table = _table(("/about", {}))
        assert url_to_params(table, "/about") == {}

    def test_direct_beats_wildcard(self) -> None:
        table = _table(
            ("/blog/{{ id }}", {"_view": "blog/show"}),
            ("/blog/new", {"_view": "blog/new"}),
        )
        assert url_to_params(table, "/blog/new") == {"_view": "blog/new"}
        assert url_to_params(table, "/blog/7") == {"_view": "blog/show", "id": "7"}


class TestIndirectRoutes:
    def test_binding(self) -> None:
        table = _table(("/blog/{{ id }}/edit", {"_view": "blog/edit", "_action": "edit"}))
        assert url_to_params(table, "/blog/42/edit") == {
            "id": "42",
            "_view": "blog/edit",
            "_action": "edit",
        }

    def test_multiple_bindings(self) -> None:
        table = _table(("/{{ user }}/posts/{{ post }}", {"_view": "post"}))
        assert url_to_params(table, "/alice/posts/9") == {
            "user": "alice",
            "post": "9",
            "_view": "post",
        }

    def test_leading_binding(self) -> None:
        table = _table(("/{{ _name }}", {"_view": "cool"}))
        assert url_to_params(table, "/anything") == {"_view": "cool", "_name": "anything"}

    def test_literal_beats_wildcard(self) -> None:
        table = _table(
            ("/blog/{{ id }}/edit", {"_view": "blog/edit"}),
            ("/blog/{{ id }}/{{ tab }}", {"_view": "blog/tab"}),
        )
        assert url_to_params(table, "/blog/1/edit") == {"_view": "blog/edit", "id": "1"}
        assert url_to_params(table, "/blog/1/comments") == {
            "_view": "blog/tab",
            "id": "1",
            "tab": "comments",
        }

    def test_no_backtracking_into_wildcard(self) -> None:
        table = _table(
            ("/blog/{{ id }}/edit", {"_view": "blog/edit"}),
            ("/{{ section }}/new/{{ id }}", {"_view": "new"}),
        )
        # "blog" has a literal edge, so the wildcard at the root is never tried
        assert url_to_params(table, "/blog/new/5") is NOT_FOUND

    def test_prefix_without_terminal(self) -> None:
        table = _table(("/blog/{{ id }}/edit", {"_view": "blog/edit"}))
        assert url_to_params(table, "/blog/42") is NOT_FOUND

    def test_too_long(self) -> None:
        table = _table(("/blog/{{ id }}", {"_view": "blog/show"}))
        assert url_to_params(table, "/blog/42/edit/more") is NOT_FOUND

    def test_duplicate_separators(self) -> None:
        table = _table(("/blog/{{ id }}", {"_view": "blog/show"}))
        assert url_to_params(table, "//blog//42/") == {"_view": "blog/show", "id": "42"}


class TestNotFoundPaths:
    @pytest.mark.parametrize("path", ["/nonexistent", "", "/", "/blog/1/2/3"])
    def test_returns_sentinel(self, path: str) -> None:
        table = _table(("/blog", {"_view": "blog"}), ("/blog/{{ id }}", {"_view": "blog/show"}))
        assert url_to_params(table, path) is NOT_FOUND

    def test_empty_table(self) -> None:
        assert url_to_params(_table(), "/anything") is NOT_FOUND


class TestResultIsolation:
    def test_nested_direct_value(self) -> None:
        table = _table(("/admin", {"_controller": {"name": "admin"}}))
        result = url_to_params(table, "/admin")
        assert isinstance(result, dict)
        result["_controller"]["name"] = "changed"

        assert url_to_params(table, "/admin") == {"_controller": {"name": "admin"}}

    def test_nested_indirect_value(self) -> None:
        table = _table(("/admin/{{ id }}", {"_controller": {"name": "admin"}}))
        result = url_to_params(table, "/admin/1")
        assert isinstance(result, dict)
        result["_controller"]["name"] = "changed"

        assert url_to_params(table, "/admin/2") == {"_controller": {"name": "admin"}, "id": "2"}

    def test_entry_params_cannot_reach_lookups(self) -> None:
        table = RouteTable(Channel.CLIENT)
        entry = table.register("/admin/{{ id }}", {"_controller": {"name": "admin"}})
        table.freeze()
        entry.params["_controller"]["name"] = "changed"

        assert url_to_params(table, "/admin/1") == {"_controller": {"name": "admin"}, "id": "1"}
