"""Tests for roost.routing.route — declarations and resolution results."""

import pytest

from roost.routing.route import Resolution, Route, RouteMatch, Routes


class TestRoute:
    def test_creation(self) -> None:
        route = Route("/users")
        assert route.path == "/users"
        assert route.element is None
        assert route.children == ()
        assert route.name is None

    def test_nested(self) -> None:
        child = Route("/stats", element="stats")
        parent = Route("/dashboard/*", element="dashboard", children=(child,))
        assert parent.children == (child,)

    def test_frozen(self) -> None:
        route = Route("/")
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestRoutes:
    def test_default_empty(self) -> None:
        assert Routes().children == ()


class TestResolution:
    def _resolution(self) -> Resolution:
        outer = Route("/dashboard/*", element="dashboard")
        inner = Route("/users/:id", element="user")
        return Resolution(
            path="/dashboard/users/3",
            matches=(
                RouteMatch(route=outer, pattern="/dashboard/*", params={}, depth=0),
                RouteMatch(route=inner, pattern="/dashboard/users/:id", params={"id": "3"}, depth=1),
            ),
        )

    def test_leaf_and_params(self) -> None:
        resolution = self._resolution()
        assert resolution.matched is True
        assert resolution.leaf is not None
        assert resolution.leaf.route.element == "user"
        assert resolution.params == {"id": "3"}

    def test_params_is_a_copy(self) -> None:
        resolution = self._resolution()
        resolution.params["id"] = "changed"
        assert resolution.params == {"id": "3"}

    def test_elements(self) -> None:
        assert self._resolution().elements == ("dashboard", "user")

    def test_outlet(self) -> None:
        resolution = self._resolution()
        assert resolution.outlet(0) is resolution.matches[0]
        assert resolution.outlet(1) is resolution.matches[1]
        assert resolution.outlet(2) is None
        assert resolution.outlet(-1) is None

    def test_empty(self) -> None:
        resolution = Resolution(path="/")
        assert resolution.matched is False
        assert resolution.leaf is None
        assert resolution.params == {}
        assert resolution.elements == ()
