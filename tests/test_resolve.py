"""Tests for roost.routing.resolve — evaluating a declaration tree for a path."""

import pytest

from roost.diagnostics import DiagnosticKind
from roost.routing.resolve import full_patterns, resolve
from roost.routing.route import Route, Routes


@pytest.fixture
def routes() -> Routes:
    return Routes(
        children=(
            Route("/", element="home"),
            Route("/users/:id", element="profile"),
            Route(
                "/dashboard/*",
                element="dashboard",
                children=(
                    Route("/stats", element="stats"),
                    Route(
                        "/settings/*",
                        element="settings",
                        children=(
                            Route("/profile", element="settings-profile"),
                            Route(":tab", element="settings-tab"),
                        ),
                    ),
                ),
            ),
            Route("/docs", element="docs", children=(Route("/intro", element="intro"),)),
        )
    )


class TestResolve:
    def test_root(self, routes: Routes) -> None:
        resolution = resolve("/", routes)
        assert resolution.elements == ("home",)
        assert resolution.diagnostics == ()

    def test_params(self, routes: Routes) -> None:
        resolution = resolve("/users/123", routes)
        assert resolution.elements == ("profile",)
        assert resolution.params == {"id": "123"}

    def test_nested(self, routes: Routes) -> None:
        resolution = resolve("/dashboard/stats", routes)
        assert resolution.elements == ("dashboard", "stats")
        assert resolution.leaf is not None
        assert resolution.leaf.pattern == "/dashboard/stats"
        assert resolution.leaf.depth == 1

    def test_parent_alone_when_no_child_matches(self, routes: Routes) -> None:
        resolution = resolve("/dashboard/unknown", routes)
        assert resolution.elements == ("dashboard",)
        assert resolution.outlet(1) is None

    def test_parent_without_wildcard(self, routes: Routes) -> None:
        resolution = resolve("/dashboard", routes)
        assert resolution.elements == ("dashboard",)

    def test_three_levels(self, routes: Routes) -> None:
        resolution = resolve("/dashboard/settings/profile/edit", routes)
        assert resolution.elements == ("dashboard", "settings")

        resolution = resolve("/dashboard/settings/profile", routes)
        assert [m.pattern for m in resolution.matches] == [
            "/dashboard/*",
            "/dashboard/settings/*",
            "/dashboard/settings/profile",
        ]

    def test_ambiguous_nested_siblings(self, routes: Routes) -> None:
        resolution = resolve("/dashboard/settings/profile", routes)
        assert resolution.leaf is not None
        assert resolution.leaf.route.element == "settings-profile"
        [diagnostic] = resolution.diagnostics
        assert diagnostic.kind is DiagnosticKind.AMBIGUOUS_MATCH

    def test_nested_param(self, routes: Routes) -> None:
        resolution = resolve("/dashboard/settings/billing", routes)
        assert resolution.leaf is not None
        assert resolution.leaf.route.element == "settings-tab"
        assert resolution.params == {"tab": "billing"}

    def test_each_level_has_its_own_params(self) -> None:
        routes = Routes(
            children=(
                Route(
                    "/orgs/:org/*",
                    element="org",
                    children=(Route("/repos/:repo", element="repo"),),
                ),
            )
        )
        resolution = resolve("/orgs/acme/repos/roost", routes)
        assert resolution.matches[0].params == {"org": "acme"}
        assert resolution.matches[1].params == {"org": "acme", "repo": "roost"}

    def test_parent_must_match_for_children(self, routes: Routes) -> None:
        # /docs has no trailing wildcard, so /docs/intro never reaches its child
        resolution = resolve("/docs/intro", routes)
        assert resolution.matched is False

    def test_no_match(self, routes: Routes) -> None:
        resolution = resolve("/nowhere", routes)
        assert resolution.matched is False
        assert resolution.params == {}

    def test_catch_all_under_bare_wildcard_parent(self) -> None:
        routes = Routes(
            children=(
                Route("*", element="shell", children=(Route("/about", element="about"),)),
            )
        )
        resolution = resolve("/about", routes)
        assert resolution.elements == ("shell", "about")

    def test_empty_tree(self) -> None:
        assert resolve("/", Routes()).matched is False


class TestResolveDiagnostics:
    def test_invalid_pattern_never_matches(self) -> None:
        routes = Routes(children=(Route("/files/*/:name"), Route("*", element="fallback")))
        resolution = resolve("/files/a/b", routes)
        assert resolution.elements == ("fallback",)
        assert [d.kind for d in resolution.diagnostics] == [DiagnosticKind.INVALID_PATTERN]

    def test_malformed_root_children(self) -> None:
        routes = Routes(children=(Route("/", element="home"), "not a route"))
        resolution = resolve("/", routes)
        assert resolution.matched is False
        [diagnostic] = resolution.diagnostics
        assert diagnostic.kind is DiagnosticKind.MALFORMED_DECLARATION
        assert "'not a route'" in diagnostic.message

    def test_malformed_nested_children_stop_at_parent(self) -> None:
        routes = Routes(
            children=(
                Route("/app/*", element="app", children=(Route("/a", element="a"), 42)),
            )
        )
        resolution = resolve("/app/a", routes)
        assert resolution.elements == ("app",)
        [diagnostic] = resolution.diagnostics
        assert diagnostic.kind is DiagnosticKind.MALFORMED_DECLARATION
        assert "/app/*" in diagnostic.message

    def test_root_not_routes(self) -> None:
        resolution = resolve("/", Route("/"))  # type: ignore[arg-type]
        assert resolution.matched is False
        assert resolution.diagnostics[0].kind is DiagnosticKind.MALFORMED_DECLARATION


class TestFullPatterns:
    def test_flattened_in_declaration_order(self, routes: Routes) -> None:
        entries = [(e.depth, e.pattern) for e in full_patterns(routes)]
        assert entries == [
            (0, "/"),
            (0, "/users/:id"),
            (0, "/dashboard/*"),
            (1, "/dashboard/stats"),
            (1, "/dashboard/settings/*"),
            (2, "/dashboard/settings/profile"),
            (2, "/dashboard/settings/:tab"),
            (0, "/docs"),
            (1, "/docs/intro"),
        ]

    def test_skips_non_routes(self) -> None:
        entries = full_patterns(Routes(children=(Route("/a"), None)))
        assert [e.pattern for e in entries] == ["/a"]
