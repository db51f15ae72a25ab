"""Roost — a client-side path router for component-tree UIs.

Decides which nested route declaration renders for the current path,
extracts named parameters, and reports configuration defects as values
instead of exceptions.

Basic usage::

    from roost import Route, Router, Routes

    router = Router(Routes(children=(
        Route("/", element="home"),
        Route("/users/:id", element="profile"),
        Route("/dashboard/*", element="dashboard", children=(
            Route("/stats", element="stats"),
        )),
        Route("*", element="not-found"),
    )))

    resolution = router.resolve("/dashboard/stats")
    resolution.elements        # ("dashboard", "stats")
    router.params("/users/42") # {"id": "42"}

Pattern helpers::

    from roost import compose_chain, extract_params, matches_path

    matches_path("/a/b/c", "/a/*/c")                  # True
    extract_params("/users/123", "/users/:id")        # {"id": "123"}
    compose_chain(["/dashboard/*"], "/stats")         # "/dashboard/stats"
"""

__version__ = "0.1.0"
__all__ = [
    "CheckResult",
    "ClickEvent",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticKind",
    "Navigator",
    "PatternMatch",
    "Resolution",
    "RoostError",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "Routes",
    "Selection",
    "Severity",
    "check_routes",
    "compose_chain",
    "compose_pattern",
    "extract_params",
    "match_pattern",
    "matches_path",
    "resolve",
    "select_route",
    "split_segments",
    "validate_pattern",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CheckResult": "roost.diagnostics",
    "ClickEvent": "roost.navigation",
    "ConfigurationError": "roost.errors",
    "Diagnostic": "roost.diagnostics",
    "DiagnosticKind": "roost.diagnostics",
    "Navigator": "roost.navigation",
    "PatternMatch": "roost.routing.matcher",
    "Resolution": "roost.routing.route",
    "RoostError": "roost.errors",
    "Route": "roost.routing.route",
    "RouteMatch": "roost.routing.route",
    "Router": "roost.router",
    "RouterConfig": "roost.config",
    "Routes": "roost.routing.route",
    "Selection": "roost.routing.selector",
    "Severity": "roost.diagnostics",
    "check_routes": "roost.check",
    "compose_chain": "roost.routing.compose",
    "compose_pattern": "roost.routing.compose",
    "extract_params": "roost.routing.matcher",
    "match_pattern": "roost.routing.matcher",
    "matches_path": "roost.routing.matcher",
    "resolve": "roost.routing.resolve",
    "select_route": "roost.routing.selector",
    "split_segments": "roost.routing.segments",
    "validate_pattern": "roost.routing.validate",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
