"""Loading a declaration tree from a ``"module:attribute"`` string.

Shared by ``roost routes``, ``roost resolve``, and ``roost check``.  The
target may be a ``Routes`` tree, a single ``Route``, a list or tuple of
routes, or a zero-argument function returning any of those.
"""

from __future__ import annotations

import importlib
import sys

from roost.diagnostics import Diagnostic, malformed_declaration
from roost.errors import ConfigurationError
from roost.routing.resolve import shape_diagnostics
from roost.routing.route import Route, Routes

DEFAULT_ATTRIBUTE = "routes"


def _as_routes(target: object, source: str) -> Routes:
    if isinstance(target, Routes):
        return target
    if isinstance(target, Route):
        return Routes(children=(target,))
    if isinstance(target, (list, tuple)):
        return Routes(children=tuple(target))
    raise ConfigurationError(
        f"{source!r} is not a route declaration",
        (malformed_declaration(repr(source), target),),
    )


def tree_diagnostics(routes: Routes) -> list[Diagnostic]:
    """Every ``malformed-declaration`` problem in *routes*, outermost first."""
    found: list[Diagnostic] = []
    pending: list[tuple[tuple[object, ...], Route | None]] = [(tuple(routes.children), None)]
    while pending:
        children, parent = pending.pop(0)
        found.extend(shape_diagnostics(children, parent))
        pending.extend(
            (tuple(child.children), child) for child in children if isinstance(child, Route)
        )
    return found


def load_routes(target: str) -> Routes:
    """Import *target* and coerce it to a ``Routes`` tree.

    ``"myapp"`` means ``myapp.routes``.  A callable target is called once
    with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
        ConfigurationError: If the factory fails or the result is not a
            route declaration.
    """
    module_name, _, attr = target.partition(":")
    obj = getattr(importlib.import_module(module_name), attr or DEFAULT_ATTRIBUTE)

    if callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            raise ConfigurationError(f"Route factory {target!r} failed: {exc}") from exc

    return _as_routes(obj, target)


def load_or_exit(target: str, *, check_shape: bool = True) -> Routes:
    """Load *target*, or print what is wrong and exit 1.

    With *check_shape*, a tree containing non-``Route`` children is also
    refused, one ``error:`` line per offending child.
    """
    try:
        routes = load_routes(target)
    except (ModuleNotFoundError, AttributeError) as exc:
        print(f"Error: cannot load {target!r}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        for diagnostic in exc.diagnostics:
            print(f"  {diagnostic.details}", file=sys.stderr)
        raise SystemExit(1) from exc

    if check_shape:
        problems = tree_diagnostics(routes)
        if problems:
            for diagnostic in problems:
                print(f"error: {diagnostic.message}", file=sys.stderr)
            raise SystemExit(1)
    return routes
