"""Declaration tree evaluation.

Walks a :class:`Routes` tree once for a given path, threading each
level's full pattern down to its children explicitly.  At every level
the siblings are composed, selected first-match-wins, and the winner's
children become the next level.
"""

from __future__ import annotations

from dataclasses import dataclass

from roost.diagnostics import Diagnostic, malformed_declaration
from roost.routing.compose import match_pattern_for
from roost.routing.matcher import match_pattern
from roost.routing.route import Resolution, Route, RouteMatch, Routes
from roost.routing.selector import select_route


@dataclass(frozen=True, slots=True)
class FullPattern:
    """A route together with the pattern it is matched with."""

    depth: int
    pattern: str
    route: Route


def _label(parent: Route | None) -> str:
    return "<Routes>" if parent is None else f"<Route path={parent.path!r}>"


def shape_diagnostics(children: tuple[object, ...], parent: Route | None) -> list[Diagnostic]:
    return [
        malformed_declaration(_label(parent), child)
        for child in children
        if not isinstance(child, Route)
    ]


def resolve(path: str, routes: Routes) -> Resolution:
    """Select the chain of routes that renders for *path*.

    Never raises for a misconfigured tree: defects are returned as
    diagnostics and the affected subtree renders nothing.
    """
    if not isinstance(routes, Routes):
        return Resolution(path=path, diagnostics=(malformed_declaration("the router", routes),))

    matches: list[RouteMatch] = []
    diagnostics: list[Diagnostic] = []

    parent: Route | None = None
    parent_pattern = ""
    children = tuple(routes.children)
    depth = 0

    while children:
        shape = shape_diagnostics(children, parent)
        if shape:
            diagnostics.extend(shape)
            break

        patterns = [match_pattern_for(parent_pattern, child.path) for child in children]
        selection = select_route(path, patterns)
        diagnostics.extend(selection.diagnostics)
        if selection.index is None:
            break

        route = children[selection.index]
        pattern = patterns[selection.index]
        matches.append(
            RouteMatch(
                route=route,
                pattern=pattern,
                params=match_pattern(path, pattern).params,
                depth=depth,
            )
        )

        parent = route
        parent_pattern = pattern
        children = tuple(route.children)
        depth += 1

    return Resolution(path=path, matches=tuple(matches), diagnostics=tuple(diagnostics))


def full_patterns(routes: Routes) -> list[FullPattern]:
    """Flatten a declaration tree into ``(depth, pattern, route)`` entries.

    Declaration order, parents before their children.  Non-route children
    are skipped; :func:`roost.check.check_routes` reports them.
    """
    entries: list[FullPattern] = []
    _collect(tuple(routes.children), "", 0, entries)
    return entries


def _collect(
    children: tuple[object, ...],
    parent_pattern: str,
    depth: int,
    entries: list[FullPattern],
) -> None:
    for child in children:
        if not isinstance(child, Route):
            continue
        pattern = match_pattern_for(parent_pattern, child.path)
        entries.append(FullPattern(depth=depth, pattern=pattern, route=child))
        _collect(tuple(child.children), pattern, depth + 1, entries)
