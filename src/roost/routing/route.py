"""Route declarations and resolution results as frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from roost.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class Route:
    """A route declaration.

    ``path`` is relative to the enclosing route.  ``element`` is whatever
    the host UI renders when this route is selected; roost never looks
    inside it.  Nested routes go in ``children`` and are selected for the
    outlet of this route's element::

        Route("/dashboard/*", element=DashboardLayout, children=(
            Route("/stats", element=StatsPage),
            Route("/settings", element=SettingsPage),
        ))
    """

    path: str
    element: Any = None
    children: tuple[Any, ...] = ()
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Routes:
    """The root sibling set of a declaration tree."""

    children: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """One selected level of a resolution.

    ``pattern`` is the full pattern the route was matched with, and
    ``params`` the values it binds in the current path.
    """

    route: Route
    pattern: str
    params: dict[str, str]
    depth: int


@dataclass(frozen=True, slots=True)
class Resolution:
    """Selected routes for one path, outermost first, plus any diagnostics."""

    path: str
    matches: tuple[RouteMatch, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def matched(self) -> bool:
        return bool(self.matches)

    @property
    def leaf(self) -> RouteMatch | None:
        return self.matches[-1] if self.matches else None

    @property
    def params(self) -> dict[str, str]:
        """Parameters bound by the innermost selected route."""
        leaf = self.leaf
        return dict(leaf.params) if leaf is not None else {}

    @property
    def elements(self) -> tuple[Any, ...]:
        return tuple(m.route.element for m in self.matches)

    def outlet(self, depth: int) -> RouteMatch | None:
        """The match an outlet rendered inside level *depth - 1* shows.

        ``outlet(0)`` is the top-level route; ``None`` when nothing was
        selected at that depth.
        """
        if 0 <= depth < len(self.matches):
            return self.matches[depth]
        return None
