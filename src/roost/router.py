"""Router — binds a declaration tree to a navigator.

The router adds the ambient behavior around :func:`roost.routing.resolve.resolve`:
it reads the navigator's path once per pass, logs diagnostics, and
optionally turns configuration errors into exceptions.
"""

from __future__ import annotations

import logging

from roost.config import RouterConfig
from roost.diagnostics import errors_in, log_diagnostics
from roost.errors import ConfigurationError
from roost.navigation import Navigator
from roost.routing.resolve import resolve
from roost.routing.route import Resolution, Routes

logger = logging.getLogger("roost.router")


class Router:
    """Client-side path router.

    Usage::

        router = Router(Routes(children=(
            Route("/", element=Home),
            Route("/users/:id", element=UserProfile),
            Route("*", element=NotFound),
        )))
        router.navigate("/users/42")
        resolution = router.resolve()
        resolution.leaf.route.element   # UserProfile
        router.params()                 # {"id": "42"}
    """

    __slots__ = ("config", "navigator", "routes")

    def __init__(
        self,
        routes: Routes,
        config: RouterConfig | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        self.routes = routes
        self.config = config or RouterConfig()
        self.navigator = navigator or Navigator(self.config.base_path)

    @property
    def path(self) -> str:
        return self.navigator.path

    def navigate(self, to: str) -> None:
        self.navigator.navigate(to)

    def resolve(self, path: str | None = None) -> Resolution:
        """Resolve *path*, or the navigator's current path when omitted.

        Raises ``ConfigurationError`` only when ``config.strict`` is set and
        the resolution carries error-severity diagnostics.
        """
        target = self.navigator.path if path is None else path
        resolution = resolve(target, self.routes)

        if self.config.log_diagnostics:
            log_diagnostics(resolution.diagnostics, logger)

        if self.config.strict:
            errors = errors_in(resolution.diagnostics)
            if errors:
                raise ConfigurationError.from_diagnostics(errors)

        return resolution

    def params(self, path: str | None = None) -> dict[str, str]:
        """Parameters bound by the innermost route selected for *path*."""
        return self.resolve(path).params
