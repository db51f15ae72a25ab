"""Current-path state and link click filtering.

The navigator owns the one piece of mutable state in a roost app: the
current path.  Resolution reads it once per pass and never writes it.
Back/forward history belongs to the host.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger("roost.navigation")

Listener = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """The parts of a pointer click that decide whether a link navigates in-app."""

    button: int = 0
    meta_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    default_prevented: bool = False


def should_intercept(event: ClickEvent) -> bool:
    """True for a plain primary-button click.

    Modified clicks (open in new tab/window) and clicks another handler
    already claimed are left to the host.
    """
    return (
        not event.default_prevented
        and not event.meta_key
        and not event.ctrl_key
        and not event.shift_key
        and event.button == 0
    )


class Navigator:
    """Holds the current path and notifies listeners when it changes.

    Usage::

        nav = Navigator("/")
        unsubscribe = nav.subscribe(lambda path: print("now at", path))
        nav.navigate("/users/42")
    """

    __slots__ = ("_listeners", "_path")

    def __init__(self, base_path: str = "/") -> None:
        self._path = base_path
        self._listeners: list[Listener] = []

    @property
    def path(self) -> str:
        return self._path

    def navigate(self, to: str) -> None:
        """Make *to* the current path.  Navigating to the current path is a no-op."""
        if to == self._path:
            return
        logger.debug("navigate %r -> %r", self._path, to)
        self._path = to
        for listener in list(self._listeners):
            listener(to)

    def follow(
        self,
        to: str,
        event: ClickEvent,
        on_click: Callable[[ClickEvent], None] | None = None,
    ) -> bool:
        """Navigate for a link click if it should be handled in-app.

        *on_click* runs only for intercepted clicks, before the path
        changes.  Returns ``True`` when the click was intercepted, meaning
        the host should prevent its default action.
        """
        if not should_intercept(event):
            return False
        if on_click is not None:
            on_click(event)
        self.navigate(to)
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; call the returned function to remove it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
