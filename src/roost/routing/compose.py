"""Pattern composition for nested route declarations.

A nested route's pattern is relative to its parent's.  Composition keeps
only the static prefix of each level: a trailing ``/*`` on a parent marks
where its children attach, not something the child must match again.

Examples::

    compose_pattern("/dashboard/*", "/stats")      -> "/dashboard/stats"
    compose_pattern("*", "/about")                  -> "/about"
    compose_chain(["/app/*", "/users/*"], ":id")    -> "/app/users/:id"
"""

import re
from collections.abc import Sequence

from roost.routing.segments import SEPARATOR, WILDCARD

_TRAILING_WILDCARD = SEPARATOR + WILDCARD
_REPEATED_SEPARATORS = re.compile(r"//+")


def strip_trailing_wildcard(pattern: str) -> str:
    """Remove one trailing ``/*`` from *pattern*."""
    if pattern.endswith(_TRAILING_WILDCARD):
        return pattern[: -len(_TRAILING_WILDCARD)]
    return pattern


def compose_pattern(parent: str, own: str) -> str:
    """Join *own* onto the static base of the enclosing *parent* pattern.

    A bare ``*`` parent contributes no prefix.  One trailing ``/*`` is
    dropped from both sides, then runs of separators collapse to one.
    """
    base = "" if parent == WILDCARD else strip_trailing_wildcard(parent)
    joined = f"{base}{SEPARATOR}{strip_trailing_wildcard(own)}"
    return _REPEATED_SEPARATORS.sub(SEPARATOR, joined)


def compose_chain(ancestors: Sequence[str], own: str) -> str:
    """Compose *own* under every pattern in *ancestors*, outermost first."""
    full = ""
    for ancestor in ancestors:
        full = compose_pattern(full, ancestor)
    return compose_pattern(full, own)


def match_pattern_for(parent_full: str, own: str) -> str:
    """The pattern a route is actually tested with.

    Same as :func:`compose_pattern`, with the wildcard stripped from *own*
    put back so ``/settings/*`` still matches ``/settings/profile/edit``.
    """
    full = compose_pattern(parent_full, own)
    if own != WILDCARD and own.endswith(_TRAILING_WILDCARD):
        return _REPEATED_SEPARATORS.sub(SEPARATOR, full + _TRAILING_WILDCARD)
    return full
