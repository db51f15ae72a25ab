"""Pattern validation.

A wildcard is greedy and only ever backtracks one segment at a time, so
it cannot tell where to stop when a parameter follows it directly
(``/files/*/:name``).  Such patterns are rejected up front and treated as
never matching.
"""

from collections.abc import Sequence

from roost.diagnostics import Diagnostic, invalid_pattern
from roost.routing.segments import PatternSegment, parse_pattern


def validate_pattern(
    pattern: str, segments: Sequence[PatternSegment] | None = None
) -> Diagnostic | None:
    """Return an ``invalid-pattern`` diagnostic, or ``None`` if *pattern* is usable.

    *segments* may be passed when the caller has already parsed the pattern.
    """
    if segments is None:
        segments = parse_pattern(pattern)
    for current, following in zip(segments, segments[1:]):
        if current.is_wildcard and following.is_param:
            return invalid_pattern(pattern, following.value)
    return None


def wildcard_runs(segments: Sequence[PatternSegment]) -> list[int]:
    """Indices where a wildcard is immediately followed by another wildcard.

    Legal, but only the most recent wildcard is ever a backtrack point, so
    the checker reports these for review.
    """
    return [
        i
        for i, (current, following) in enumerate(zip(segments, segments[1:]))
        if current.is_wildcard and following.is_wildcard
    ]
