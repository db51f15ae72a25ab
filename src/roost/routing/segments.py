"""Path and pattern tokenization.

A path or pattern is a ``/``-delimited string.  Leading, trailing, and
repeated separators are insignificant.
"""

from dataclasses import dataclass
from enum import Enum

SEPARATOR = "/"
PARAM_SIGIL = ":"
WILDCARD = "*"


class SegmentKind(Enum):
    LITERAL = "literal"
    PARAM = "param"
    WILDCARD = "wildcard"


@dataclass(frozen=True, slots=True)
class PatternSegment:
    """A classified segment of a route pattern.

    Literal:  ``users``  (kind=LITERAL)
    Param:    ``:id``    (kind=PARAM, param_name="id")
    Wildcard: ``*``      (kind=WILDCARD)
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.kind is SegmentKind.PARAM

    @property
    def is_wildcard(self) -> bool:
        return self.kind is SegmentKind.WILDCARD


def split_segments(value: str) -> list[str]:
    """Split a path or pattern into its non-empty segments.

    Examples::

        "/users/123"  -> ["users", "123"]
        "//a///b/"    -> ["a", "b"]
        "/"           -> []
    """
    return [part for part in value.split(SEPARATOR) if part]


def is_wildcard(segment: str) -> bool:
    return segment == WILDCARD


def is_param(segment: str) -> bool:
    return segment.startswith(PARAM_SIGIL)


def classify_segment(part: str) -> PatternSegment:
    """Classify one already-split pattern segment."""
    if is_wildcard(part):
        return PatternSegment(value=part, kind=SegmentKind.WILDCARD)
    if is_param(part):
        return PatternSegment(
            value=part,
            kind=SegmentKind.PARAM,
            param_name=part[len(PARAM_SIGIL):],
        )
    return PatternSegment(value=part)


def parse_pattern(pattern: str) -> tuple[PatternSegment, ...]:
    """Parse a route pattern into classified segments.

    Examples::

        "/users"       -> (PatternSegment("users"),)
        "/users/:id"   -> (PatternSegment("users"), PatternSegment(":id", PARAM, "id"))
        "/settings/*"  -> (PatternSegment("settings"), PatternSegment("*", WILDCARD))
    """
    return tuple(classify_segment(part) for part in split_segments(pattern))
