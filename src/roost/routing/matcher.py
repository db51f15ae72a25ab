"""Segment matcher with single-point wildcard backtracking.

One traversal serves both boolean matching and parameter extraction; the
difference is the :class:`CaptureSink` it reports parameter bindings to.

Supported segments::

    "/users"           exact literal
    "/users/:id"       parameter, binds one non-empty segment
    "/settings/*"      wildcard, zero or more segments
    "/*/foo/bar/*"     wildcards anywhere, except directly before a parameter
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from roost.diagnostics import Diagnostic
from roost.routing.segments import PARAM_SIGIL, WILDCARD, is_param, split_segments
from roost.routing.validate import validate_pattern

logger = logging.getLogger("roost.routing")


class CaptureSink(Protocol):
    """Receives ``name -> segment`` bindings as the traversal consumes parameters."""

    def capture(self, name: str, value: str) -> None: ...


class DiscardCaptures:
    """Sink for plain boolean matching."""

    __slots__ = ()

    def capture(self, name: str, value: str) -> None:
        pass


class ParamCollector:
    """Sink that records bindings in pattern order; a repeated name overwrites."""

    __slots__ = ("params",)

    def __init__(self) -> None:
        self.params: dict[str, str] = {}

    def capture(self, name: str, value: str) -> None:
        self.params[name] = value


_DISCARD = DiscardCaptures()


def _traverse(path_segments: list[str], pattern_segments: list[str], sink: CaptureSink) -> bool:
    """Walk *path_segments* against *pattern_segments*.

    Keeps a single backtrack point: the most recent wildcard and the path
    position it was entered at.  On a mismatch the wildcard absorbs one more
    path segment and the pattern resumes right after it.  The backtrack
    position only moves forward, so the walk is bounded by
    ``len(path) * len(pattern)``.
    """
    if pattern_segments == [WILDCARD]:
        return True

    path_index = 0
    pattern_index = 0
    star_pattern_index = -1
    star_path_index = -1

    while path_index < len(path_segments):
        current = pattern_segments[pattern_index] if pattern_index < len(pattern_segments) else None

        if current == WILDCARD:
            star_pattern_index = pattern_index
            star_path_index = path_index
            pattern_index += 1
            continue

        segment = path_segments[path_index]
        if current is not None and is_param(current):
            sink.capture(current[len(PARAM_SIGIL):], segment)
            pattern_index += 1
            path_index += 1
            continue

        if current == segment:
            pattern_index += 1
            path_index += 1
            continue

        if star_pattern_index != -1:
            star_path_index += 1
            pattern_index = star_pattern_index + 1
            path_index = star_path_index
            continue

        return False

    # A wildcard may match nothing: skip any left at the end (/users/*/*)
    while pattern_index < len(pattern_segments) and pattern_segments[pattern_index] == WILDCARD:
        pattern_index += 1

    return pattern_index == len(pattern_segments)


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Outcome of matching one path against one pattern.

    ``params`` is empty unless ``matched`` is true.  ``diagnostic`` is set
    when the pattern was rejected before matching.
    """

    matched: bool
    params: dict[str, str] = field(default_factory=dict)
    diagnostic: Diagnostic | None = None


def match_pattern(path: str, pattern: str) -> PatternMatch:
    """Validate *pattern*, then match *path* against it and collect parameters."""
    pattern_segments = split_segments(pattern)
    diagnostic = validate_pattern(pattern)
    if diagnostic is not None:
        return PatternMatch(matched=False, diagnostic=diagnostic)

    collector = ParamCollector()
    if not _traverse(split_segments(path), pattern_segments, collector):
        return PatternMatch(matched=False)
    return PatternMatch(matched=True, params=collector.params)


def matches_path(path: str, pattern: str) -> bool:
    """Check if *path* matches *pattern*.

    Invalid patterns never match; the problem is logged to ``roost.routing``.
    Use :func:`match_pattern` to receive the diagnostic as a value instead.
    """
    pattern_segments = split_segments(pattern)
    diagnostic = validate_pattern(pattern)
    if diagnostic is not None:
        logger.warning("%s. %s", diagnostic.message, diagnostic.details)
        return False
    return _traverse(split_segments(path), pattern_segments, _DISCARD)


def extract_params(path: str, pattern: str) -> dict[str, str]:
    """Return the parameters *pattern* binds in *path*.

    Empty when the pattern is invalid or does not match, so bindings from
    an abandoned attempt never leak out.

    Example::

        extract_params("/users/123/posts/456", "/users/:user_id/posts/:post_id")
        # {"user_id": "123", "post_id": "456"}
    """
    result = match_pattern(path, pattern)
    if result.diagnostic is not None:
        logger.warning("%s. %s", result.diagnostic.message, result.diagnostic.details)
    return result.params
