"""First-match-wins selection among sibling patterns."""

from collections.abc import Sequence
from dataclasses import dataclass

from roost.diagnostics import Diagnostic, ambiguous_match
from roost.routing.matcher import match_pattern


@dataclass(frozen=True, slots=True)
class Selection:
    """Result of selecting among sibling patterns.

    ``index`` is the first matching sibling in declaration order, or
    ``None``.  ``matched`` lists every sibling that matched, so a caller
    can see what an ambiguity diagnostic refers to.
    """

    index: int | None
    matched: tuple[int, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ambiguous(self) -> bool:
        return len(self.matched) > 1


def select_route(path: str, patterns: Sequence[str]) -> Selection:
    """Pick the first of *patterns* that matches *path*.

    Every sibling is tested so that overlapping declarations are reported.
    Invalid patterns contribute their diagnostic and are skipped.
    """
    matched: list[int] = []
    diagnostics: list[Diagnostic] = []

    for i, pattern in enumerate(patterns):
        result = match_pattern(path, pattern)
        if result.diagnostic is not None:
            diagnostics.append(result.diagnostic)
        elif result.matched:
            matched.append(i)

    if len(matched) > 1:
        diagnostics.append(ambiguous_match(path, [patterns[i] for i in matched]))

    return Selection(
        index=matched[0] if matched else None,
        matched=tuple(matched),
        diagnostics=tuple(diagnostics),
    )
