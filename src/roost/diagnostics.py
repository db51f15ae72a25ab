"""Structured diagnostics for route configuration defects.

Nothing in the matching engine raises for a bad declaration.  Each defect
becomes a :class:`Diagnostic` attached to a normal result value, with a
deterministic fallback already applied:

- ``invalid-pattern``: a wildcard immediately followed by a parameter.
  The pattern never matches and yields no parameters.
- ``ambiguous-match``: several siblings match one path.  The first in
  declaration order wins.
- ``malformed-declaration``: a node whose children are not all routes.
  Nothing is rendered below it.

Usage::

    resolution = resolve("/about", routes)
    for diagnostic in resolution.diagnostics:
        print(f"{diagnostic.severity.value}: {diagnostic.message}")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

# ---------------------------------------------------------------------------
# Issue types
# ---------------------------------------------------------------------------


class Severity(Enum):
    """Severity of a route diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DiagnosticKind(Enum):
    """What kind of configuration defect a diagnostic describes."""

    INVALID_PATTERN = "invalid-pattern"
    AMBIGUOUS_MATCH = "ambiguous-match"
    MALFORMED_DECLARATION = "malformed-declaration"
    DUPLICATE_PATTERN = "duplicate-pattern"
    ADJACENT_WILDCARDS = "adjacent-wildcards"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single configuration issue found while matching or checking routes."""

    kind: DiagnosticKind
    severity: Severity
    message: str
    pattern: str | None = None
    path: str | None = None
    details: str | None = None


def invalid_pattern(pattern: str, segment: str) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.INVALID_PATTERN,
        severity=Severity.ERROR,
        message=(
            f"Illegal route pattern {pattern!r}: parameter segment {segment!r} "
            "cannot immediately follow a wildcard"
        ),
        pattern=pattern,
        details="Insert a literal segment between them.",
    )


def ambiguous_match(path: str, patterns: Iterable[str]) -> Diagnostic:
    patterns = tuple(patterns)
    return Diagnostic(
        kind=DiagnosticKind.AMBIGUOUS_MATCH,
        severity=Severity.WARNING,
        message=(
            f"Found {len(patterns)} routes matching path {path!r}. "
            "Only the first one will be rendered."
        ),
        pattern=patterns[0],
        path=path,
        details="Matching patterns: " + ", ".join(repr(p) for p in patterns),
    )


def malformed_declaration(parent: str, child: object) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.MALFORMED_DECLARATION,
        severity=Severity.ERROR,
        message=f"Invalid child of {parent}: {child!r}",
        details=f"All children of {parent} must be Route declarations.",
    )


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

_LOG_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
}


def log_diagnostics(diagnostics: Iterable[Diagnostic], logger: logging.Logger) -> None:
    """Emit each diagnostic on *logger* at the level matching its severity."""
    for diagnostic in diagnostics:
        logger.log(
            _LOG_LEVELS[diagnostic.severity],
            "[%s] %s",
            diagnostic.kind.value,
            diagnostic.message,
        )


def errors_in(diagnostics: Iterable[Diagnostic]) -> tuple[Diagnostic, ...]:
    return tuple(d for d in diagnostics if d.severity == Severity.ERROR)


@dataclass(slots=True)
class CheckResult:
    """Result of a static check over a declaration tree."""

    issues: list[Diagnostic] = field(default_factory=list)
    routes_checked: int = 0
    patterns_validated: int = 0
    paths_probed: int = 0

    @property
    def errors(self) -> list[Diagnostic]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"Checked {self.routes_checked} routes, "
            f"validated {self.patterns_validated} patterns, "
            f"probed {self.paths_probed} paths.",
        ]
        if self.ok and not self.warnings:
            lines.append("No issues found.")
        elif self.ok:
            lines.append(f"No errors. {len(self.warnings)} warning(s).")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        for issue in self.issues:
            prefix = issue.severity.value.upper()
            loc = f" in {issue.pattern!r}" if issue.pattern else ""
            lines.append(f"  [{prefix}] {issue.message}{loc}")
            if issue.details:
                lines.append(f"           {issue.details}")
        return "\n".join(lines)
