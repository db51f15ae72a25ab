"""Static validation of a route declaration tree.

Finds configuration defects without waiting for a user to navigate to
the path that exposes them:

1. **Shape**: every child of ``Routes`` and of each ``Route`` is a ``Route``.
2. **Invalid patterns**: no composed pattern has a wildcard directly
   before a parameter.
3. **Duplicates**: two siblings with the same full pattern, where the
   later one can never be selected (warning).
4. **Adjacent wildcards**: ``*/*`` runs, which only ever backtrack on the
   innermost wildcard (info).
5. **Probes**: for each given path, whatever a real resolution reports,
   such as ambiguous sibling matches.

Usage::

    result = check_routes(routes, probe_paths=["/", "/about", "/users/1"])
    if not result.ok:
        print(result.summary())
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from roost.diagnostics import CheckResult, Diagnostic, DiagnosticKind, Severity
from roost.routing.compose import match_pattern_for
from roost.routing.resolve import resolve, shape_diagnostics
from roost.routing.route import Route, Routes
from roost.routing.segments import SEPARATOR, parse_pattern
from roost.routing.validate import validate_pattern, wildcard_runs


def check_routes(routes: Routes, probe_paths: Iterable[str] = ()) -> CheckResult:
    """Validate every pattern and declaration in *routes*."""
    result = CheckResult()
    seen: set[Diagnostic] = set()

    def report(diagnostic: Diagnostic) -> None:
        if diagnostic not in seen:
            seen.add(diagnostic)
            result.issues.append(diagnostic)

    if not isinstance(routes, Routes):
        probe = resolve("/", routes)
        for diagnostic in probe.diagnostics:
            report(diagnostic)
        return result

    _check_level(tuple(routes.children), None, "", result, report)

    for path in probe_paths:
        result.paths_probed += 1
        for diagnostic in resolve(path, routes).diagnostics:
            report(diagnostic)

    return result


def _check_level(
    children: tuple[object, ...],
    parent: Route | None,
    parent_pattern: str,
    result: CheckResult,
    report: Callable[[Diagnostic], None],
) -> None:
    for diagnostic in shape_diagnostics(children, parent):
        report(diagnostic)

    first_seen: dict[str, Route] = {}
    for child in children:
        if not isinstance(child, Route):
            continue
        result.routes_checked += 1

        pattern = match_pattern_for(parent_pattern, child.path)
        segments = parse_pattern(pattern)
        result.patterns_validated += 1

        invalid = validate_pattern(pattern, segments)
        if invalid is not None:
            report(invalid)

        if wildcard_runs(segments):
            report(
                Diagnostic(
                    kind=DiagnosticKind.ADJACENT_WILDCARDS,
                    severity=Severity.INFO,
                    message=f"Pattern {pattern!r} has adjacent wildcards",
                    pattern=pattern,
                    details="Only the innermost wildcard absorbs extra segments on backtracking.",
                )
            )

        key = SEPARATOR + SEPARATOR.join(segment.value for segment in segments)
        if key in first_seen:
            report(
                Diagnostic(
                    kind=DiagnosticKind.DUPLICATE_PATTERN,
                    severity=Severity.WARNING,
                    message=f"Route {child.path!r} repeats the full pattern {pattern!r}",
                    pattern=pattern,
                    details=(
                        f"An earlier sibling ({first_seen[key].path!r}) always "
                        "wins, so this route can never be selected."
                    ),
                )
            )
        else:
            first_seen[key] = child

        _check_level(tuple(child.children), child, pattern, result, report)
