"""Terminal rendering for ``roost check``.

Issues are grouped by severity, most severe first, under a one-line
count of what was checked.  Color is used only when stdout is a TTY
unless the caller forces it::

    ── roost check ─────────────────────────────────────────────

      7 routes · 7 patterns · 2 probes

      ▲  Found 2 routes matching path '/about'. Only the first one will be rendered.
         pattern '/about'
         path '/about'
         Matching patterns: '/about', '/:section'

      ✓  No errors · 1 warning

      ─────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from roost.diagnostics import Severity

if TYPE_CHECKING:
    from roost.diagnostics import CheckResult, Diagnostic

_WIDTH = 61
_RULE = "─"
_PASS = "✓"
_FAIL = "✗"

_CODES = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
}

# severity -> (mark, styles), in display order
_SEVERITY_MARKS: dict[Severity, tuple[str, tuple[str, ...]]] = {
    Severity.ERROR: (_FAIL, ("red", "bold")),
    Severity.WARNING: ("▲", ("yellow",)),
    Severity.INFO: ("·", ("dim",)),
}


def _stdout_is_tty() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


class _Style:
    """Wraps text in ANSI codes, or returns it untouched when color is off."""

    __slots__ = ("enabled",)

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not styles:
            return text
        return "".join(_CODES[s] for s in styles) + text + _CODES["reset"]


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _issue_lines(issue: Diagnostic, style: _Style) -> list[str]:
    mark, mark_styles = _SEVERITY_MARKS[issue.severity]
    lines = [f"  {style(mark, *mark_styles)}  {style(issue.message, 'bold')}"]
    if issue.pattern:
        lines.append(f"     {style('pattern', 'dim')} {style(repr(issue.pattern), 'cyan')}")
    if issue.path:
        lines.append(f"     {style('path', 'dim')} {issue.path!r}")
    if issue.details:
        lines.append(f"     {style(issue.details, 'dim')}")
    return lines


def _summary_line(result: CheckResult, style: _Style, sep: str) -> str:
    n_errors = len(result.errors)
    n_warnings = len(result.warnings)
    if n_errors:
        line = f"{style(_FAIL, 'red', 'bold')}  {style(_plural(n_errors, 'error'), 'red')}"
    else:
        verdict = "No errors" if n_warnings else "All clear"
        line = f"{style(_PASS, 'green', 'bold')}  {style(verdict, 'green')}"
    if n_errors or n_warnings:
        line += sep + style(_plural(n_warnings, "warning"), "yellow")
    return f"  {line}"


def format_check_result(result: CheckResult, *, color: bool | None = None) -> str:
    """Render *result* as the multi-line report ``roost check`` prints.

    Args:
        result: The check result to render.
        color: Force ANSI color on or off.  ``None`` follows stdout.
    """
    style = _Style(_stdout_is_tty() if color is None else color)
    sep = f" {style('·', 'dim')} "

    title = "roost check"
    out = [
        f"  {style(_RULE * 2, 'dim')} {style(title, 'bold')} "
        f"{style(_RULE * (_WIDTH - len(title) - 2), 'dim')}",
        "",
    ]

    counts = (
        (result.routes_checked, "routes"),
        (result.patterns_validated, "patterns"),
        (result.paths_probed, "probes"),
    )
    stats = [f"{style(str(n), 'bold')} {style(label, 'dim')}" for n, label in counts if n]
    if stats:
        out += [f"  {sep.join(stats)}", ""]

    for severity in _SEVERITY_MARKS:
        for issue in result.issues:
            if issue.severity is severity:
                out += [*_issue_lines(issue, style), ""]

    out += [_summary_line(result, style, sep), "", f"  {style(_RULE * _WIDTH, 'dim')}", ""]
    return "\n".join(out)
