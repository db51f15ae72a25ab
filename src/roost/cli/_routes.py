"""``roost routes`` and ``roost resolve`` — inspect a declaration tree.

Resolves an import string to a ``Routes`` tree and prints either every
declared route with its full pattern, or the chain selected for a path.
"""

import argparse

from roost.cli._resolve import load_or_exit
from roost.routing.resolve import full_patterns, resolve
from roost.routing.segments import parse_pattern


def _route_label(route: object) -> str:
    name = getattr(route, "name", None)
    element = getattr(route, "element", None)
    label = getattr(element, "__name__", None) or ("" if element is None else repr(element))
    if name:
        return f"{label} ({name})" if label else name
    return label


def _captures(pattern: str) -> str:
    """Parameter names and wildcards a pattern binds, e.g. ``id, *``."""
    return ", ".join(
        segment.param_name if segment.is_param else segment.value
        for segment in parse_pattern(pattern)
        if segment.is_param or segment.is_wildcard
    )


def run_routes(args: argparse.Namespace) -> None:
    """List every declared route as a DEPTH / PATTERN / CAPTURES / ELEMENT table."""
    routes = load_or_exit(args.routes)

    entries = full_patterns(routes)
    if not entries:
        print("No routes declared.")
        return

    rows = [
        (
            str(entry.depth),
            "  " * entry.depth + entry.pattern,
            _captures(entry.pattern),
            _route_label(entry.route),
        )
        for entry in entries
    ]

    headers = ("DEPTH", "PATTERN", "CAPTURES", "ELEMENT")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths) + "  {}"
    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 6 + max(len(r[3]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))


def run_resolve(args: argparse.Namespace) -> None:
    """Print the routes selected for ``args.path`` and the leaf's parameters.

    Exits 1 when nothing matches.
    """
    routes = load_or_exit(args.routes)
    resolution = resolve(args.path, routes)

    for diagnostic in resolution.diagnostics:
        print(f"{diagnostic.severity.value}: {diagnostic.message}")

    if not resolution.matched:
        print(f"No route matches {args.path!r}")
        raise SystemExit(1)

    for match in resolution.matches:
        label = _route_label(match.route)
        suffix = f"  {label}" if label else ""
        print(f"{'  ' * match.depth}{match.pattern}{suffix}")

    for name, value in resolution.params.items():
        print(f"{name}={value}")
