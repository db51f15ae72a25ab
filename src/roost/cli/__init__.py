"""Roost CLI — pattern matching, route listing, and declaration checks.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — a client-side path router for component-tree UIs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path against a pattern")
    match_parser.add_argument("pattern", help="Route pattern (e.g. /users/:id)")
    match_parser.add_argument("path", help="Path to test (e.g. /users/123)")

    # -- roost compose ----------------------------------------------------
    compose_parser = subparsers.add_parser(
        "compose", help="Compose a nested pattern with its ancestors"
    )
    compose_parser.add_argument(
        "patterns",
        nargs="+",
        help="Patterns from outermost to innermost (e.g. /dashboard/* /stats)",
    )

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List declared routes")
    routes_parser.add_argument("routes", help="Import string (e.g. myapp:routes)")

    # -- roost resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which routes render a path")
    resolve_parser.add_argument("routes", help="Import string (e.g. myapp:routes)")
    resolve_parser.add_argument("path", help="Path to resolve")

    # -- roost check ------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate route declarations")
    check_parser.add_argument("routes", help="Import string (e.g. myapp:routes)")
    check_parser.add_argument(
        "--probe",
        action="append",
        default=[],
        metavar="PATH",
        help="Also resolve PATH and report its diagnostics (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from roost.cli._match import run_match

        run_match(args)
    elif args.command == "compose":
        from roost.cli._match import run_compose

        run_compose(args)
    elif args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from roost.cli._routes import run_resolve

        run_resolve(args)
    elif args.command == "check":
        from roost.cli._check import run_check

        run_check(args)
