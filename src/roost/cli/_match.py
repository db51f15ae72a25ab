"""``roost match`` and ``roost compose`` — one-off pattern commands."""

import argparse
import sys

from roost.routing.compose import compose_chain
from roost.routing.matcher import match_pattern


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` against ``args.pattern`` and print the bindings.

    Exits 1 when the path does not match and 2 when the pattern is invalid.
    """
    result = match_pattern(args.path, args.pattern)

    if result.diagnostic is not None:
        print(f"Error: {result.diagnostic.message}", file=sys.stderr)
        if result.diagnostic.details:
            print(result.diagnostic.details, file=sys.stderr)
        raise SystemExit(2)

    if not result.matched:
        print("no match")
        raise SystemExit(1)

    print("match")
    for name, value in result.params.items():
        print(f"{name}={value}")


def run_compose(args: argparse.Namespace) -> None:
    """Print the full pattern of the innermost of ``args.patterns``."""
    *ancestors, own = args.patterns
    print(compose_chain(ancestors, own))
