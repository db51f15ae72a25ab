"""``roost check`` — route declaration validation command.

Loads a ``Routes`` tree, runs the static checker, and prints the
results.  Malformed children are reported by the checker, not refused
at load time.  Exits with code 1 if errors are found.
"""

import argparse

from roost.check import check_routes
from roost.cli._resolve import load_or_exit
from roost.terminal import format_check_result


def run_check(args: argparse.Namespace) -> None:
    """Validate a declaration tree, probing any paths given with ``--probe``."""
    routes = load_or_exit(args.routes, check_shape=False)

    result = check_routes(routes, probe_paths=args.probe)
    print(format_check_result(result, color=None))
    if not result.ok:
        raise SystemExit(1)
