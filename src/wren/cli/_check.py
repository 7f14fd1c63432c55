"""``wren check`` — compile every route pattern up front.

Exits with code 1 and prints the error if any pattern is malformed or
references an unknown match type.
"""

import argparse
import sys

from wren.cli._resolve import resolve_or_exit
from wren.errors import ConfigurationError


def run_check(args: argparse.Namespace) -> None:
    """Compile all patterns of ``args.router``."""
    router = resolve_or_exit(args)
    try:
        router.compile()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(f"OK: {len(router)} routes, {len(router.named_routes)} named")
