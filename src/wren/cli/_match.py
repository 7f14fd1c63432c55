"""``wren match`` — show which route a request would hit."""

import argparse
import sys

from wren.cli._resolve import resolve_or_exit
from wren.errors import WrenError


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.method`` and ``args.url``; exit 1 if nothing matches.

    Patterns compile on first use, so a malformed route or unknown match
    type also exits 1.
    """
    router = resolve_or_exit(args)

    try:
        match = router.match(args.method, args.url)
    except WrenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if match is None:
        print(f"No route matches {args.method} {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    route = match.route
    print(f"route:   {route.methods} {route.pattern}")
    print(f"name:    {route.name or '-'}")
    print(f"target:  {route.target!r}")
    for key, value in sorted(match.params.items()):
        print(f"param:   {key}={value}")
