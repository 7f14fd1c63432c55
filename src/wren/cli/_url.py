"""``wren url`` — reverse a named route into a URL."""

import argparse
import sys

from wren.cli._resolve import resolve_or_exit
from wren.errors import WrenError


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["id=7", "format=json"]`` into a dict.

    Raises ``ValueError`` for an item without ``=``.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    """Print the URL for ``args.name`` built from ``args.params``."""
    router = resolve_or_exit(args)
    try:
        params = parse_params(args.params)
        print(router.generate(args.name, params))
    except (ValueError, WrenError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
