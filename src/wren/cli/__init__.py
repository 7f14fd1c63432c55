"""Wren CLI — inspect and exercise a route table from the shell.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — ordered request routing with reverse URL generation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")

    # -- wren check -------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Compile every route pattern")
    check_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a request against the routes")
    match_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("url", help="Request URL, query string allowed")

    # -- wren url ---------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate the URL of a named route")
    url_parser.add_argument("router", help="Import string (e.g. myapp.urls:router)")
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Placeholder values",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from wren.cli._check import run_check

        run_check(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
    elif args.command == "url":
        from wren.cli._url import run_url

        run_url(args)
