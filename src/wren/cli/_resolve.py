"""Locate the route table named on the command line."""

import argparse
import importlib
import sys

from wren.routing.router import Router


def resolve_router(import_string: str) -> Router:
    """Import ``"package.module:name"`` and return the Router it names.

    *name* defaults to ``router``. A callable that is not itself a Router
    is treated as a factory and called with no arguments, so a module can
    expose ``def make_router() -> Router`` instead of a global.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name or "router")

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Router factory {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{import_string!r} is a {type(obj).__name__}, not a wren.Router instance"
        raise TypeError(msg)

    return obj


def resolve_or_exit(args: argparse.Namespace) -> Router:
    """Resolve ``args.router``; on failure print the error and exit 1."""
    try:
        return resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
