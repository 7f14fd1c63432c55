"""``wren routes`` — list registered routes.

Prints every route in matching order with its method filter, pattern,
name, and target.
"""

import argparse

from wren.cli._resolve import resolve_or_exit


def _describe_target(target: object) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


def run_routes(args: argparse.Namespace) -> None:
    """List the routes of ``args.router`` as a table."""
    router = resolve_or_exit(args)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (route.methods, route.pattern, route.name or "", _describe_target(route.target))
        for route in routes
    ]

    # Column widths, never narrower than the headers
    max_methods = max(6, *(len(r[0]) for r in rows))
    max_pattern = max(7, *(len(r[1]) for r in rows))
    max_name = max(4, *(len(r[2]) for r in rows))

    fmt = f"{{:<{max_methods}}}  {{:<{max_pattern}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "NAME", "TARGET"))
    sep_len = max_methods + max_pattern + max_name + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
    if router.base_path:
        print(f"\nBase path: {router.base_path}")
