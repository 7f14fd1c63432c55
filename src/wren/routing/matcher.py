"""Ordered route matching.

Routes are tried in declaration order and the first hit wins. Each route
goes through the cheapest check that can decide it:

1. method filter
2. ``*`` catch-all, matches any path
3. ``@regex`` raw pattern
4. literal pattern, plain string equality
5. placeholder pattern, literal-prefix rejection, then the compiled regex
"""

import logging
from collections.abc import Iterable

from wren.routing.pattern import CATCH_ALL, REGEX_SIGIL, PatternCompiler
from wren.routing.route import Route, RouteMatch

logger = logging.getLogger("wren.routing")


def strip_request_url(url: str, base_path: str = "") -> str | None:
    """Reduce a request URL to the path the routes are matched against.

    Drops the query string and the base path. Returns ``None`` when *url*
    lies outside *base_path*; such a request can match nothing.
    """
    path = url.partition("?")[0]
    if not base_path:
        return path
    if not path.startswith(base_path):
        logger.debug("Request path %r is outside base path %r", path, base_path)
        return None
    return path[len(base_path) :]


def method_allowed(methods: str, method: str, *, exact: bool = True) -> bool:
    """Check *method* against a pipe-separated filter such as ``"GET|POST"``.

    Case-insensitive. ``"*"`` allows everything. With ``exact=False`` the
    check is substring containment, so ``"GET"`` also passes ``"WIDGET"``.
    """
    if methods == CATCH_ALL:
        return True
    if not exact:
        return method.lower() in methods.lower()
    wanted = method.upper()
    return any(verb.strip().upper() == wanted for verb in methods.split("|"))


def _prefix_rejects(pattern: str, position: int, path: str) -> bool:
    # The literal text before the first "[" must match the path. A trailing
    # "/" or "." may belong to an absent optional segment, so only the text
    # before it is compared: "/blog/[i:id]?" stays a candidate for "/blog"
    # and "/feed.[:format]?" for "/feed".
    if position == 0 or path[:position] == pattern[:position]:
        return False
    if pattern[position - 1] in ("/", "."):
        return path[: position - 1] != pattern[: position - 1]
    return True


def match_route(
    route: Route,
    method: str,
    path: str,
    compiler: PatternCompiler,
    *,
    exact_methods: bool = True,
) -> dict[str, str] | None:
    """Match one route. Returns its named params, or ``None`` on a miss."""
    if not method_allowed(route.methods, method, exact=exact_methods):
        return None

    pattern = route.pattern
    if pattern == CATCH_ALL:
        return {}

    if pattern.startswith(REGEX_SIGIL):
        return compiler.compile(pattern).match(path)

    position = pattern.find("[")
    if position == -1:
        return {} if path == pattern else None

    if _prefix_rejects(pattern, position, path):
        return None

    return compiler.compile(pattern).match(path)


def match_routes(
    routes: Iterable[Route],
    method: str,
    path: str,
    compiler: PatternCompiler,
    *,
    exact_methods: bool = True,
) -> RouteMatch | None:
    """Return the first route matching *method* and *path*, or ``None``.

    *path* must already be stripped of query string and base path
    (see ``strip_request_url``).
    """
    for route in routes:
        params = match_route(route, method, path, compiler, exact_methods=exact_methods)
        if params is not None:
            return RouteMatch(route=route, params=params)
    return None
