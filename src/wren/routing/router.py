"""Router — ordered route table with named-route reverse generation.

Routes are kept in declaration order; matching scans them front to back
and returns the first hit. Every mutation publishes a fresh immutable
snapshot, so ``match`` and ``generate`` never take a lock.
"""

import logging
import os
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from wren.config import RouterConfig
from wren.errors import ConfigurationError, DuplicateRouteNameError, InvalidPatternError, UnknownRouteNameError
from wren.routing.matcher import match_routes, strip_request_url
from wren.routing.pattern import CATCH_ALL, REGEX_SIGIL, PatternCompiler, has_placeholders, tokenize
from wren.routing.reverse import build_url
from wren.routing.route import Route, RouteMatch

logger = logging.getLogger("wren.routing")


class Router:
    """Ordered route table.

    Usage::

        router = Router(base_path="/app")
        router.add_route("GET", "/users/[i:id]", show_user, "user")
        router.add_route("GET|POST", "/feed[.:format]?", feed)
        router.compile()

        match = router.match("GET", "/app/users/42?tab=posts")
        match.target, match.params  # show_user, {"id": "42"}

        router.generate("user", {"id": 7})  # "/app/users/7"
    """

    __slots__ = ("_compiler", "_config", "_lock", "_named", "_routes")

    def __init__(
        self,
        routes: Iterable[Any] = (),
        base_path: str = "",
        match_types: Mapping[str, str] | None = None,
        *,
        config: RouterConfig | None = None,
    ) -> None:
        config = config or RouterConfig()
        if base_path:
            config = config.with_base_path(base_path)
        if match_types:
            config = config.with_match_types(match_types)

        self._config = config
        self._lock = threading.Lock()
        self._routes: tuple[Route, ...] = ()
        self._named: Mapping[str, str] = MappingProxyType({})
        self._compiler = PatternCompiler(config.match_types, strict=config.strict_match_types)
        # Match types are in place first so routes may reference them.
        self.add_routes(routes)

    def __repr__(self) -> str:
        return f"<Router {len(self._routes)} routes, base_path={self._config.base_path!r}>"

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    # -- configuration ----------------------------------------------------

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def base_path(self) -> str:
        return self._config.base_path

    @property
    def match_types(self) -> Mapping[str, str]:
        """The effective match-type table, built-ins included."""
        return self._compiler.match_types

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in declaration order."""
        return self._routes

    @property
    def named_routes(self) -> Mapping[str, str]:
        """Read-only mapping of route name to its original pattern."""
        return self._named

    def set_base_path(self, base_path: str) -> None:
        """Set the prefix stripped before matching and prepended by ``generate``."""
        with self._lock:
            self._config = self._config.with_base_path(base_path)

    def add_match_types(self, match_types: Mapping[str, str]) -> None:
        """Register extra match types. Existing keys, built-ins included, are replaced.

        Invalidates every compiled pattern.
        """
        with self._lock:
            self._config = self._config.with_match_types(match_types)
            self._compiler = PatternCompiler(
                self._config.match_types, strict=self._config.strict_match_types
            )

    # -- registration -----------------------------------------------------

    def add_route(self, methods: str, pattern: str, target: Any, name: str | None = None) -> Route:
        """Append a route to the table.

        *methods* is a pipe-separated verb list (``"GET|POST"``) or ``"*"``.
        *pattern* is a literal path, a placeholder pattern, ``"*"``, or an
        ``@``-prefixed regex. Supply *name* to make the route reversible.

        Raises ``DuplicateRouteNameError`` if *name* is taken and
        ``InvalidPatternError`` for malformed placeholder syntax.
        """
        if not pattern.startswith(REGEX_SIGIL):
            tokenize(pattern)

        route = Route(methods=methods, pattern=pattern, target=target, name=name or None)
        with self._lock:
            if route.name is not None:
                if route.name in self._named:
                    raise DuplicateRouteNameError(route.name)
                self._named = MappingProxyType({**self._named, route.name: pattern})
            self._routes = (*self._routes, route)

        logger.debug("Registered route %s %r (name=%r)", methods, pattern, route.name)
        return route

    def add_routes(self, routes: Iterable[Any]) -> None:
        """Add several routes at once.

        Each entry is a ``Route`` or a ``(methods, pattern, target[, name])``
        tuple::

            router.add_routes([
                ("GET", "/", home, "home"),
                ("GET", "/users/[i:id]", show_user, "user"),
            ])
        """
        if isinstance(routes, (str, bytes)) or not isinstance(routes, Iterable):
            msg = (
                f"Routes should be an iterable of (methods, pattern, target[, name]) "
                f"tuples, got {type(routes).__name__}"
            )
            raise ConfigurationError(msg)

        for entry in routes:
            if isinstance(entry, Route):
                self.add_route(entry.methods, entry.pattern, entry.target, entry.name)
            else:
                self.add_route(*entry)

    def compile(self) -> None:
        """Compile every pattern now instead of on first request.

        Call at startup to surface ``InvalidPatternError`` and
        ``UnknownMatchTypeError`` before serving traffic.
        """
        compiler = self._compiler
        count = 0
        for route in self._routes:
            pattern = route.pattern
            if pattern == CATCH_ALL:
                continue
            if pattern.startswith(REGEX_SIGIL) or has_placeholders(pattern):
                compiler.compile(pattern)
                count += 1
        logger.debug("Compiled %d route patterns", count)

    # -- lookup -----------------------------------------------------------

    def match(self, method: str | None = None, url: str | None = None) -> RouteMatch | None:
        """Match a request against the table.

        *url* may carry a query string and must include the base path.
        Missing arguments fall back to the CGI ``REQUEST_METHOD`` and
        ``REQUEST_URI`` environment variables, then to ``GET`` and ``/``.

        Returns the first matching ``RouteMatch``, or ``None``.
        """
        if method is None:
            method = os.environ.get("REQUEST_METHOD", "GET")
        if url is None:
            url = os.environ.get("REQUEST_URI", "/")

        config = self._config
        path = strip_request_url(url, config.base_path)
        if path is None:
            return None
        return match_routes(
            self._routes, method, path, self._compiler, exact_methods=config.exact_methods
        )

    def generate(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Build the URL of the route called *name*, base path included.

        Raises ``UnknownRouteNameError`` if no route has that name.
        """
        pattern = self._named.get(name)
        if pattern is None:
            raise UnknownRouteNameError(name)
        if pattern.startswith(REGEX_SIGIL):
            raise InvalidPatternError(pattern, "raw regex routes cannot be reversed")
        return build_url(pattern, params, self._config.base_path)
