"""Route, RouteMatch, and Placeholder frozen dataclasses."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A parsed ``[type:name]`` block of a route pattern.

    ``/[i:id]``       -> prefix="/", type_key="i", name="id"
    ``.[:format]?``   -> prefix=".", type_key="",  name="format", optional=True
    ``[.:format]``    -> inner_prefix=".", type_key="", name="format", optional=True
    ``[*]``           -> prefix="",  type_key="*", name=""  (positional)

    ``prefix`` is the separator written before the bracket. A ``/`` or
    ``.`` written first inside the bracket is the ``inner_prefix``; it
    belongs to the segment and makes it optional.

    ``block`` is the exact source text, prefix and optional mark included.
    """

    block: str
    prefix: str = ""
    type_key: str = ""
    name: str = ""
    optional: bool = False
    inner_prefix: str = ""

    @property
    def separator(self) -> str:
        """Everything the compiled segment must match before the value."""
        return self.prefix + self.inner_prefix


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``methods`` is a pipe-separated verb list (``"GET|POST"``) or ``"*"``.
    ``target`` is opaque: the router hands it back, never calls it.
    """

    methods: str
    pattern: str
    target: Any
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: dict[str, str]

    @property
    def target(self) -> Any:
        return self.route.target

    @property
    def name(self) -> str | None:
        return self.route.name
