"""Wren exception hierarchy.

Shared across Router, the pattern compiler, and the reverse generator so
every module raises and catches the same types.

A request that matches no route is not an error: ``Router.match`` returns
``None`` and the caller maps that to its own "not found" response.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when the route table or router configuration is invalid.

    Typically surfaced at startup by ``Router.add_route`` or
    ``Router.compile()``.
    """


class DuplicateRouteNameError(ConfigurationError):
    """A route name was registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot redeclare route {name!r}")


class InvalidPatternError(ConfigurationError):
    """A route pattern has malformed placeholder syntax or yields a bad regex."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern {pattern!r}: {reason}")


class UnknownMatchTypeError(ConfigurationError):
    """A placeholder references a match type missing from the table."""

    def __init__(self, pattern: str, type_key: str) -> None:
        self.pattern = pattern
        self.type_key = type_key
        super().__init__(
            f"Unknown match type {type_key!r} in route pattern {pattern!r}. "
            "Register it with Router.add_match_types()."
        )


class UnknownRouteNameError(WrenError, LookupError):
    """Reverse generation was asked for a route name that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route {name!r} does not exist.")
