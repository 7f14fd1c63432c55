"""Wren — ordered request routing with reverse URL generation.

Routes are tried in the order they were added; the first one whose
method filter and pattern accept the request wins. Named routes can be
turned back into URLs.

Basic usage::

    from wren import Router

    router = Router()
    router.add_route("GET", "/users/[i:id]", "user_detail", "user")
    router.add_route("GET|POST", "/feed[.:format]?", "feed")

    match = router.match("GET", "/users/42")
    match.target, match.params  # "user_detail", {"id": "42"}

    router.generate("user", {"id": 7})  # "/users/7"

Placeholders are ``[type:name]`` blocks, optionally preceded by ``/`` or
``.`` and followed by ``?``. Built-in types: ``i`` digits, ``a``
alphanumerics, ``h`` hex, ``*`` lazy anything, ``**`` greedy anything,
and the default (no type) which stops at ``/`` and ``.``.
"""

import importlib

__version__ = "0.1.0"

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "wren.errors",
    "DuplicateRouteNameError": "wren.errors",
    "InvalidPatternError": "wren.errors",
    "Route": "wren.routing.route",
    "RouteMatch": "wren.routing.route",
    "Router": "wren.routing.router",
    "RouterConfig": "wren.config",
    "UnknownMatchTypeError": "wren.errors",
    "UnknownRouteNameError": "wren.errors",
    "WrenError": "wren.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    return getattr(importlib.import_module(module_path), name)
