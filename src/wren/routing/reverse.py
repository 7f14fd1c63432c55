"""Reverse routing — build a URL from a route pattern and parameter values."""

from collections.abc import Mapping
from typing import Any

from wren.routing.pattern import tokenize
from wren.routing.route import Placeholder


def build_url(pattern: str, params: Mapping[str, Any] | None = None, base_path: str = "") -> str:
    """Fill the placeholders of *pattern* with *params* and prefix *base_path*.

    For each placeholder, in order:

    - a supplied value replaces the block; the prefix stays, and so does
      a separator written inside the bracket (``[.:format]``)
    - a missing optional value drops the block together with its prefix,
      except for the first placeholder, whose prefix is kept so that
      ``/[:lang]?`` still yields ``/`` rather than an empty path
    - otherwise only the block is dropped, in-bracket separator included

    Values are inserted as ``str(value)``, unescaped. ``None`` counts as
    missing.
    """
    params = params or {}
    parts = [base_path]
    index = 0
    for token in tokenize(pattern):
        if not isinstance(token, Placeholder):
            parts.append(token)
            continue

        value = params.get(token.name) if token.name else None
        if value is not None:
            parts.append(f"{token.separator}{value}")
        elif not token.optional or index == 0:
            parts.append(token.prefix)
        index += 1

    return "".join(parts)
