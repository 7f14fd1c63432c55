"""Router configuration.

RouterConfig is frozen: build one per router, derive variants with the
``with_*`` helpers instead of mutating.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(base_path="/app", match_types={"slug": r"[a-z0-9-]++"})
    """

    # Prefix stripped from incoming URLs and prepended to generated ones
    base_path: str = ""

    # Extra match types, merged over the built-in table
    match_types: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    # Method filters compare whole verbs ("GET" does not match "WIDGET").
    # False restores plain case-insensitive substring containment.
    exact_methods: bool = True

    # Unknown match type keys raise UnknownMatchTypeError.
    # False uses the key itself as raw regex text.
    strict_match_types: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "match_types", MappingProxyType(dict(self.match_types)))

    def with_base_path(self, base_path: str) -> "RouterConfig":
        """Return a copy with a different base path."""
        return replace(self, base_path=base_path)

    def with_match_types(self, match_types: Mapping[str, str]) -> "RouterConfig":
        """Return a copy with *match_types* merged over the current extras."""
        return replace(self, match_types={**self.match_types, **match_types})
