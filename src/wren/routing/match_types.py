"""Match types — named regex fragments for placeholders like ``[i:id]``.

The empty key is the default used by ``[:name]``.
"""

from collections.abc import Mapping
from types import MappingProxyType

# type key -> regex fragment
MATCH_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "i": r"[0-9]++",
        "a": r"[0-9A-Za-z]++",
        "h": r"[0-9A-Fa-f]++",
        "*": r".+?",
        "**": r".++",
        "": r"[^/\.]++",
    }
)


def build_match_types(extra: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Merge *extra* over the built-in table and return a read-only view.

    Entries in *extra* replace built-ins with the same key.
    """
    if not extra:
        return MATCH_TYPES
    return MappingProxyType({**MATCH_TYPES, **extra})
