"""Pattern compiler — turns route patterns into anchored regexes.

A pattern is literal text interleaved with placeholder blocks::

    /users/[i:id]           typed, named
    /feed.[:format]?        optional, the "." prefix disappears with it
    /feed[.:format]         same segment, separator written inside the bracket
    /files/[**:path]        greedy rest-of-path
    /archive/[i]            positional (captured but never reported)

One left-to-right scan (``tokenize``) feeds both the compiler and the
reverse generator, so the two always agree on what a placeholder is.
Output is built by concatenating token renderings, never by search and
replace on the source string.
"""

import logging
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from wren.errors import InvalidPatternError, UnknownMatchTypeError
from wren.routing.match_types import MATCH_TYPES, build_match_types
from wren.routing.route import Placeholder

logger = logging.getLogger("wren.routing")

CATCH_ALL = "*"
REGEX_SIGIL = "@"

# prefix, type key, name, optional mark
PLACEHOLDER_RE = re.compile(r"(/|\.|)\[([^:\]]*)(?::([^:\]]*))?\](\?|)")

# PCRE named group "(?<name>" -> Python "(?P<name>"; lookbehinds start with = or !
_PCRE_NAMED_GROUP = re.compile(r"\(\?<(?=[A-Za-z_])")

Token: TypeAlias = str | Placeholder


def has_placeholders(pattern: str) -> bool:
    return "[" in pattern


def tokenize(pattern: str) -> list[Token]:
    """Split *pattern* into literal strings and ``Placeholder`` blocks.

    Raises ``InvalidPatternError`` if a ``[`` is left over in literal
    text, i.e. a bracket that does not open a well-formed placeholder.
    """
    tokens: list[Token] = []
    pos = 0
    for m in PLACEHOLDER_RE.finditer(pattern):
        if m.start() > pos:
            tokens.append(_literal(pattern, pos, m.start()))
        prefix, type_key, name, mark = m.groups()
        # "[.:format]" carries its separator inside the bracket; such a
        # segment is always optional.
        inner_prefix = ""
        if type_key[:1] in ("/", "."):
            inner_prefix, type_key = type_key[0], type_key[1:]
        tokens.append(
            Placeholder(
                block=m.group(0),
                prefix=prefix,
                type_key=type_key,
                name=name or "",
                optional=mark == "?" or bool(inner_prefix),
                inner_prefix=inner_prefix,
            )
        )
        pos = m.end()
    if pos < len(pattern):
        tokens.append(_literal(pattern, pos, len(pattern)))
    return tokens


def _literal(pattern: str, start: int, end: int) -> str:
    offset = pattern.find("[", start, end)
    if offset != -1:
        msg = f"unbalanced '[' at offset {offset}"
        raise InvalidPatternError(pattern, msg)
    return pattern[start:end]


def placeholders(pattern: str) -> list[Placeholder]:
    """Return just the placeholder blocks of *pattern*, in order."""
    return [t for t in tokenize(pattern) if isinstance(t, Placeholder)]


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """An anchored regex for one route pattern."""

    pattern: str
    regex: re.Pattern[str]

    @property
    def names(self) -> tuple[str, ...]:
        """Named capture groups, in pattern order."""
        return tuple(self.regex.groupindex)

    def match(self, path: str) -> dict[str, str] | None:
        """Return the named captures for *path*, or ``None`` if it does not match.

        Positional groups are dropped, as are optional groups that did not
        participate in the match.
        """
        m = self.regex.match(path)
        if m is None:
            return None
        return {key: value for key, value in m.groupdict().items() if value is not None}


def _resolve_type(
    pattern: str,
    type_key: str,
    match_types: Mapping[str, str],
    strict: bool,
) -> str:
    fragment = match_types.get(type_key)
    if fragment is not None:
        return fragment
    if strict:
        raise UnknownMatchTypeError(pattern, type_key)
    return type_key


def _build(pattern: str, source: str) -> CompiledPattern:
    try:
        regex = re.compile(source)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    logger.debug("Compiled route pattern %r -> %s", pattern, source)
    return CompiledPattern(pattern=pattern, regex=regex)


def compile_pattern(
    pattern: str,
    match_types: Mapping[str, str] = MATCH_TYPES,
    *,
    strict: bool = True,
) -> CompiledPattern:
    """Compile a placeholder pattern into an anchored regex.

    Each placeholder becomes ``(?:PREFIX(?P<name>FRAGMENT)?)?`` where the
    two ``?`` marks are present only for optional placeholders, so an
    absent optional segment takes its prefix with it. Literal text is
    escaped.

    Raises ``InvalidPatternError`` for malformed placeholders or a regex
    that fails to compile (e.g. a repeated parameter name), and
    ``UnknownMatchTypeError`` for an unregistered type key when *strict*.
    """
    parts: list[str] = []
    for token in tokenize(pattern):
        if isinstance(token, str):
            parts.append(re.escape(token))
            continue

        fragment = _resolve_type(pattern, token.type_key, match_types, strict)
        group = f"(?P<{token.name}>{fragment})" if token.name else f"({fragment})"
        opt = "?" if token.optional else ""
        parts.append(f"(?:{re.escape(token.separator)}{group}{opt}){opt}")

    return _build(pattern, rf"\A{''.join(parts)}\Z")


def compile_raw(pattern: str) -> CompiledPattern:
    """Compile an ``@``-prefixed pattern: the remainder is the regex body.

    The body is anchored at both ends. PCRE-style ``(?<name>...)`` groups
    are accepted alongside Python's ``(?P<name>...)``.
    """
    body = pattern.removeprefix(REGEX_SIGIL)
    body = _PCRE_NAMED_GROUP.sub("(?P<", body)
    return _build(pattern, rf"\A(?:{body})\Z")


class PatternCompiler:
    """Memoizing compiler bound to one match-type table.

    The cache is keyed by the exact pattern string. Reads are lock-free;
    inserts go through a lock so concurrent matchers never lose or
    replace an entry. Changing match types means building a new
    ``PatternCompiler`` rather than mutating this one.
    """

    __slots__ = ("_cache", "_lock", "_match_types", "_strict")

    def __init__(
        self,
        match_types: Mapping[str, str] | None = None,
        *,
        strict: bool = True,
    ) -> None:
        self._match_types = build_match_types(match_types)
        self._strict = strict
        self._cache: dict[str, CompiledPattern] = {}
        self._lock = threading.Lock()

    @property
    def match_types(self) -> Mapping[str, str]:
        return self._match_types

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._cache

    def compile(self, pattern: str) -> CompiledPattern:
        """Return the compiled form of *pattern*, compiling on first use."""
        compiled = self._cache.get(pattern)
        if compiled is not None:
            return compiled

        if pattern.startswith(REGEX_SIGIL):
            compiled = compile_raw(pattern)
        else:
            compiled = compile_pattern(pattern, self._match_types, strict=self._strict)

        with self._lock:
            return self._cache.setdefault(pattern, compiled)
