"""Glob patterns naming files to leave out of the listing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class _GlobSyntaxError(Exception):
    pass


def _translate_class(pattern: str, pos: int) -> tuple[str, int]:
    """Translate a character class starting just after '['; return regex and next position."""
    negated = False
    if pos < len(pattern) and pattern[pos] in "!^":
        negated = True
        pos += 1
    items: list[str] = []
    first = True
    while True:
        if pos >= len(pattern):
            raise _GlobSyntaxError("unclosed character class; missing ']'")
        char = pattern[pos]
        if char == "]" and not first:
            pos += 1
            break
        first = False
        if (
            pos + 2 < len(pattern)
            and pattern[pos + 1] == "-"
            and pattern[pos + 2] != "]"
        ):
            start, end = char, pattern[pos + 2]
            if start > end:
                raise _GlobSyntaxError(f"invalid range; '{start}' > '{end}'")
            items.append(f"{re.escape(start)}-{re.escape(end)}")
            pos += 3
        else:
            items.append(re.escape(char))
            pos += 1
    return f"[{'^' if negated else ''}{''.join(items)}]", pos


def _translate(pattern: str) -> str:
    """The regular expression that matches exactly what the glob matches."""
    parts: list[str] = []
    in_alternate = False
    pos = 0
    while pos < len(pattern):
        char = pattern[pos]
        if char == "\\":
            if pos + 1 >= len(pattern):
                raise _GlobSyntaxError("dangling '\\'")
            parts.append(re.escape(pattern[pos + 1]))
            pos += 2
        elif char == "?":
            parts.append(".")
            pos += 1
        elif char == "*":
            end = pos
            while end < len(pattern) and pattern[end] == "*":
                end += 1
            recursive = end - pos >= 2
            at_component_start = pos == 0 or pattern[pos - 1] == "/"
            followed_by_separator = end < len(pattern) and pattern[end] == "/"
            if recursive and at_component_start and followed_by_separator:
                parts.append("(?:.*/)?")
                end += 1
            else:
                parts.append(".*")
            pos = end
        elif char == "[":
            translated, pos = _translate_class(pattern, pos + 1)
            parts.append(translated)
        elif char == "{":
            if in_alternate:
                raise _GlobSyntaxError("nested alternate groups are not allowed")
            in_alternate = True
            parts.append("(?:")
            pos += 1
        elif char == "}" and in_alternate:
            in_alternate = False
            parts.append(")")
            pos += 1
        elif char == "," and in_alternate:
            parts.append("|")
            pos += 1
        else:
            parts.append(re.escape(char))
            pos += 1
    if in_alternate:
        raise _GlobSyntaxError("unclosed alternate group; missing '}'")
    return "".join(parts)


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(_translate(pattern), re.DOTALL)
    except _GlobSyntaxError as err:
        raise FlagError(f"error parsing glob '{pattern}': {err}") from None


@dataclass(frozen=True)
class IgnoreGlobs(Configurable):
    """A set of glob patterns; a name matching any of them is ignored."""

    patterns: tuple[str, ...] = ()
    _regexes: tuple[re.Pattern[str], ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        patterns = tuple(self.patterns)
        object.__setattr__(self, "patterns", patterns)
        object.__setattr__(self, "_regexes", tuple(_compile(p) for p in patterns))

    @classmethod
    def _from_patterns(cls, patterns: Iterable[str]) -> "IgnoreGlobs":
        return cls(tuple(patterns))

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "IgnoreGlobs":
        """From --ignore-glob, else ``ignore_globs``, else empty; FlagError for a bad glob."""
        given = cls.from_arg_matches(matches)
        if given is not None:
            return given
        configured = cls.from_config(config)
        if configured is not None:
            return configured
        return cls.default()

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["IgnoreGlobs"]:
        """The globs given with --ignore-glob, or None; FlagError for a bad glob."""
        if matches.occurrences_of("ignore-glob") == 0:
            return None
        values = matches.values_of("ignore-glob")
        if values is None:
            return None
        return cls._from_patterns(values)

    @classmethod
    def from_config(cls, config: Config) -> Optional["IgnoreGlobs"]:
        """The configured globs, or None; FlagError for a bad glob."""
        if config.ignore_globs is None:
            return None
        return cls._from_patterns(config.ignore_globs)

    @classmethod
    def default(cls) -> "IgnoreGlobs":
        """The empty set, which matches nothing."""
        return cls(())

    def is_match(self, name: str) -> bool:
        """Whether any glob matches the whole of the name."""
        return any(regex.fullmatch(name) for regex in self._regexes)