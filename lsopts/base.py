"""Shared building blocks: parsed arguments, configuration and the resolution protocol."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any, Optional

PROGRAM_NAME = "lsopts"


class FlagError(ValueError):
    """Raised when a command-line or configuration value cannot be used."""


class ArgMatches:
    """The arguments found on a command line, by argument id.

    ``flags`` lists the ids of arguments that take no value, once per occurrence.
    ``options`` maps an argument id to its occurrences: a single string stands for
    one occurrence with one value, a sequence holds one entry per occurrence, and
    each entry is either a string or a sequence of the values given that time.
    """

    def __init__(
        self,
        flags: Iterable[str] = (),
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._occurrences: dict[str, list[tuple[str, ...]]] = {}
        for name in flags:
            self._occurrences.setdefault(name, []).append(())
        for name, given in (options or {}).items():
            entries = [given] if isinstance(given, str) else list(given)
            for entry in entries:
                values = (entry,) if isinstance(entry, str) else tuple(entry)
                self._occurrences.setdefault(name, []).append(values)

    def is_present(self, name: str) -> bool:
        """Whether the argument appeared at least once."""
        return bool(self._occurrences.get(name))

    def occurrences_of(self, name: str) -> int:
        """How many times the argument appeared."""
        return len(self._occurrences.get(name, ()))

    def values_of(self, name: str) -> Optional[list[str]]:
        """All values given to the argument, in order, or None if it has none."""
        values = [value for occurrence in self._occurrences.get(name, ()) for value in occurrence]
        return values or None

    def __repr__(self) -> str:
        return f"ArgMatches({self._occurrences!r})"


@dataclass
class ColorConfig:
    """The ``color`` section of a configuration."""

    when: Any = None
    theme: Any = None


@dataclass
class IconsConfig:
    """The ``icons`` section of a configuration."""

    when: Any = None
    theme: Any = None
    separator: Optional[str] = None


@dataclass
class RecursionConfig:
    """The ``recursion`` section of a configuration."""

    enabled: Optional[bool] = None
    depth: Optional[int] = None


@dataclass
class SortingConfig:
    """The ``sorting`` section of a configuration."""

    column: Any = None
    reverse: Optional[bool] = None
    dir_grouping: Any = None


@dataclass
class Config:
    """Settings read from a configuration file; every unset value is None."""

    classic: Optional[bool] = None
    blocks: Optional[list[str]] = None
    color: Optional[ColorConfig] = None
    date: Optional[str] = None
    dereference: Optional[bool] = None
    display: Any = None
    icons: Optional[IconsConfig] = None
    ignore_globs: Optional[list[str]] = None
    indicators: Optional[bool] = None
    layout: Any = None
    recursion: Optional[RecursionConfig] = None
    size: Any = None
    permission: Any = None
    sorting: Optional[SortingConfig] = None
    no_symlink: Optional[bool] = None
    total_size: Optional[bool] = None
    symlink_arrow: Optional[str] = None
    hyperlink: Any = None
    header: Optional[bool] = None

    @classmethod
    def with_none(cls) -> "Config":
        """A configuration in which nothing is set."""
        return cls(**{field.name: None for field in fields(cls)})


class Configurable:
    """A setting resolved from arguments, the environment, a configuration or a default."""

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Any:
        """The value given on the command line, or None."""
        return None

    @classmethod
    def from_config(cls, config: Config) -> Any:
        """The value given in the configuration, or None."""
        return None

    @classmethod
    def from_environment(cls) -> Any:
        """The value given by environment variables, or None."""
        return None

    @classmethod
    def default(cls) -> Any:
        """The value used when nothing else gives one."""
        return cls()

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> Any:
        """The first value found among arguments, environment, configuration and default."""
        for value in (
            cls.from_arg_matches(matches),
            cls.from_environment(),
            cls.from_config(config),
        ):
            if value is not None:
                return value
        return cls.default()


def report_error(message: str) -> None:
    """Write an error message to stderr; exit quietly if stderr is gone."""
    try:
        sys.stderr.write(f"{PROGRAM_NAME}: {message}\n\n")
        sys.stderr.flush()
    except (OSError, ValueError):
        sys.exit(0)