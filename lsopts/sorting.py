"""How to sort the output: by which column, in which order, and where directories go."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


def _coerce(enum_cls: Any, value: Any, arg_name: str) -> Any:
    """An enum member from a member or its configuration name; FlagError if unknown."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise FlagError(f"Invalid value '{value}' for '{arg_name}'") from None


class SortColumn(Configurable, Enum):
    """Which column to sort by."""

    NONE = "none"
    EXTENSION = "extension"
    NAME = "name"
    TIME = "time"
    SIZE = "size"
    VERSION = "version"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["SortColumn"]:
        """The column chosen by a sort shortcut or the last --sort value, else None."""
        values = matches.values_of("sort")
        sort = values[-1] if values else None

        if matches.is_present("timesort") or sort == "time":
            return cls.TIME
        if matches.is_present("sizesort") or sort == "size":
            return cls.SIZE
        if matches.is_present("extensionsort") or sort == "extension":
            return cls.EXTENSION
        if matches.is_present("versionsort") or sort == "version":
            return cls.VERSION
        if matches.is_present("no-sort") or sort == "none":
            return cls.NONE
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SortColumn"]:
        """The configured ``sorting.column``, else None."""
        if config.sorting is None or config.sorting.column is None:
            return None
        return _coerce(cls, config.sorting.column, "sort")

    @classmethod
    def default(cls) -> "SortColumn":
        """Sort by name."""
        return cls.NAME


class SortOrder(Configurable, Enum):
    """Which sort order to use."""

    DEFAULT = "default"
    REVERSE = "reverse"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["SortOrder"]:
        """Reverse with --reverse, else None."""
        return cls.REVERSE if matches.is_present("reverse") else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SortOrder"]:
        """Reverse or default from ``sorting.reverse``, else None."""
        if config.sorting is None or config.sorting.reverse is None:
            return None
        return cls.REVERSE if config.sorting.reverse else cls.DEFAULT

    @classmethod
    def default(cls) -> "SortOrder":
        """The natural order."""
        return cls.DEFAULT


class DirGrouping(Configurable, Enum):
    """Where to place directories among other entries."""

    NONE = "none"
    FIRST = "first"
    LAST = "last"

    @classmethod
    def from_arg_str(cls, value: str) -> "DirGrouping":
        """The grouping named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'group-dirs'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["DirGrouping"]:
        """None with --classic, first with --group-directories-first, else the last
        --group-dirs value, else None."""
        if matches.is_present("classic"):
            return cls.NONE
        if matches.is_present("group-directories-first"):
            return cls.FIRST
        if matches.occurrences_of("group-dirs") > 0:
            values = matches.values_of("group-dirs")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["DirGrouping"]:
        """None in classic mode, else the configured ``sorting.dir_grouping``, else None."""
        if config.classic is True:
            return cls.NONE
        if config.sorting is None or config.sorting.dir_grouping is None:
            return None
        value = config.sorting.dir_grouping
        return value if isinstance(value, cls) else cls.from_arg_str(value)

    @classmethod
    def default(cls) -> "DirGrouping":
        """Directories are not grouped."""
        return cls.NONE


@dataclass(frozen=True)
class Sorting:
    """How to sort the output."""

    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Sorting":
        """Resolve column, order and directory grouping from arguments, config and defaults."""
        return cls(
            column=SortColumn.configure_from(matches, config),
            order=SortOrder.configure_from(matches, config),
            dir_grouping=DirGrouping.configure_from(matches, config),
        )