"""The output layout setting."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from lsopts.base import ArgMatches, Config, Configurable


class Layout(Configurable, Enum):
    """Which output layout to print."""

    GRID = "grid"
    TREE = "tree"
    ONELINE = "oneline"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Layout"]:
        """Tree for --tree; one line for --long, --oneline, --inode, --context or several blocks."""
        if matches.is_present("tree"):
            return cls.TREE
        block_values = [
            part for value in matches.values_of("blocks") or () for part in value.split(",")
        ]
        if (
            matches.is_present("long")
            or matches.is_present("oneline")
            or matches.is_present("inode")
            or matches.is_present("context")
            or len(block_values) > 1
        ):
            return cls.ONELINE
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["Layout"]:
        """The configured layout, or None."""
        if config.layout is None:
            return None
        return cls(config.layout)

    @classmethod
    def default(cls) -> "Layout":
        """The grid layout."""
        return cls.GRID