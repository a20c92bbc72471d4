"""Which file system entries to display."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class Display(Configurable, Enum):
    """Which file system entries to display."""

    SYSTEM_PROTECTED = "system-protected"
    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"
    VISIBLE_ONLY = "visible-only"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Display"]:
        """The entries selected by --directory-only, --almost-all, --all or --system-protected."""
        if matches.is_present("directory-only"):
            return cls.DIRECTORY_ONLY
        if matches.is_present("almost-all"):
            return cls.ALMOST_ALL
        if matches.is_present("all"):
            return cls.ALL
        if matches.is_present("system-protected"):
            # System-protected files exist on Windows only; elsewhere this means all.
            return cls.SYSTEM_PROTECTED if sys.platform == "win32" else cls.ALL
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["Display"]:
        """The configured display, or None; FlagError for an unknown value."""
        if config.display is None:
            return None
        try:
            return cls(config.display)
        except ValueError:
            raise FlagError(f"Not a valid display value: {config.display}") from None

    @classmethod
    def default(cls) -> "Display":
        """Only visible entries."""
        return cls.VISIBLE_ONLY