"""How file permissions are shown."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class PermissionFlag(Configurable, Enum):
    """Which format to show file permissions in."""

    RWX = "rwx"
    OCTAL = "octal"

    @classmethod
    def from_arg_str(cls, value: str) -> "PermissionFlag":
        """The format named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'permission'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["PermissionFlag"]:
        """Rwx with --classic, else the last --permission value, else None."""
        if matches.is_present("classic"):
            return cls.RWX
        if matches.occurrences_of("permission") > 0:
            values = matches.values_of("permission")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["PermissionFlag"]:
        """Rwx in classic mode, else the configured permission format, else None."""
        if config.classic is True:
            return cls.RWX
        value = config.permission
        if value is None:
            return None
        return value if isinstance(value, cls) else cls.from_arg_str(value)

    @classmethod
    def default(cls) -> "PermissionFlag":
        """The rwx format."""
        return cls.RWX