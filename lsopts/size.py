"""Which units file sizes are shown in."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class SizeFlag(Configurable, Enum):
    """Which file size units to use."""

    DEFAULT = "default"
    """SI unit prefix and a B for bytes."""
    SHORT = "short"
    """Only the SI unit prefix."""
    BYTES = "bytes"
    """Plain bytes."""

    @classmethod
    def from_arg_str(cls, value: str) -> "SizeFlag":
        """The units named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'size'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["SizeFlag"]:
        """Bytes with --classic, else the last --size value, else None."""
        if matches.is_present("classic"):
            return cls.BYTES
        if matches.occurrences_of("size") > 0:
            values = matches.values_of("size")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SizeFlag"]:
        """Bytes in classic mode, else the configured size units, else None."""
        if config.classic is True:
            return cls.BYTES
        value = config.size
        if value is None:
            return None
        return value if isinstance(value, cls) else cls.from_arg_str(value)

    @classmethod
    def default(cls) -> "SizeFlag":
        """SI prefix with a B for bytes."""
        return cls.DEFAULT