"""When to render file names as hyperlinks."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class HyperlinkOption(Configurable, Enum):
    """When to use hyperlinks in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def from_arg_str(cls, value: str) -> "HyperlinkOption":
        """The option named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'hyperlink'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["HyperlinkOption"]:
        """Never with --classic, else the last --hyperlink value, else None."""
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("hyperlink") > 0:
            values = matches.values_of("hyperlink")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["HyperlinkOption"]:
        """Never in classic mode, else the configured hyperlink option, else None."""
        if config.classic is True:
            return cls.NEVER
        value = config.hyperlink
        if value is None:
            return None
        return value if isinstance(value, cls) else cls.from_arg_str(value)

    @classmethod
    def default(cls) -> "HyperlinkOption":
        """No hyperlinks."""
        return cls.NEVER