"""When to use icons, which icon theme to use and what separates an icon from a name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class IconOption(Configurable, Enum):
    """When to use icons in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def from_arg_str(cls, value: str) -> "IconOption":
        """The option named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'icon'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["IconOption"]:
        """Never with --classic, else the last --icon value, else None."""
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("icon") > 0:
            values = matches.values_of("icon")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["IconOption"]:
        """Never in classic mode, else the configured ``icons.when``, else None."""
        if config.classic is True:
            return cls.NEVER
        if config.icons is None or config.icons.when is None:
            return None
        return _coerce(cls, config.icons.when)

    @classmethod
    def default(cls) -> "IconOption":
        """Automatic detection."""
        return cls.AUTO


class IconTheme(Configurable, Enum):
    """Which icon theme to use."""

    UNICODE = "unicode"
    FANCY = "fancy"

    @classmethod
    def from_arg_str(cls, value: str) -> "IconTheme":
        """The theme named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'icon-theme'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["IconTheme"]:
        """The last --icon-theme value, else None."""
        if matches.occurrences_of("icon-theme") > 0:
            values = matches.values_of("icon-theme")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["IconTheme"]:
        """The configured ``icons.theme``, else None."""
        if config.icons is None or config.icons.theme is None:
            return None
        return _coerce(cls, config.icons.theme)

    @classmethod
    def default(cls) -> "IconTheme":
        """The fancy theme."""
        return cls.FANCY


def _coerce(enum_cls: Any, value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    return enum_cls.from_arg_str(value)


@dataclass(frozen=True)
class IconSeparator(Configurable):
    """The string placed between an icon and a name."""

    separator: str = " "

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> None:
        """The separator cannot be set on the command line."""
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["IconSeparator"]:
        """The configured ``icons.separator``, else None."""
        if config.icons is None or config.icons.separator is None:
            return None
        return cls(config.icons.separator)

    @classmethod
    def default(cls) -> "IconSeparator":
        """A single space."""
        return cls(" ")

    def __str__(self) -> str:
        return self.separator


@dataclass(frozen=True)
class Icons:
    """How to use icons."""

    when: IconOption = IconOption.AUTO
    theme: IconTheme = IconTheme.FANCY
    separator: IconSeparator = IconSeparator()

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Icons":
        """Resolve when, theme and separator from arguments, config and defaults."""
        return cls(
            when=IconOption.configure_from(matches, config),
            theme=IconTheme.configure_from(matches, config),
            separator=IconSeparator.configure_from(matches, config),
        )