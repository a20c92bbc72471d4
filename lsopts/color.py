"""When to use colors and which color theme to use."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError


class ColorOption(Configurable, Enum):
    """When to use colors in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def from_arg_str(cls, value: str) -> "ColorOption":
        """The option named on the command line; FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Invalid value '{value}' for 'color'") from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["ColorOption"]:
        """Never with --classic, else the last --color value, else None."""
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("color") > 0:
            values = matches.values_of("color")
            if values:
                return cls.from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["ColorOption"]:
        """Never in classic mode, else the configured ``color.when``, else None."""
        if config.classic is True:
            return cls.NEVER
        if config.color is None or config.color.when is None:
            return None
        return cls.from_arg_str(config.color.when) if isinstance(
            config.color.when, str
        ) else cls(config.color.when)

    @classmethod
    def from_environment(cls) -> Optional["ColorOption"]:
        """Never if NO_COLOR is set, otherwise None."""
        return cls.NEVER if "NO_COLOR" in os.environ else None

    @classmethod
    def default(cls) -> "ColorOption":
        """Automatic detection."""
        return cls.AUTO


class ThemeKind(Enum):
    """The kinds of color theme."""

    NO_COLOR = "no-color"
    DEFAULT = "default"
    NO_LSCOLORS = "no-lscolors"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ThemeOption:
    """Which color theme to use; a custom theme carries the path of its file."""

    kind: ThemeKind = ThemeKind.DEFAULT
    path: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "ThemeOption":
        """``default`` is the default theme; anything else is a theme file path."""
        if value == "default":
            return cls(ThemeKind.DEFAULT)
        return cls(ThemeKind.CUSTOM, value)

    @classmethod
    def from_config(cls, config: Config) -> "ThemeOption":
        """No color in classic mode, else the configured theme, else the default."""
        if config.classic is True:
            return cls(ThemeKind.NO_COLOR)
        theme: Any = config.color.theme if config.color is not None else None
        if theme is None:
            return cls()
        if isinstance(theme, ThemeOption):
            return theme
        if isinstance(theme, str):
            return cls.parse(theme)
        raise FlagError(f"Not a valid color theme: {theme!r}")


@dataclass(frozen=True)
class Color:
    """How to use colors."""

    when: ColorOption = ColorOption.AUTO
    theme: ThemeOption = field(default_factory=ThemeOption)

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Color":
        """Resolve when to color and the theme from arguments, environment and config."""
        return cls(
            when=ColorOption.configure_from(matches, config),
            theme=ThemeOption.from_config(config),
        )