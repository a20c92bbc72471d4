"""On/off flags and the symlink arrow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from lsopts.base import ArgMatches, Config, Configurable


@dataclass(frozen=True)
class _Toggle(Configurable):
    """A boolean setting switched on by one argument or set by one config key."""

    value: bool = False

    arg_name: ClassVar[str] = ""
    config_key: ClassVar[str] = ""

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["_Toggle"]:
        """Switched on if the argument is present, otherwise None."""
        return cls(True) if matches.is_present(cls.arg_name) else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["_Toggle"]:
        """The configured value, or None if it is unset."""
        value = getattr(config, cls.config_key)
        return None if value is None else cls(bool(value))

    def __bool__(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Dereference(_Toggle):
    """Whether to dereference symbolic links."""

    arg_name: ClassVar[str] = "dereference"
    config_key: ClassVar[str] = "dereference"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Dereference"]:
        return super().from_arg_matches(matches)

    @classmethod
    def from_config(cls, config: Config) -> Optional["Dereference"]:
        return super().from_config(config)


@dataclass(frozen=True)
class Header(_Toggle):
    """Whether to display block headers."""

    arg_name: ClassVar[str] = "header"
    config_key: ClassVar[str] = "header"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Header"]:
        return super().from_arg_matches(matches)

    @classmethod
    def from_config(cls, config: Config) -> Optional["Header"]:
        return super().from_config(config)


@dataclass(frozen=True)
class Indicators(_Toggle):
    """Whether to print file type indicators."""

    arg_name: ClassVar[str] = "indicators"
    config_key: ClassVar[str] = "indicators"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Indicators"]:
        return super().from_arg_matches(matches)

    @classmethod
    def from_config(cls, config: Config) -> Optional["Indicators"]:
        return super().from_config(config)


@dataclass(frozen=True)
class NoSymlink(_Toggle):
    """Whether not to follow symbolic links."""

    arg_name: ClassVar[str] = "no-symlink"
    config_key: ClassVar[str] = "no_symlink"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["NoSymlink"]:
        return super().from_arg_matches(matches)

    @classmethod
    def from_config(cls, config: Config) -> Optional["NoSymlink"]:
        return super().from_config(config)


@dataclass(frozen=True)
class TotalSize(_Toggle):
    """Whether to show the total size of directories."""

    arg_name: ClassVar[str] = "total-size"
    config_key: ClassVar[str] = "total_size"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["TotalSize"]:
        return super().from_arg_matches(matches)

    @classmethod
    def from_config(cls, config: Config) -> Optional["TotalSize"]:
        return super().from_config(config)


@dataclass(frozen=True)
class SymlinkArrow(Configurable):
    """The string shown between a symbolic link and its target."""

    arrow: str = "\u21d2"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> None:
        """The arrow cannot be set on the command line."""
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SymlinkArrow"]:
        """The configured arrow, or None if it is unset."""
        if config.symlink_arrow is None:
            return None
        return cls(str(config.symlink_arrow))

    @classmethod
    def default(cls) -> "SymlinkArrow":
        """The double right arrow."""
        return cls()

    def __str__(self) -> str:
        return self.arrow