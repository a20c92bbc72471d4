"""Whether and how deep to recurse into directories."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from lsopts.base import ArgMatches, Config, FlagError

MAX_DEPTH = 2**64 - 1
"""The largest depth; it stands for unlimited recursion."""

_DEPTH_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Recursion:
    """Whether recursion is enabled and how far it goes."""

    enabled: bool = False
    depth: int = MAX_DEPTH

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Recursion":
        """Resolve both values; FlagError if the --depth value is not a valid number."""
        enabled = cls.enabled_from(matches, config)
        depth = cls.depth_from(matches, config)
        return cls(enabled=enabled, depth=depth)

    @classmethod
    def enabled_from(cls, matches: ArgMatches, config: Config) -> bool:
        """From --recursive, else ``recursion.enabled``, else False."""
        given = cls.enabled_from_arg_matches(matches)
        if given is not None:
            return given
        if config.recursion is not None and config.recursion.enabled is not None:
            return bool(config.recursion.enabled)
        return False

    @classmethod
    def enabled_from_arg_matches(cls, matches: ArgMatches) -> Optional[bool]:
        """True if --recursive is present, otherwise None."""
        return True if matches.is_present("recursive") else None

    @classmethod
    def depth_from(cls, matches: ArgMatches, config: Config) -> int:
        """From --depth, else ``recursion.depth``, else the maximum depth."""
        given = cls.depth_from_arg_matches(matches)
        if given is not None:
            return given
        if config.recursion is not None and config.recursion.depth is not None:
            return int(config.recursion.depth)
        return MAX_DEPTH

    @classmethod
    def depth_from_arg_matches(cls, matches: ArgMatches) -> Optional[int]:
        """The last --depth value, or None; FlagError if it is not a non-negative integer."""
        values = matches.values_of("depth")
        if not values:
            return None
        text = values[-1]
        if _DEPTH_PATTERN.fullmatch(text):
            value = int(text)
            if value <= MAX_DEPTH:
                return value
        raise FlagError("The argument '--depth' requires a valid positive number.")