"""Which kind of time stamp to display."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError, report_error

_PLAIN_SPECIFIERS = frozenset("AaBbCcDdeFfGgHhIjklMmnpRrSsTtUuVvWwXxYyZz+%")
_PADDED_SPECIFIERS = frozenset("defHIjklmMSsuUVwWyY")
_FRACTION_DIGITS = frozenset("369")


def _next_spec(chars: Iterator[str]) -> str:
    char = next(chars, None)
    if char is None:
        raise FlagError("missing format specifier")
    return char


def validate_time_format(value: str) -> None:
    """Check the strftime specifiers in a date format; FlagError if one is invalid."""
    chars = iter(value)
    for char in chars:
        if char != "%":
            continue
        spec = _next_spec(chars)
        if spec == ".":
            digit = _next_spec(chars)
            if digit == "f":
                continue
            if digit in _FRACTION_DIGITS:
                last = _next_spec(chars)
                if last != "f":
                    raise FlagError(f"invalid format specifier: %.{digit}{last}")
                continue
            raise FlagError(f"invalid format specifier: %.{digit}")
        if spec in (":", "#"):
            last = _next_spec(chars)
            if last != "z":
                raise FlagError(f"invalid format specifier: %{spec}{last}")
        elif spec in ("-", "_", "0"):
            last = _next_spec(chars)
            if last not in _PADDED_SPECIFIERS:
                raise FlagError(f"invalid format specifier: %{spec}{last}")
        elif spec in _FRACTION_DIGITS:
            last = _next_spec(chars)
            if last != "f":
                raise FlagError(f"invalid format specifier: %{spec}{last}")
        elif spec not in _PLAIN_SPECIFIERS:
            raise FlagError(f"invalid format specifier: %{spec}")


class DateKind(Enum):
    """The kinds of time stamp display."""

    DATE = "date"
    RELATIVE = "relative"
    ISO = "iso"
    FORMATTED = "formatted"


@dataclass(frozen=True)
class DateFlag(Configurable):
    """Which kind of time stamp to display; a formatted one carries its strftime format."""

    kind: DateKind = DateKind.DATE
    fmt: Optional[str] = None

    @classmethod
    def from_format_string(cls, value: str) -> Optional["DateFlag"]:
        """A formatted flag from ``+FORMAT``; reports and returns None if invalid."""
        try:
            validate_time_format(value)
        except FlagError:
            report_error(f"Not a valid date format: {value}.")
            return None
        return cls(DateKind.FORMATTED, value[1:])

    @classmethod
    def from_str(cls, value: str) -> Optional["DateFlag"]:
        """``date``, ``relative`` or ``+FORMAT``; reports and returns None otherwise."""
        if value == "date":
            return cls(DateKind.DATE)
        if value == "relative":
            return cls(DateKind.RELATIVE)
        if value.startswith("+"):
            return cls.from_format_string(value)
        report_error(f"Not a valid date value: {value}.")
        return None

    @classmethod
    def _from_arg_str(cls, value: str) -> "DateFlag":
        if value == "date":
            return cls(DateKind.DATE)
        if value == "relative":
            return cls(DateKind.RELATIVE)
        if value.startswith("+"):
            validate_time_format(value)
            return cls(DateKind.FORMATTED, value[1:])
        raise FlagError("--date <date> (with a valid date value: date, relative or +format)")

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["DateFlag"]:
        """Date with --classic, else the last --date value, else None; FlagError if invalid."""
        if matches.is_present("classic"):
            return cls(DateKind.DATE)
        if matches.occurrences_of("date") > 0:
            values = matches.values_of("date")
            if values:
                return cls._from_arg_str(values[-1])
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["DateFlag"]:
        """Date in classic mode, else the configured date value, else None."""
        if config.classic is True:
            return cls(DateKind.DATE)
        if config.date is None:
            return None
        return cls.from_str(config.date)

    @classmethod
    def from_environment(cls) -> Optional["DateFlag"]:
        """The style named by TIME_STYLE, or None."""
        value = os.environ.get("TIME_STYLE")
        if value is None:
            return None
        if value == "full-iso":
            return cls(DateKind.FORMATTED, "%F %T.%f %z")
        if value == "long-iso":
            return cls(DateKind.FORMATTED, "%F %R")
        if value == "iso":
            return cls(DateKind.ISO)
        if value.startswith("+"):
            return cls.from_format_string(value)
        report_error(f"Not a valid date value: {value}.")
        return None

    @classmethod
    def default(cls) -> "DateFlag":
        """The plain date."""
        return cls(DateKind.DATE)