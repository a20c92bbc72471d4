import pytest

from lsopts.base import ArgMatches, Config, FlagError
from lsopts.hyperlink import HyperlinkOption


def test_from_arg_matches_none():
    assert HyperlinkOption.from_arg_matches(ArgMatches()) is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("always", HyperlinkOption.ALWAYS),
        ("auto", HyperlinkOption.AUTO),
        ("never", HyperlinkOption.NEVER),
    ],
)
def test_from_arg_matches_value(value, expected):
    matches = ArgMatches(options={"hyperlink": value})
    assert HyperlinkOption.from_arg_matches(matches) is expected


def test_from_arg_matches_classic_mode():
    matches = ArgMatches(flags=["classic"], options={"hyperlink": "always"})
    assert HyperlinkOption.from_arg_matches(matches) is HyperlinkOption.NEVER


def test_from_arg_matches_hyperlink_when_multi():
    matches = ArgMatches(options={"hyperlink": ["always", "never"]})
    assert HyperlinkOption.from_arg_matches(matches) is HyperlinkOption.NEVER


def test_from_arg_str_invalid():
    with pytest.raises(FlagError):
        HyperlinkOption.from_arg_str("maybe")


def test_from_config_none():
    assert HyperlinkOption.from_config(Config.with_none()) is None


@pytest.mark.parametrize("option", list(HyperlinkOption))
def test_from_config_value(option):
    c = Config.with_none()
    c.hyperlink = option
    assert HyperlinkOption.from_config(c) is option


def test_from_config_string_value():
    c = Config.with_none()
    c.hyperlink = "auto"
    assert HyperlinkOption.from_config(c) is HyperlinkOption.AUTO


def test_from_config_classic_mode():
    c = Config.with_none()
    c.classic = True
    c.hyperlink = HyperlinkOption.ALWAYS
    assert HyperlinkOption.from_config(c) is HyperlinkOption.NEVER


def test_default_is_never():
    assert HyperlinkOption.configure_from(ArgMatches(), Config.with_none()) is HyperlinkOption.NEVER