import pytest

from lsopts.base import ArgMatches, Config, FlagError, RecursionConfig
from lsopts.recursion import MAX_DEPTH, Recursion


def _config(enabled=None, depth=None):
    config = Config.with_none()
    config.recursion = RecursionConfig(enabled=enabled, depth=depth)
    return config


def test_enabled_from_arg_matches_empty():
    assert Recursion.enabled_from_arg_matches(ArgMatches()) is None


def test_enabled_from_arg_matches_true():
    assert Recursion.enabled_from_arg_matches(ArgMatches(flags=["recursive"])) is True


def test_enabled_from_empty_matches_and_config():
    assert Recursion.enabled_from(ArgMatches(), Config.with_none()) is False


def test_enabled_from_matches_empty_and_config_true():
    assert Recursion.enabled_from(ArgMatches(), _config(enabled=True)) is True


def test_enabled_from_matches_empty_and_config_false():
    assert Recursion.enabled_from(ArgMatches(), _config(enabled=False)) is False


def test_enabled_argument_overrides_config():
    matches = ArgMatches(flags=["recursive"])
    assert Recursion.enabled_from(matches, _config(enabled=False)) is True


def test_depth_from_arg_matches_empty():
    assert Recursion.depth_from_arg_matches(ArgMatches()) is None


def test_depth_from_arg_matches_integer():
    matches = ArgMatches(options={"depth": "42"})
    assert Recursion.depth_from_arg_matches(matches) == 42


def test_depth_from_arg_matches_depth_multi():
    matches = ArgMatches(options={"depth": ["4", "2"]})
    assert Recursion.depth_from_arg_matches(matches) == 2


@pytest.mark.parametrize("value", ["\\-42", "-42", "foo", "", "4.2"])
def test_depth_from_arg_matches_invalid(value):
    matches = ArgMatches(options={"depth": value})
    with pytest.raises(FlagError, match="requires a valid positive number"):
        Recursion.depth_from_arg_matches(matches)


def test_depth_from_arg_matches_too_large():
    matches = ArgMatches(options={"depth": str(MAX_DEPTH + 1)})
    with pytest.raises(FlagError):
        Recursion.depth_from_arg_matches(matches)


def test_depth_from_config_none_max():
    assert Recursion.depth_from(ArgMatches(), Config.with_none()) == MAX_DEPTH


def test_depth_from_config_pos_integer():
    assert Recursion.depth_from(ArgMatches(), _config(depth=42)) == 42


def test_depth_argument_overrides_config():
    matches = ArgMatches(options={"depth": "3"})
    assert Recursion.depth_from(matches, _config(depth=42)) == 3


def test_configure_from_defaults():
    result = Recursion.configure_from(ArgMatches(), Config.with_none())
    assert result == Recursion(enabled=False, depth=MAX_DEPTH)
    assert result == Recursion()


def test_configure_from_arguments():
    matches = ArgMatches(flags=["recursive"], options={"depth": "2"})
    assert Recursion.configure_from(matches, Config.with_none()) == Recursion(True, 2)


def test_configure_from_config():
    result = Recursion.configure_from(ArgMatches(), _config(enabled=True, depth=5))
    assert result == Recursion(enabled=True, depth=5)


def test_configure_from_invalid_depth_raises():
    matches = ArgMatches(options={"depth": "foo"})
    with pytest.raises(FlagError):
        Recursion.configure_from(matches, Config.with_none())