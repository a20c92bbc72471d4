import pytest

from lsopts.base import ArgMatches, ColorConfig, Config, FlagError
from lsopts.color import Color, ColorOption, ThemeKind, ThemeOption


def config_with(when=None, theme=None, classic=None):
    c = Config.with_none()
    c.color = ColorConfig(when=when, theme=theme)
    c.classic = classic
    return c


def test_from_arg_matches_none():
    assert ColorOption.from_arg_matches(ArgMatches()) is None


@pytest.mark.parametrize(
    "value, expected",
    [("always", ColorOption.ALWAYS), ("auto", ColorOption.AUTO), ("never", ColorOption.NEVER)],
)
def test_from_arg_matches_values(value, expected):
    matches = ArgMatches(options={"color": value})
    assert ColorOption.from_arg_matches(matches) is expected


def test_from_env_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "true")
    assert ColorOption.from_environment() is ColorOption.NEVER


def test_from_env_without_no_color(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert ColorOption.from_environment() is None


def test_from_arg_matches_classic_mode():
    matches = ArgMatches(flags=["classic"], options={"color": "always"})
    assert ColorOption.from_arg_matches(matches) is ColorOption.NEVER


def test_from_arg_matches_color_multiple():
    matches = ArgMatches(options={"color": ["always", "never"]})
    assert ColorOption.from_arg_matches(matches) is ColorOption.NEVER


def test_from_arg_str_invalid():
    with pytest.raises(FlagError, match="Invalid value 'sometimes' for 'color'"):
        ColorOption.from_arg_str("sometimes")


def test_from_config_none():
    assert ColorOption.from_config(Config.with_none()) is None


@pytest.mark.parametrize("option", [ColorOption.ALWAYS, ColorOption.AUTO, ColorOption.NEVER])
def test_from_config_values(option):
    assert ColorOption.from_config(config_with(when=option)) is option


def test_from_config_string_value():
    assert ColorOption.from_config(config_with(when="always")) is ColorOption.ALWAYS


def test_from_config_classic_mode():
    c = config_with(when=ColorOption.ALWAYS, classic=True)
    assert ColorOption.from_config(c) is ColorOption.NEVER


def test_configure_from_default(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert ColorOption.configure_from(ArgMatches(), Config.with_none()) is ColorOption.AUTO


def test_configure_from_env_beats_config(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    c = config_with(when=ColorOption.ALWAYS)
    assert ColorOption.configure_from(ArgMatches(), c) is ColorOption.NEVER


def test_configure_from_arg_beats_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    matches = ArgMatches(options={"color": "always"})
    assert ColorOption.configure_from(matches, Config.with_none()) is ColorOption.ALWAYS


def test_theme_from_config_none_default():
    assert ThemeOption.from_config(Config.with_none()) == ThemeOption(ThemeKind.DEFAULT)


def test_theme_from_config_default():
    c = config_with(theme=ThemeOption(ThemeKind.DEFAULT))
    assert ThemeOption.from_config(c) == ThemeOption(ThemeKind.DEFAULT)


def test_theme_from_config_no_color():
    c = config_with(theme=ThemeOption(ThemeKind.NO_COLOR))
    assert ThemeOption.from_config(c) == ThemeOption(ThemeKind.NO_COLOR)


def test_theme_from_config_no_lscolor():
    c = config_with(theme=ThemeOption(ThemeKind.NO_LSCOLORS))
    assert ThemeOption.from_config(c) == ThemeOption(ThemeKind.NO_LSCOLORS)


def test_theme_from_config_bad_file_flag():
    c = config_with(theme=ThemeOption(ThemeKind.CUSTOM, "not-existed"))
    assert ThemeOption.from_config(c) == ThemeOption(ThemeKind.CUSTOM, "not-existed")


def test_theme_from_config_classic_mode():
    c = config_with(theme=ThemeOption(ThemeKind.DEFAULT), classic=True)
    assert ThemeOption.from_config(c) == ThemeOption(ThemeKind.NO_COLOR)


def test_theme_parse():
    assert ThemeOption.parse("default") == ThemeOption(ThemeKind.DEFAULT)
    assert ThemeOption.parse("mytheme.yaml") == ThemeOption(ThemeKind.CUSTOM, "mytheme.yaml")


def test_theme_from_config_string():
    c = config_with(theme="custom.yaml")
    assert ThemeOption.from_config(c) == ThemeOption(ThemeKind.CUSTOM, "custom.yaml")


def test_color_configure_from(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    c = config_with(when=ColorOption.NEVER, theme="custom.yaml")
    result = Color.configure_from(ArgMatches(), c)
    assert result == Color(ColorOption.NEVER, ThemeOption(ThemeKind.CUSTOM, "custom.yaml"))