# lsopts

`lsopts` works out the display options of a directory-listing tool. Each
option is taken from the first source that gives a value:

1. the parsed command line (`ArgMatches`),
2. the environment, for the options that read it (`NO_COLOR`, `TIME_STYLE`),
3. the configuration (`Config`),
4. the option's default.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

The `test` extra brings in pytest: `pip install .[test]`.

## Usage

Build an `ArgMatches` from the arguments that were found on the command
line and a `Config` holding the configuration settings, then ask each
option to resolve itself:

```python
from lsopts.base import ArgMatches, Config
from lsopts.blocks import Blocks
from lsopts.layout import Layout
from lsopts.sorting import Sorting
from lsopts.recursion import Recursion

matches = ArgMatches(
    flags=["long", "inode"],
    options={"blocks": "permission,name", "sort": ["size", "time"]},
)
config = Config.with_none()

Blocks.configure_from(matches, config).blocks   # [Block.INODE, Block.PERMISSION, Block.NAME]
Layout.configure_from(matches, config)          # Layout.ONELINE
Sorting.configure_from(matches, config).column  # SortColumn.TIME (last --sort wins)
Recursion.configure_from(matches, config).depth # lsopts.recursion.MAX_DEPTH
```

### `ArgMatches`

`flags` lists the ids of arguments without a value, once per occurrence.
`options` maps an argument id to its occurrences: a single string is one
occurrence, a list holds one entry per occurrence, and an entry may itself
be a list of values. `is_present`, `occurrences_of` and `values_of` answer
questions about them. The ids the options read are:

| Module | Argument ids |
| --- | --- |
| `blocks` | `blocks`, `long`, `context`, `inode` |
| `layout` | `tree`, `long`, `oneline`, `inode`, `context`, `blocks` |
| `color` | `classic`, `color` |
| `date` | `classic`, `date` |
| `display` | `directory-only`, `almost-all`, `all`, `system-protected` |
| `icons` | `classic`, `icon`, `icon-theme` |
| `hyperlink` | `classic`, `hyperlink` |
| `permission` | `classic`, `permission` |
| `size` | `classic`, `size` |
| `sorting` | `sort`, `timesort`, `sizesort`, `extensionsort`, `versionsort`, `no-sort`, `reverse`, `classic`, `group-dirs`, `group-directories-first` |
| `recursion` | `recursive`, `depth` |
| `ignore_globs` | `ignore-glob` |
| `toggles` | `dereference`, `header`, `indicators`, `no-symlink`, `total-size` |

`--blocks` values may be comma-separated lists.

### `Config`

`Config` is a dataclass of optional settings; `Config.with_none()` leaves
them all unset. The sections `color`, `icons`, `recursion` and `sorting`
take `ColorConfig`, `IconsConfig`, `RecursionConfig` and `SortingConfig`.
Enumerated settings accept either the enum member or its name, for example
`config.layout = "tree"` or `config.size = SizeFlag.BYTES`.

### Modules

- `lsopts.blocks`: `Block` (with `from_name` and `header`) and `Blocks`,
  which also offers `long()`, `default()` and `displays_size()`.
- `lsopts.layout`: `Layout`.
- `lsopts.color`: `Color`, `ColorOption`, `ThemeKind`, `ThemeOption`.
- `lsopts.date`: `DateFlag`, `DateKind`, and `validate_time_format` for
  checking the strftime specifiers of a `+FORMAT` string.
- `lsopts.display`: `Display`. `system-protected` means `SYSTEM_PROTECTED`
  on Windows and `ALL` elsewhere.
- `lsopts.icons`: `Icons`, `IconOption`, `IconTheme`, `IconSeparator`.
- `lsopts.hyperlink`: `HyperlinkOption`.
- `lsopts.permission`: `PermissionFlag`, rwx or octal.
- `lsopts.size`: `SizeFlag`.
- `lsopts.sorting`: `Sorting`, `SortColumn`, `SortOrder`, `DirGrouping`.
- `lsopts.recursion`: `Recursion` and `MAX_DEPTH`, the depth that stands
  for unlimited recursion.
- `lsopts.ignore_globs`: `IgnoreGlobs`; `is_match(name)` tests whether any
  glob matches the whole name. Globs support `*`, `?`, `[...]` classes
  (negated with `!` or `^`), `{a,b}` alternatives, `**/` and `\` escapes.
- `lsopts.toggles`: the on/off options `Dereference`, `Header`,
  `Indicators`, `NoSymlink`, `TotalSize`, and the `SymlinkArrow` string
  (default `⇒`).
- `lsopts.base`: `ArgMatches`, `Config` and its sections, the
  `Configurable` base class, `FlagError` and `report_error`.

### Classic mode

The `classic` argument, or `classic=True` in the configuration, takes
priority: colours, icons and hyperlinks are set to never, sizes to bytes,
permissions to rwx, dates to the plain date, and directories are not
grouped. In the configuration it also selects the no-colour theme.

### Errors

Invalid values raise `lsopts.base.FlagError`: an unknown block name or
enum value on the command line or in the configuration, an invalid
`--date` value or format, a malformed glob, or a `--depth` that is not a
non-negative integer. Two kinds of configuration entry are reported on
standard error through `report_error` instead: unknown names in
`Config.blocks` are skipped, and an invalid `Config.date` or `TIME_STYLE`
value is ignored.

## What this package does not do

It does not parse a command line, read a configuration file from disk,
or list directories. It takes arguments already sorted into an
`ArgMatches` and settings already placed in a `Config`, and returns the
resolved options.