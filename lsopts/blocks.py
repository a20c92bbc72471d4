"""The blocks of data shown for each file, and their resolution from arguments and config."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from lsopts.base import ArgMatches, Config, Configurable, FlagError, report_error


class Block(Enum):
    """A block of data to show."""

    PERMISSION = "permission"
    USER = "user"
    GROUP = "group"
    CONTEXT = "context"
    SIZE = "size"
    SIZE_VALUE = "size_value"
    DATE = "date"
    NAME = "name"
    INODE = "inode"
    LINKS = "links"

    @classmethod
    def from_name(cls, name: str) -> "Block":
        """The block with the given configuration name; FlagError if there is none."""
        try:
            return cls(name)
        except ValueError:
            raise FlagError(f"Not a valid block name: {name}") from None

    def header(self) -> str:
        """The column title shown above this block."""
        return _HEADERS[self]


_HEADERS = {
    Block.INODE: "INode",
    Block.LINKS: "Links",
    Block.PERMISSION: "Permissions",
    Block.USER: "User",
    Block.GROUP: "Group",
    Block.CONTEXT: "Context",
    Block.SIZE: "Size",
    Block.SIZE_VALUE: "SizeValue",
    Block.DATE: "Date Modified",
    Block.NAME: "Name",
}


def _split_values(values: Optional[list[str]]) -> list[str]:
    """Values given on the command line, with comma-separated lists expanded."""
    return [part for value in values or () for part in value.split(",")]


@dataclass
class Blocks(Configurable):
    """The ordered blocks to display."""

    blocks: list[Block] = field(default_factory=lambda: [Block.NAME])

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __contains__(self, block: object) -> bool:
        return block in self.blocks

    @classmethod
    def long(cls) -> "Blocks":
        """The blocks of the long format."""
        return cls(
            [Block.PERMISSION, Block.USER, Block.GROUP, Block.SIZE, Block.DATE, Block.NAME]
        )

    @classmethod
    def default(cls) -> "Blocks":
        """Only the name."""
        return cls([Block.NAME])

    def displays_size(self) -> bool:
        """Whether the size block is shown."""
        return Block.SIZE in self.blocks

    def _prepend_inode_if_missing(self) -> None:
        if Block.INODE not in self.blocks:
            self.blocks.insert(0, Block.INODE)

    def _insert_context_if_missing(self) -> None:
        # Placed after the group, else after the user, else first, as ls does.
        if Block.CONTEXT in self.blocks:
            return
        for anchor in (Block.GROUP, Block.USER):
            if anchor in self.blocks:
                self.blocks.insert(self.blocks.index(anchor) + 1, Block.CONTEXT)
                return
        self.blocks.insert(0, Block.CONTEXT)

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Blocks":
        """Blocks from arguments, then config (with --long), then long or default.

        With --context a context block is inserted and with --inode an inode block
        is prepended, unless already present.
        """
        is_long = matches.is_present("long")
        blocks = cls.long() if is_long else cls.default()

        if is_long:
            configured = cls.from_config(config)
            if configured is not None:
                blocks = configured

        given = cls.from_arg_matches(matches)
        if given is not None:
            blocks = given

        if matches.is_present("context"):
            blocks._insert_context_if_missing()
        if matches.is_present("inode"):
            blocks._prepend_inode_if_missing()
        return blocks

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Blocks"]:
        """The blocks given with --blocks, or None; FlagError for an unknown name."""
        if matches.occurrences_of("blocks") == 0:
            return None
        values = _split_values(matches.values_of("blocks"))
        if not values:
            return None
        return cls([Block.from_name(value) for value in values])

    @classmethod
    def from_config(cls, config: Config) -> Optional["Blocks"]:
        """The configured blocks, skipping and reporting unknown names; None if none remain."""
        if config.blocks is None:
            return None
        blocks = []
        for name in config.blocks:
            try:
                blocks.append(Block.from_name(name))
            except FlagError as err:
                report_error(f"{err}.")
        return cls(blocks) if blocks else None