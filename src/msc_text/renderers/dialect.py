"""What each target dialect can express, and how it delimits blocks."""

from __future__ import annotations

from dataclasses import dataclass

from msc_text.grammar import ATTRIBUTE_NAMES, OPTION_NAMES
from msc_text.types import Dialect


@dataclass(frozen=True)
class DialectRules:
    options: tuple[str, ...]
    attributes: tuple[str, ...]
    # Inline expressions: the token written in place of the kind (None keeps
    # it), the text opening and closing the nested rows, and the indent of
    # the closing text relative to the block's own line.
    inline_kind: str | None
    block_open: str
    open_spaced: bool
    block_close: str
    close_ends_line: bool
    close_indent_offset: int

    @classmethod
    def xu(cls) -> DialectRules:
        return cls(
            options=OPTION_NAMES,
            attributes=ATTRIBUTE_NAMES,
            inline_kind=None,
            block_open="{",
            open_spaced=True,
            block_close="}",
            close_ends_line=False,
            close_indent_offset=0,
        )

    @classmethod
    def mscgen(cls) -> DialectRules:
        # mscgen has no inline expressions: they degrade to a "--" arc with
        # the nested rows after it and a "#" comment marking the end.
        return cls(
            options=("hscale", "width", "arcgradient", "wordwraparcs"),
            attributes=tuple(a for a in ATTRIBUTE_NAMES if a != "title"),
            inline_kind="--",
            block_open=";",
            open_spaced=False,
            block_close="#",
            close_ends_line=True,
            close_indent_offset=-1,
        )

    @classmethod
    def for_dialect(cls, dialect: Dialect) -> DialectRules:
        if dialect == Dialect.Mscgen:
            return cls.mscgen()
        return cls.xu()
