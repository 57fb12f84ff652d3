"""Parser entry point."""

from __future__ import annotations

from msc_text.config import ParseConfig
from msc_text.parsers.base import Parser
from msc_text.parsers.mscgen import MscgenParser
from msc_text.syntax.types import Chart


def parse(src: str, config: ParseConfig | None = None) -> Chart:
    """Parse mscgen (or xù) source text into a Chart.

    Raises MscSyntaxError when the text does not conform to the grammar.
    """
    parser: Parser = MscgenParser(config)
    return parser.parse(src)


__all__ = ["MscgenParser", "Parser", "parse"]
