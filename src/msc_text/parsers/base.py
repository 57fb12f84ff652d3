"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from msc_text.syntax.types import Chart


class Parser(Protocol):
    """Protocol that all chart parsers must implement."""

    def parse(self, src: str) -> Chart:
        """Parse source text into a Chart."""
        ...
