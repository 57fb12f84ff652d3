"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from msc_text.syntax.types import Chart


class Renderer(Protocol):
    """Protocol that all chart renderers must implement."""

    def render(self, chart: Chart) -> str:
        """Render a chart to an output string."""
        ...
