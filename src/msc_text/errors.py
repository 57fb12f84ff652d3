"""Exceptions raised by the parser and the renderers."""

from __future__ import annotations


class MscSyntaxError(ValueError):
    """Input text does not conform to the MSC grammar.

    ``line`` and ``column`` are 1-based. ``expected`` and ``found`` describe
    the offending token where the parser knows them.
    """

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        super().__init__(f"line {line}, column {column}: {message}")


class RenderError(ValueError):
    """A syntax tree handed to a renderer is structurally invalid."""
