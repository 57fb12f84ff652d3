"""Centralized configuration for msc-text."""

from __future__ import annotations

from dataclasses import dataclass, field

from msc_text.types import Dialect

DEFAULT_MAX_DEPTH = 64


@dataclass
class ParseConfig:
    """Configuration for the parser."""

    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class RenderConfig:
    """Configuration for the text rendering pipeline."""

    minify: bool = False
    dialect: Dialect = field(default_factory=Dialect.default)
    max_depth: int = DEFAULT_MAX_DEPTH
