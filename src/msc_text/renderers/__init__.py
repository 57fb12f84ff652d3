"""Renderers: Chart to output text."""

from msc_text.renderers.base import Renderer
from msc_text.renderers.dialect import DialectRules
from msc_text.renderers.text import TextRenderer, render

__all__ = ["DialectRules", "Renderer", "TextRenderer", "render"]
