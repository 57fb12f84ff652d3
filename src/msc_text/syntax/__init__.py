"""Syntax tree for MSC charts, and its validation."""

from msc_text.syntax.types import Arc, Box, Chart, EmptyArc, Entity, InlineExpression, Message, Options
from msc_text.syntax.validate import validate

__all__ = [
    "Arc",
    "Box",
    "Chart",
    "EmptyArc",
    "Entity",
    "InlineExpression",
    "Message",
    "Options",
    "validate",
]
