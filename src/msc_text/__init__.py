"""msc-text: MSC (mscgen / xù) source text to syntax tree and back."""

from msc_text.errors import MscSyntaxError, RenderError
from msc_text.parsers import parse
from msc_text.renderers.text import render
from msc_text.syntax.types import Chart
from msc_text.types import Dialect

_DIALECT_MAP: dict[str, Dialect] = {d.value: d for d in Dialect}


def dialect_from_name(name: str | None) -> Dialect:
    """Look up a Dialect by name ('xu' or 'mscgen'); None gives the default."""
    if name is None:
        return Dialect.default()
    key = name.lower()
    if key not in _DIALECT_MAP:
        raise ValueError(f"Unknown dialect '{name}'; use {' or '.join(_DIALECT_MAP)}")
    return _DIALECT_MAP[key]


def translate(src: str, minify: bool = False, dialect: str | Dialect | None = None) -> str:
    """Parse MSC source text and render it back, pretty-printed or minified.

    Args:
        src: MSC source string.
        minify: True for the most compact output.
        dialect: Target dialect, as a Dialect or its name; None keeps the default (xù).

    Returns:
        The rendered MSC source text.

    Raises:
        MscSyntaxError: If the input cannot be parsed.
        ValueError: If the dialect is unknown.
    """
    target = dialect if isinstance(dialect, Dialect) else dialect_from_name(dialect)
    return render(parse(src), minify=minify, dialect=target)


__all__ = [
    "Chart",
    "Dialect",
    "MscSyntaxError",
    "RenderError",
    "dialect_from_name",
    "parse",
    "render",
    "translate",
]
