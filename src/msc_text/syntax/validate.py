"""Structural validation of a Chart before rendering.

Charts parsed with the same max_depth always pass; charts built in code or
loaded from JSON may not.
"""

from __future__ import annotations

from msc_text.config import DEFAULT_MAX_DEPTH
from msc_text.errors import RenderError
from msc_text.grammar import BOOLEAN_OPTIONS, NUMERIC_OPTIONS, STRING_OPTIONS
from msc_text.syntax.types import Arc, Box, Chart, EmptyArc, Entity, InlineExpression, Message, Options
from msc_text.types import ArcKind, BoxKind, EmptyKind, InlineKind

_ARC_KINDS: dict[type, type] = {
    Message: ArcKind,
    Box: BoxKind,
    EmptyArc: EmptyKind,
    InlineExpression: InlineKind,
}


def _check_strings(where: str, items: object) -> None:
    if not isinstance(items, list) or not all(isinstance(s, str) for s in items):
        raise RenderError(f"{where}: comments must be a list of strings")


def _check_attrs(where: str, attrs: object) -> None:
    if not isinstance(attrs, dict):
        raise RenderError(f"{where}: attributes must be a mapping")
    for key, value in attrs.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise RenderError(f"{where}: attribute {key!r} must map a string to a string, got {value!r}")


def _check_options(options: object) -> None:
    if not isinstance(options, Options):
        raise RenderError(f"options must be an Options instance, got {type(options).__name__}")
    for name in NUMERIC_OPTIONS + STRING_OPTIONS:
        value = getattr(options, name)
        if value is not None and not isinstance(value, str):
            raise RenderError(f"option '{name}' must be a string, got {value!r}")
    for name in BOOLEAN_OPTIONS:
        value = getattr(options, name)
        if value is not None and not isinstance(value, bool):
            raise RenderError(f"option '{name}' must be a boolean, got {value!r}")
    if not isinstance(options.extra, dict):
        raise RenderError("extra options must be a mapping")


def _check_entity(entity: object) -> None:
    if not isinstance(entity, Entity):
        raise RenderError(f"entities must be Entity instances, got {type(entity).__name__}")
    if not isinstance(entity.name, str) or not entity.name:
        raise RenderError(f"entity name must be a non-empty string, got {entity.name!r}")
    _check_attrs(f"entity '{entity.name}'", entity.attrs)
    _check_strings(f"entity '{entity.name}'", entity.comments)


def _check_rows(rows: object, depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise RenderError(f"inline expressions nested deeper than {max_depth} levels")
    if not isinstance(rows, list):
        raise RenderError("arcs must be a list of rows")
    for row in rows:
        if not isinstance(row, list) or not row:
            raise RenderError("every arc row must be a non-empty list")
        for arc in row:
            _check_arc(arc, depth, max_depth)


def _check_arc(arc: Arc, depth: int, max_depth: int) -> None:
    kind_enum = _ARC_KINDS.get(type(arc))
    if kind_enum is None:
        raise RenderError(f"not an arc: {arc!r}")
    if not isinstance(arc.kind, kind_enum):
        raise RenderError(f"{type(arc).__name__} has invalid kind {arc.kind!r}")
    where = f"arc '{arc.kind.value}'"
    if not isinstance(arc, EmptyArc):
        for endpoint in (arc.from_id, arc.to_id):
            if not isinstance(endpoint, str) or not endpoint:
                raise RenderError(f"{where}: endpoints must be non-empty strings, got {endpoint!r}")
    _check_attrs(where, arc.attrs)
    _check_strings(where, arc.comments)
    if isinstance(arc, InlineExpression):
        _check_rows(arc.arcs, depth + 1, max_depth)


def validate(chart: Chart, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Raise RenderError when ``chart`` is not a structurally valid tree."""
    if not isinstance(chart, Chart):
        raise RenderError(f"expected a Chart, got {type(chart).__name__}")
    _check_strings("chart", chart.comments)
    _check_options(chart.options)
    if not isinstance(chart.entities, list):
        raise RenderError("entities must be a list")
    for entity in chart.entities:
        _check_entity(entity)
    _check_rows(chart.arcs, 0, max_depth)
