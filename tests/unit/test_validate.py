"""Tests for msc_text.syntax.validate."""

import pytest

from msc_text.errors import RenderError
from msc_text.parsers import parse
from msc_text.syntax import validate
from msc_text.syntax.types import Box, Chart, EmptyArc, Entity, InlineExpression, Message, Options
from msc_text.types import ArcKind, BoxKind, EmptyKind, InlineKind


def _nested(depth: int) -> Chart:
    rows = [[Message("a", "a", ArcKind.Signal)]]
    for _ in range(depth):
        rows = [[InlineExpression("a", "a", InlineKind.Loop, rows)]]
    return Chart(entities=[Entity("a")], arcs=rows)


def test_parsed_chart_is_valid():
    validate(parse('# c\nmsc{hscale=2;a [label="x"];a -> *;a note a;...;a alt a {a => a;};}'))


def test_empty_chart_is_valid():
    validate(Chart())


@pytest.mark.parametrize(
    "chart,message",
    [
        (Chart(options=Options(hscale=2)), "option 'hscale' must be a string"),
        (Chart(options=Options(wordwraparcs="on")), "must be a boolean"),
        (Chart(options={"hscale": "2"}), "Options instance"),
        (Chart(entities=[Entity("")]), "non-empty string"),
        (Chart(entities=["a"]), "Entity instances"),
        (Chart(entities=[Entity("a", {"label": 1})]), "string to a string"),
        (Chart(entities=[Entity("a", comments="# c")]), "list of strings"),
        (Chart(arcs=[[]]), "non-empty list"),
        (Chart(arcs=[Message("a", "b", ArcKind.Signal)]), "non-empty list"),
        (Chart(arcs=[[Message("a", "", ArcKind.Signal)]]), "endpoints"),
        (Chart(arcs=[[Message("a", "b", BoxKind.Note)]]), "invalid kind"),
        (Chart(arcs=[[Box("a", "b", ArcKind.Signal)]]), "invalid kind"),
        (Chart(arcs=[[EmptyArc(EmptyKind.Spacer, comments=[1])]]), "list of strings"),
        (Chart(arcs=[["a -> b"]]), "not an arc"),
        (Chart(comments="# c"), "list of strings"),
    ],
)
def test_invalid_charts(chart, message):
    with pytest.raises(RenderError, match=message):
        validate(chart)


def test_nested_invalid_arc_is_found():
    chart = Chart(arcs=[[InlineExpression("a", "b", InlineKind.Alt, [[Message("a", None, ArcKind.Signal)]])]])
    with pytest.raises(RenderError, match="endpoints"):
        validate(chart)


def test_validate_rejects_non_chart():
    with pytest.raises(RenderError, match="expected a Chart"):
        validate({"entities": [], "arcs": []})


def test_depth_limit():
    validate(_nested(3), max_depth=3)
    with pytest.raises(RenderError, match="nested deeper than 2"):
        validate(_nested(3), max_depth=2)


def test_render_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate(Chart(entities=[Entity("")]))
