"""Tests for msc_text.parsers: happy-day charts and syntax errors."""

import pytest

from msc_text.config import ParseConfig
from msc_text.errors import MscSyntaxError
from msc_text.parsers import parse
from msc_text.syntax.types import Box, EmptyArc, InlineExpression, Message
from msc_text.types import ArcKind, BoxKind, EmptyKind, InlineKind

# ─── Options ─────────────────────────────────────────────────────────────────


def test_parse_naked_reals():
    assert parse("msc{HSCAle=481.1337;a;}").options.hscale == "481.1337"


def test_parse_quoted_cardinals():
    assert parse('msc{width="481";a;}').options.width == "481"


def test_parse_quoted_reals():
    assert parse('msc{width="481.1337";a;}').options.width == "481.1337"


def test_parse_naked_cardinals():
    assert parse("msc{width=481;a;}").options.width == "481"


def test_quoted_and_naked_numbers_agree():
    assert parse('msc{width="481";a;}').options == parse("msc{width=481;a;}").options


def test_parse_width_auto():
    assert parse("msc{width=auto;}").options.width == "auto"


def test_parse_boolean_options():
    chart = parse('msc{wordwraparcs=on, wordwrapentities="false", WORDWRAPBOXES=1;}')
    assert chart.options.wordwraparcs is True
    assert chart.options.wordwrapentities is False
    assert chart.options.wordwrapboxes is True


def test_parse_watermark():
    assert parse('msc{watermark="draft \\"1\\"";}').options.watermark == 'draft "1"'


# ─── Entities ────────────────────────────────────────────────────────────────


def test_parse_entities_in_order():
    chart = parse("msc{c, a, b;}")
    assert chart.entity_names() == ["c", "a", "b"]
    assert chart.arcs == []


def test_parse_entity_attributes_case_insensitive():
    chart = parse('msc{a [LABEL="Alice", TextColour="#123456"];}')
    assert chart.entities[0].attrs == {"label": "Alice", "textcolor": "#123456"}


def test_parse_quoted_keyword_entity():
    assert parse('msc{"note";}').entity_names() == ["note"]


def test_parse_without_entities():
    chart = parse("msc{a -> b;}")
    assert chart.entities == []
    assert chart.arcs == [[Message("a", "b", ArcKind.Signal)]]


# ─── Arcs ────────────────────────────────────────────────────────────────────


def test_parse_parallel_row():
    chart = parse('msc{a,b,c;b -> a [label="{paral"], b =>> c [label="lel}"];}')
    assert len(chart.arcs) == 1
    first, second = chart.arcs[0]
    assert first == Message("b", "a", ArcKind.Signal, {"label": "{paral"})
    assert second == Message("b", "c", ArcKind.Callback, {"label": "lel}"})


def test_parse_lost_messages():
    chart = parse("msc{a,b;a -x b;b x- a;}")
    assert [row[0].kind for row in chart.arcs] == [ArcKind.Lost, ArcKind.LostBack]


def test_parse_broadcast():
    arc = parse("msc{a,b;a -> *;}").arcs[0][0]
    assert isinstance(arc, Message)
    assert arc.to_id == "*"
    assert arc.is_broadcast


def test_parse_boxes_case_insensitive():
    chart = parse("msc{a,b;a NOTE b;a Box b;}")
    assert chart.arcs[0][0] == Box("a", "b", BoxKind.Note)
    assert chart.arcs[1][0] == Box("a", "b", BoxKind.Box)


def test_parse_empty_arcs():
    chart = parse('msc{a;...;---[label="x"];|||;}')
    assert chart.arcs == [
        [EmptyArc(EmptyKind.Omitted)],
        [EmptyArc(EmptyKind.Comment, {"label": "x"})],
        [EmptyArc(EmptyKind.Spacer)],
    ]


def test_parse_undeclared_entities_are_allowed():
    assert parse("msc{a;a => ghost;}").arcs[0][0].to_id == "ghost"


def test_parse_escaped_quotes_and_verbatim_escapes():
    arc = parse('msc{a;a -> a [label="say \\"hi\\"\\n"];}').arcs[0][0]
    assert arc.attrs["label"] == 'say "hi"\\n'


# ─── Inline expressions ──────────────────────────────────────────────────────


def test_parse_nested_inline_expressions():
    chart = parse(
        """msc {
          a, b;
          a loop b [label="forever"] {
            a alt b {
              a => b;
            };
            b >> a;
          };
        }"""
    )
    loop = chart.arcs[0][0]
    assert isinstance(loop, InlineExpression)
    assert loop.kind == InlineKind.Loop
    assert loop.attrs == {"label": "forever"}
    alt = loop.arcs[0][0]
    assert isinstance(alt, InlineExpression)
    assert alt.kind == InlineKind.Alt
    assert alt.arcs == [[Message("a", "b", ArcKind.Method)]]
    assert loop.arcs[1] == [Message("b", "a", ArcKind.Return)]


def test_parse_empty_inline_expression():
    arc = parse("msc{a;a opt a {};}").arcs[0][0]
    assert arc == InlineExpression("a", "a", InlineKind.Opt)


def test_parse_semicolon_after_inline_expression_is_optional():
    assert parse("msc{a;a par a {a -> a;} a -> a;}") == parse("msc{a;a par a {a -> a;}; a -> a;}")


def test_nesting_depth_is_limited():
    src = "msc{a;a loop a{a loop a{a loop a{a -> a;};};};}"
    assert parse(src, ParseConfig(max_depth=3)) is not None
    with pytest.raises(MscSyntaxError, match="nested deeper than 2"):
        parse(src, ParseConfig(max_depth=2))


def test_deep_nesting_fails_cleanly():
    depth = 200
    src = "msc{a;" + "a loop a{" * depth + "a -> a;" + "};" * depth + "}"
    with pytest.raises(MscSyntaxError):
        parse(src)


# ─── Comments ────────────────────────────────────────────────────────────────


def test_parse_pre_comments_in_order():
    chart = parse("# pre comment\n/* pre\n * multiline\n */\n// slashes\nmsc{a;}")
    assert chart.comments == ["# pre comment", "/* pre\n * multiline\n */", "// slashes"]


def test_comments_attach_to_following_entity_and_arc():
    chart = parse("msc {\n  # first\n  a,\n  /* second */ b;\n  # call\n  a -> b, # reply\n  b -> a;\n}")
    assert chart.entities[0].comments == ["# first"]
    assert chart.entities[1].comments == ["/* second */"]
    assert chart.arcs[0][0].comments == ["# call"]
    assert chart.arcs[0][1].comments == ["# reply"]


def test_comments_inside_options_and_attributes_are_discarded():
    chart = parse("msc {\n  # gone\n  hscale=2 /* gone */;\n  a [label=\"x\" # gone\n  ];\n  # trailing\n}")
    assert chart.options.hscale == "2"
    assert chart.entities[0].comments == []
    assert chart.entities[0].attrs == {"label": "x"}
    assert chart.arcs == []


# ─── Syntax errors ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "src,message",
    [
        ("", "expected 'msc'"),
        ("foo{}", "expected 'msc'"),
        ("msc{a;", "expected '}' but found end of input"),
        ('msc{a -> "b;}', "unterminated string"),
        ("msc{a;a alt b {a -> b;}", "expected '}'"),
        ("msc{a;a frob b;}", "expected an arc operator"),
        ("msc{note;}", "reserved word 'note'"),
        ("msc{loop;}", "reserved word 'loop'"),
        ("msc{a;a -> alt;}", "reserved word 'alt'"),
        ("msc{foo=1;a;}", "unknown option 'foo'"),
        ("msc{hscale=abc;}", "expects a number"),
        ("msc{wordwraparcs=maybe;}", "expects a boolean"),
        ('msc{a [flavour="x"];}', "unknown attribute 'flavour'"),
        ("msc{a;a -> b}", "expected ',' or ';'"),
        ("msc{a;}x", "expected end of input"),
        ("msc{a;/* open", "unterminated block comment"),
        ("msc{a;* note a;}", "only allowed on messages"),
        ('msc{"";}', "an entity name cannot be an empty string"),
        ('msc{a;a -> "";}', "an entity name cannot be an empty string"),
        ('msc{a;"" note a;}', "an entity name cannot be an empty string"),
    ],
)
def test_syntax_errors(src, message):
    with pytest.raises(MscSyntaxError, match=message):
        parse(src)


def test_syntax_error_reports_line_and_column():
    with pytest.raises(MscSyntaxError) as excinfo:
        parse("msc {\n  a;\n  a => ;\n}")
    err = excinfo.value
    assert (err.line, err.column) == (3, 8)
    assert err.expected == "an entity name"
    assert err.found == "';'"
    assert str(err).startswith("line 3, column 8:")


def test_syntax_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse("msc")
