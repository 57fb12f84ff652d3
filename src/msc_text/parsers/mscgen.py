"""MSC parser: hand-rolled recursive descent.

Parses mscgen source, including the xù inline expressions (alt, loop, par,
...), into the AST types from syntax.types. One method per production; the
informal grammar lives in msc_text.grammar.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from msc_text.config import ParseConfig
from msc_text.errors import MscSyntaxError
from msc_text.grammar import (
    ARC_OPERATORS,
    ATTRIBUTE_NAMES,
    BARE_VALUE_RE,
    BOOLEAN_OPTIONS,
    BOX_KEYWORDS,
    BROADCAST,
    EMPTY_ARCS,
    FALSE_VALUES,
    IDENTIFIER_RE,
    INLINE_KEYWORDS,
    NUMERIC_OPTIONS,
    OPTION_NAMES,
    RESERVED_WORDS,
    TRUE_VALUES,
    is_number,
    normalize_attribute_name,
)
from msc_text.syntax.types import Arc, Box, Chart, EmptyArc, Entity, InlineExpression, Message, Options
from msc_text.types import BoxKind

log = logging.getLogger(__name__)

# ─── Tokenizer ───────────────────────────────────────────────────────────────

_WHITESPACE_RE = re.compile(r"\s+")
_LINE_COMMENT_RE = re.compile(r"(?:#|//)[^\r\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


@dataclass
class _Cursor:
    """Stateful parser cursor over the input string."""

    src: str
    config: ParseConfig = field(default_factory=ParseConfig)
    pos: int = 0

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def consume(self, s: str) -> bool:
        if self.peek(s):
            self.pos += len(s)
            return True
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def keyword(self, table: dict[str, object]) -> object | None:
        """Consume a case-insensitive keyword from ``table``; return its value."""
        m = IDENTIFIER_RE.match(self.src, self.pos)
        if m and m.group(0).lower() in table:
            self.pos = m.end()
            return table[m.group(0).lower()]
        return None

    # ── Errors ────────────────────────────────────────────────────────────────

    def found(self) -> str:
        if self.eof():
            return "end of input"
        m = IDENTIFIER_RE.match(self.src, self.pos)
        if m:
            return f"'{m.group(0)}'"
        return f"'{self.src[self.pos]}'"

    def error(self, message: str, expected: str | None = None, pos: int | None = None) -> MscSyntaxError:
        at = self.pos if pos is None else pos
        line = self.src.count("\n", 0, at) + 1
        column = at - self.src.rfind("\n", 0, at)
        found = self.found() if pos is None else None
        if expected is not None and found is not None:
            message = f"{message}: expected {expected} but found {found}"
        return MscSyntaxError(message, line, column, expected=expected, found=found)

    def expect(self, s: str) -> None:
        self.skip_ws()
        if not self.consume(s):
            raise self.error("syntax error", expected=f"'{s}'")

    # ── Whitespace and comments ───────────────────────────────────────────────

    def read_comment(self) -> str | None:
        if self.peek("/*"):
            m = _BLOCK_COMMENT_RE.match(self.src, self.pos)
            if m is None:
                raise self.error("unterminated block comment")
            self.pos = m.end()
            return m.group(0)
        return self.match_re(_LINE_COMMENT_RE)

    def collect_comments(self) -> list[str]:
        """Skip whitespace, returning the comments passed on the way."""
        comments: list[str] = []
        while True:
            self.match_re(_WHITESPACE_RE)
            comment = self.read_comment()
            if comment is None:
                return comments
            comments.append(comment.rstrip() if not comment.startswith("/*") else comment)

    def skip_ws(self) -> None:
        """Skip whitespace and comments; comments here are not attached to anything."""
        self.collect_comments()

    # ── Names and values ──────────────────────────────────────────────────────

    def parse_quoted_string(self) -> str:
        """Parse "..." where \\" is an escaped quote. Other escapes stay verbatim."""
        start = self.pos
        self.pos += 1
        buf: list[str] = []
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(buf)
            if ch == "\\" and self.pos + 1 < len(self.src):
                nxt = self.src[self.pos + 1]
                buf.append('"' if nxt == '"' else ch + nxt)
                self.pos += 2
            else:
                buf.append(ch)
                self.pos += 1
        raise self.error("unterminated string", pos=start)

    def parse_name(self, what: str) -> str:
        self.skip_ws()
        start = self.pos
        if self.peek('"'):
            name = self.parse_quoted_string()
            if not name:
                raise self.error(f"{what} cannot be an empty string", pos=start)
            return name
        name = self.match_re(IDENTIFIER_RE)
        if name is None:
            raise self.error("syntax error", expected=what)
        if name.lower() in RESERVED_WORDS:
            raise self.error(f"reserved word '{name}' cannot be used as {what} unless quoted", pos=start)
        return name

    def parse_endpoint(self) -> str:
        self.skip_ws()
        if self.consume(BROADCAST):
            return BROADCAST
        return self.parse_name("an entity name")

    def parse_value(self) -> str:
        self.skip_ws()
        if self.peek('"'):
            return self.parse_quoted_string()
        value = self.match_re(BARE_VALUE_RE)
        if value is None:
            raise self.error("syntax error", expected="a value")
        return value

    # ── Options ───────────────────────────────────────────────────────────────

    def at_option(self) -> bool:
        saved = self.pos
        found = self.match_re(IDENTIFIER_RE) is not None
        if found:
            self.skip_ws()
            found = self.peek("=")
        self.pos = saved
        return found

    def parse_option(self, options: Options) -> None:
        self.skip_ws()
        start = self.pos
        key = self.match_re(IDENTIFIER_RE)
        if key is None:
            raise self.error("syntax error", expected="an option name")
        name = key.lower()
        if name not in OPTION_NAMES:
            raise self.error(f"unknown option '{key}'", pos=start)
        self.expect("=")
        self.skip_ws()
        value_pos = self.pos
        value = self.parse_value()

        if name in BOOLEAN_OPTIONS:
            if value.lower() in TRUE_VALUES:
                setattr(options, name, True)
            elif value.lower() in FALSE_VALUES:
                setattr(options, name, False)
            else:
                raise self.error(f"option '{name}' expects a boolean, got '{value}'", pos=value_pos)
            return
        if name in NUMERIC_OPTIONS:
            if name == "width" and value.lower() == "auto":
                value = "auto"
            elif not is_number(value):
                raise self.error(f"option '{name}' expects a number, got '{value}'", pos=value_pos)
        setattr(options, name, value)

    def parse_option_list(self) -> Options:
        options = Options()
        while True:
            self.parse_option(options)
            self.skip_ws()
            if self.consume(";"):
                return options
            if not self.consume(","):
                raise self.error("syntax error", expected="',' or ';'")

    # ── Attributes ────────────────────────────────────────────────────────────

    def try_parse_attributes(self) -> dict[str, str]:
        self.skip_ws()
        if not self.consume("["):
            return {}
        attrs: dict[str, str] = {}
        self.skip_ws()
        if self.consume("]"):
            return attrs
        while True:
            self.skip_ws()
            start = self.pos
            key = self.match_re(IDENTIFIER_RE)
            if key is None:
                raise self.error("syntax error", expected="an attribute name")
            name = normalize_attribute_name(key)
            if name not in ATTRIBUTE_NAMES:
                raise self.error(f"unknown attribute '{key}'", pos=start)
            self.expect("=")
            attrs[name] = self.parse_value()
            self.skip_ws()
            if self.consume("]"):
                return attrs
            if not self.consume(","):
                raise self.error("syntax error", expected="',' or ']'")

    # ── Entities ──────────────────────────────────────────────────────────────

    def at_entity(self) -> bool:
        """True when the next statement declares entities rather than arcs."""
        if self.eof() or self.peek("}") or self.peek(BROADCAST):
            return False
        if any(self.peek(token) for token, _ in EMPTY_ARCS):
            return False
        saved = self.pos
        try:
            self.parse_name("an entity name")
        except MscSyntaxError:
            # parse_entity_list reports it
            self.pos = saved
            return True
        self.skip_ws()
        is_entity = self.eof() or self.src[self.pos] in ",;["
        self.pos = saved
        return is_entity

    def parse_entity_list(self, comments: list[str]) -> list[Entity]:
        entities: list[Entity] = []
        while True:
            name = self.parse_name("an entity name")
            entities.append(Entity(name=name, attrs=self.try_parse_attributes(), comments=comments))
            self.skip_ws()
            if self.consume(";"):
                return entities
            if not self.consume(","):
                raise self.error("syntax error", expected="',' or ';'")
            comments = self.collect_comments()

    # ── Arcs ──────────────────────────────────────────────────────────────────

    def parse_arc(self, depth: int, comments: list[str]) -> Arc:
        self.skip_ws()
        for token, empty_kind in EMPTY_ARCS:
            if self.consume(token):
                return EmptyArc(kind=empty_kind, attrs=self.try_parse_attributes(), comments=comments)

        from_pos = self.pos
        from_id = self.parse_endpoint()
        self.skip_ws()

        for token, arc_kind in ARC_OPERATORS:
            if self.consume(token):
                to_id = self.parse_endpoint()
                return Message(from_id, to_id, arc_kind, self.try_parse_attributes(), comments)

        kind = self.keyword(BOX_KEYWORDS) or self.keyword(INLINE_KEYWORDS)
        if kind is None:
            raise self.error("syntax error", expected="an arc operator, box or inline expression")
        if from_id == BROADCAST:
            raise self.error(f"'{BROADCAST}' is only allowed on messages", pos=from_pos)
        to_id = self.parse_name("an entity name")
        attrs = self.try_parse_attributes()
        if isinstance(kind, BoxKind):
            return Box(from_id, to_id, kind, attrs, comments)

        if depth + 1 > self.config.max_depth:
            raise self.error(f"inline expressions nested deeper than {self.config.max_depth} levels")
        self.expect("{")
        arcs = self.parse_rows(depth + 1)
        self.expect("}")
        return InlineExpression(from_id, to_id, kind, arcs, attrs, comments)

    def parse_row(self, depth: int, comments: list[str]) -> list[Arc]:
        row: list[Arc] = [self.parse_arc(depth, comments)]
        while True:
            self.skip_ws()
            if self.consume(";"):
                return row
            if self.consume(","):
                row.append(self.parse_arc(depth, self.collect_comments()))
                continue
            # the ';' after an inline expression's closing brace is optional
            if isinstance(row[-1], InlineExpression):
                return row
            raise self.error("syntax error", expected="',' or ';'")

    def parse_rows(self, depth: int, comments: list[str] | None = None) -> list[list[Arc]]:
        rows: list[list[Arc]] = []
        if comments is None:
            comments = self.collect_comments()
        while not (self.eof() or self.peek("}")):
            rows.append(self.parse_row(depth, comments))
            comments = self.collect_comments()
        return rows

    # ── Top-level parse ───────────────────────────────────────────────────────

    def parse_chart(self) -> Chart:
        chart = Chart.new()
        chart.comments = self.collect_comments()
        if self.keyword({"msc": True}) is None:
            raise self.error("syntax error", expected="'msc'")
        self.expect("{")

        comments = self.collect_comments()
        if self.at_option():
            chart.options = self.parse_option_list()
            comments = self.collect_comments()
        if self.at_entity():
            chart.entities = self.parse_entity_list(comments)
            comments = self.collect_comments()
        chart.arcs = self.parse_rows(0, comments)
        self.expect("}")

        self.skip_ws()
        if not self.eof():
            raise self.error("syntax error", expected="end of input")
        return chart


class MscgenParser:
    """Parser for mscgen charts and their xù inline expressions."""

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()

    def parse(self, src: str) -> Chart:
        cursor = _Cursor(src=src, config=self.config)
        chart = cursor.parse_chart()
        log.debug(
            "parsed chart: %d option(s), %d entit(y/ies), %d arc row(s)",
            len(chart.options.items()),
            len(chart.entities),
            len(chart.arcs),
        )
        return chart
