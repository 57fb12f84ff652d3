"""Chart to MSC source text renderer, pretty-printed or minified."""

from __future__ import annotations

import logging

from msc_text.config import RenderConfig
from msc_text.grammar import BARE_NAME_RE, BROADCAST, QUOTED_WORDS
from msc_text.renderers.dialect import DialectRules
from msc_text.syntax.types import Arc, Box, Chart, EmptyArc, Entity, InlineExpression, Message, Options
from msc_text.syntax.validate import validate
from msc_text.types import Dialect

log = logging.getLogger(__name__)


def quote(text: str) -> str:
    return '"' + text.replace('"', '\\"') + '"'


def render_name(name: str) -> str:
    """Write a name bare when that re-parses to the same name, quoted otherwise."""
    if BARE_NAME_RE.fullmatch(name) and name.lower() not in QUOTED_WORDS:
        return name
    return quote(name)


def _render_endpoint(name: str) -> str:
    return BROADCAST if name == BROADCAST else render_name(name)


class TextRenderer:
    """Renders a Chart back into MSC source text."""

    def __init__(
        self,
        minify: bool = False,
        dialect: Dialect = Dialect.Xu,
        config: RenderConfig | None = None,
    ) -> None:
        self.config = config or RenderConfig(minify=minify, dialect=dialect)
        self.rules = DialectRules.for_dialect(self.config.dialect)
        minify = self.config.minify
        self.sp = "" if minify else " "
        self.eol = "" if minify else "\n"
        self.indent = "" if minify else "  "

    # ── Pieces ────────────────────────────────────────────────────────────────

    def _comments(self, comments: list[str], level: int) -> str:
        out: list[str] = []
        for comment in comments:
            if self.config.minify:
                out.append(comment if comment.startswith("/*") else comment + "\n")
            else:
                out.append(self.indent * level + comment + "\n")
        return "".join(out)

    def _attributes(self, attrs: dict[str, str]) -> str:
        pairs = [f"{name}={quote(attrs[name])}" for name in self.rules.attributes if name in attrs]
        if not pairs:
            return ""
        return self.sp + "[" + ("," + self.sp).join(pairs) + "]"

    def _options(self, options: Options) -> list[str]:
        rendered: list[str] = []
        for name, value in options.items():
            if name not in self.rules.options:
                log.debug("dropping option '%s': not supported by this dialect", name)
                continue
            if name == "width" and value == "auto":
                continue
            if isinstance(value, bool):
                rendered.append(f"{name}={'true' if value else 'false'}")
            else:
                rendered.append(f"{name}={quote(value)}")
        if options.extra:
            log.debug("dropping unsupported option(s): %s", ", ".join(sorted(options.extra)))
        return rendered

    def _entity(self, entity: Entity) -> str:
        return render_name(entity.name) + self._attributes(entity.attrs)

    def _list(self, items: list[str], comments: list[list[str]]) -> str:
        """Indented items joined by ',' and ended by ';'; used for options and entities."""
        out: list[str] = []
        for i, item in enumerate(items):
            terminator = ";" if i == len(items) - 1 else ","
            out.append(self._comments(comments[i], 1) + self.indent + item + terminator + self.eol)
        return "".join(out)

    # ── Arcs ──────────────────────────────────────────────────────────────────

    def _arc(self, arc: Arc, level: int) -> str:
        if isinstance(arc, EmptyArc):
            return arc.kind.value + self._attributes(arc.attrs)
        if isinstance(arc, Message):
            head = f"{_render_endpoint(arc.from_id)} {arc.kind.value} {_render_endpoint(arc.to_id)}"
            return head + self._attributes(arc.attrs)
        if isinstance(arc, Box):
            return f"{render_name(arc.from_id)} {arc.kind.value} {render_name(arc.to_id)}" + self._attributes(
                arc.attrs
            )
        return self._inline(arc, level)

    def _inline(self, arc: InlineExpression, level: int) -> str:
        rules = self.rules
        kind = rules.inline_kind or arc.kind.value
        head = f"{render_name(arc.from_id)} {kind} {render_name(arc.to_id)}" + self._attributes(arc.attrs)
        opener = (self.sp if rules.open_spaced else "") + rules.block_open
        close_level = max(level + rules.close_indent_offset, 0)
        return (
            head
            + opener
            + self.eol
            + self._rows(arc.arcs, level + 1)
            + self.indent * close_level
            + rules.block_close
        )

    def _rows(self, rows: list[list[Arc]], level: int) -> str:
        out: list[str] = []
        for row in rows:
            for i, arc in enumerate(row):
                terminator = ";" if i == len(row) - 1 else ","
                line_end = self.eol
                if isinstance(arc, InlineExpression) and self.rules.close_ends_line:
                    line_end = "\n"
                out.append(
                    self._comments(arc.comments, level)
                    + self.indent * level
                    + self._arc(arc, level)
                    + terminator
                    + line_end
                )
        return "".join(out)

    # ── Top level ─────────────────────────────────────────────────────────────

    def render(self, chart: Chart) -> str:
        validate(chart, self.config.max_depth)
        out: list[str] = [comment + "\n" for comment in chart.comments]
        out.append("msc" + self.sp + "{" + self.eol)

        options = self._options(chart.options)
        if options:
            out.append(self._list(options, [[] for _ in options]) + self.eol)
        if chart.entities:
            out.append(
                self._list([self._entity(e) for e in chart.entities], [e.comments for e in chart.entities])
                + self.eol
            )
        out.append(self._rows(chart.arcs, 1))
        out.append("}")
        return "".join(out)


def render(
    chart: Chart,
    minify: bool = False,
    dialect: Dialect = Dialect.Xu,
    config: RenderConfig | None = None,
) -> str:
    """Render ``chart`` as MSC source text.

    Args:
        chart: The syntax tree to render; it is not modified.
        minify: True for the most compact text, False for pretty-printed text.
        dialect: Target dialect. Dialect.Xu writes everything the parser
            accepts; Dialect.Mscgen drops xù-only options and attributes and
            flattens inline expressions.
        config: Full render configuration. When given it replaces ``minify``
            and ``dialect``; use it to raise ``max_depth`` for charts parsed
            with a larger ``ParseConfig.max_depth``.

    Returns:
        The MSC source text.

    Raises:
        RenderError: If the chart is structurally invalid.
    """
    return TextRenderer(minify=minify, dialect=dialect, config=config).render(chart)
