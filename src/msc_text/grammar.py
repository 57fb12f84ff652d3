"""Lexical tables for the mscgen grammar and its xù superset.

The grammar, informally:

    program     = comment* "msc" "{" optionlist? entitylist? arcline* "}"
    optionlist  = option ("," option)* ";"
    option      = name "=" value
    entitylist  = entity ("," entity)* ";"
    entity      = name attributes?
    arcline     = arc ("," arc)* ";"
    arc         = emptyarc attributes?
                | name arcop name attributes?
                | name boxkind name attributes?
                | name inlinekind name attributes? "{" arcline* "}"
    attributes  = "[" attribute ("," attribute)* "]"
    attribute   = name "=" value

Keywords are case-insensitive. mscgen and xù are parsed as one grammar, so
the xù inline keywords (loop, ref, seq, exc, ...) are reserved in plain
mscgen input too: ``msc{loop;}`` is an error, ``msc{"loop";}`` is not.
Quoted names must not be empty.

Both the parser and the text renderer read these tables, so what one
accepts the other can write.
"""

from __future__ import annotations

import re

from msc_text.types import ArcKind, BoxKind, EmptyKind, InlineKind

# Arc operators, longest first so that "<<=>>" wins over "<<=" and "<<".
ARC_OPERATORS: list[tuple[str, ArcKind]] = sorted(
    ((k.value, k) for k in ArcKind),
    key=lambda pair: len(pair[0]),
    reverse=True,
)

EMPTY_ARCS: list[tuple[str, EmptyKind]] = [(k.value, k) for k in EmptyKind]

BOX_KEYWORDS: dict[str, BoxKind] = {k.value: k for k in BoxKind}
INLINE_KEYWORDS: dict[str, InlineKind] = {k.value: k for k in InlineKind}

# Option keys and the kind of value each takes.
NUMERIC_OPTIONS = ("hscale", "width", "arcgradient")
BOOLEAN_OPTIONS = ("wordwraparcs", "wordwrapentities", "wordwrapboxes")
STRING_OPTIONS = ("watermark",)
OPTION_NAMES = NUMERIC_OPTIONS + BOOLEAN_OPTIONS + STRING_OPTIONS

TRUE_VALUES = frozenset({"true", "on", "1"})
FALSE_VALUES = frozenset({"false", "off", "0"})

# Canonical attribute order; the renderer writes attributes in this order.
ATTRIBUTE_NAMES = (
    "label",
    "idurl",
    "id",
    "url",
    "linecolor",
    "textcolor",
    "textbgcolor",
    "arclinecolor",
    "arctextcolor",
    "arctextbgcolor",
    "arcskip",
    "title",
)

# Words that cannot appear unquoted where a name is expected.
RESERVED_WORDS = frozenset({"msc"}) | frozenset(BOX_KEYWORDS) | frozenset(INLINE_KEYWORDS)

# Words the renderer always quotes when used as a name.
QUOTED_WORDS = (
    RESERVED_WORDS
    | frozenset(OPTION_NAMES)
    | frozenset(ATTRIBUTE_NAMES)
    | frozenset(n.replace("color", "colour") for n in ATTRIBUTE_NAMES if "color" in n)
    | frozenset({"color", "colour"})
    | TRUE_VALUES
    | FALSE_VALUES
)

BROADCAST = "*"

IDENTIFIER_RE = re.compile(r"\w+")
NUMBER_RE = re.compile(r"\d*\.\d+|\d+")
BARE_VALUE_RE = re.compile(r"\d*\.\d+(?!\w)|\w+")
BARE_NAME_RE = re.compile(r"\w+")


def normalize_attribute_name(name: str) -> str:
    """Lower-case an attribute name and fold British spellings onto ``color``."""
    return name.lower().replace("colour", "color")


def is_number(text: str) -> bool:
    return NUMBER_RE.fullmatch(text) is not None
