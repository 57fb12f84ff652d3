"""Shared type definitions for msc-text.

Enums for the closed sets of the MSC grammar, used across the parser,
the AST and the renderers. Enum values are the tokens as written in source.
"""

from __future__ import annotations

from enum import Enum


class Dialect(Enum):
    Xu = "xu"
    Mscgen = "mscgen"

    @classmethod
    def default(cls) -> Dialect:
        return cls.Xu


class ArcKind(Enum):
    # directional
    Signal = "->"
    SignalBack = "<-"
    Method = "=>"
    MethodBack = "<="
    Return = ">>"
    ReturnBack = "<<"
    Callback = "=>>"
    CallbackBack = "<<="
    Emphasised = ":>"
    EmphasisedBack = "<:"
    Lost = "-x"
    LostBack = "x-"
    # bidirectional
    SignalBidir = "<->"
    MethodBidir = "<=>"
    ReturnBidir = "<<>>"
    CallbackBidir = "<<=>>"
    EmphasisedBidir = "<:>"
    # undirected
    Line = "--"
    DoubleLine = "=="
    Dotted = ".."
    DoubleColon = "::"


class BoxKind(Enum):
    Note = "note"
    Box = "box"
    RBox = "rbox"
    ABox = "abox"


class EmptyKind(Enum):
    Omitted = "..."
    Comment = "---"
    Spacer = "|||"


class InlineKind(Enum):
    Alt = "alt"
    Else = "else"
    Opt = "opt"
    Break = "break"
    Par = "par"
    Seq = "seq"
    Strict = "strict"
    Neg = "neg"
    Critical = "critical"
    Ignore = "ignore"
    Consider = "consider"
    Assert = "assert"
    Loop = "loop"
    Ref = "ref"
    Exc = "exc"
