"""AST data structures for MSC (mscgen / xù) charts.

These types represent the parsed form of the input text: a Chart holding
options, entities and rows of arcs. Arcs are a tagged union of Message,
Box, EmptyArc and InlineExpression; inline expressions own nested rows.

Every node converts to and from a plain nested structure (``to_dict`` /
``from_dict``) suitable for JSON fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from msc_text.grammar import OPTION_NAMES
from msc_text.types import ArcKind, BoxKind, EmptyKind, InlineKind


@dataclass
class Options:
    hscale: str | None = None
    width: str | None = None
    arcgradient: str | None = None
    wordwraparcs: bool | None = None
    wordwrapentities: bool | None = None
    wordwrapboxes: bool | None = None
    watermark: str | None = None
    extra: dict[str, str] = field(default_factory=dict)

    def items(self) -> list[tuple[str, str | bool]]:
        """Known options that are set, in canonical order."""
        result: list[tuple[str, str | bool]] = []
        for name in OPTION_NAMES:
            value = getattr(self, name)
            if value is not None:
                result.append((name, value))
        return result

    def is_empty(self) -> bool:
        return not self.items() and not self.extra

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.items())
        result.update(self.extra)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Options:
        opts = cls()
        for key, value in data.items():
            name = key.lower()
            if name in OPTION_NAMES:
                setattr(opts, name, value)
            else:
                opts.extra[name] = value
        return opts


@dataclass
class Entity:
    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.attrs:
            result["attrs"] = dict(self.attrs)
        if self.comments:
            result["comments"] = list(self.comments)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entity:
        return cls(
            name=data["name"],
            attrs=dict(data.get("attrs", {})),
            comments=list(data.get("comments", [])),
        )


@dataclass
class Message:
    from_id: str
    to_id: str
    kind: ArcKind
    attrs: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)

    @property
    def is_broadcast(self) -> bool:
        return "*" in (self.from_id, self.to_id)


@dataclass
class Box:
    from_id: str
    to_id: str
    kind: BoxKind
    attrs: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)


@dataclass
class EmptyArc:
    kind: EmptyKind
    attrs: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)


@dataclass
class InlineExpression:
    from_id: str
    to_id: str
    kind: InlineKind
    arcs: list[list[Arc]] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)


Arc = Union[Message, Box, EmptyArc, InlineExpression]

_ARC_TAGS: dict[type, str] = {
    Message: "message",
    Box: "box",
    EmptyArc: "empty",
    InlineExpression: "inline",
}
_KIND_ENUMS: dict[str, type] = {
    "message": ArcKind,
    "box": BoxKind,
    "empty": EmptyKind,
    "inline": InlineKind,
}
_TAG_CLASSES: dict[str, type] = {tag: cls for cls, tag in _ARC_TAGS.items()}


def arc_to_dict(arc: Arc) -> dict[str, Any]:
    """Convert one arc (recursively, for inline expressions) to a plain dict."""
    result: dict[str, Any] = {"type": _ARC_TAGS[type(arc)], "kind": arc.kind.value}
    if not isinstance(arc, EmptyArc):
        result["from"] = arc.from_id
        result["to"] = arc.to_id
    if arc.attrs:
        result["attrs"] = dict(arc.attrs)
    if arc.comments:
        result["comments"] = list(arc.comments)
    if isinstance(arc, InlineExpression):
        result["arcs"] = rows_to_list(arc.arcs)
    return result


def arc_from_dict(data: dict[str, Any]) -> Arc:
    tag = data["type"]
    cls = _TAG_CLASSES.get(tag)
    if cls is None:
        raise ValueError(f"Unknown arc type '{tag}'")
    kwargs: dict[str, Any] = {
        "kind": _KIND_ENUMS[tag](data["kind"]),
        "attrs": dict(data.get("attrs", {})),
        "comments": list(data.get("comments", [])),
    }
    if cls is not EmptyArc:
        kwargs["from_id"] = data["from"]
        kwargs["to_id"] = data["to"]
    if cls is InlineExpression:
        kwargs["arcs"] = rows_from_list(data.get("arcs", []))
    return cls(**kwargs)


def rows_to_list(rows: list[list[Arc]]) -> list[list[dict[str, Any]]]:
    return [[arc_to_dict(arc) for arc in row] for row in rows]


def rows_from_list(data: list[list[dict[str, Any]]]) -> list[list[Arc]]:
    return [[arc_from_dict(item) for item in row] for row in data]


@dataclass
class Chart:
    options: Options = field(default_factory=Options)
    entities: list[Entity] = field(default_factory=list)
    arcs: list[list[Arc]] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @classmethod
    def new(cls) -> Chart:
        return cls()

    def entity_names(self) -> list[str]:
        return [e.name for e in self.entities]

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.comments:
            result["comments"] = list(self.comments)
        if not self.options.is_empty():
            result["options"] = self.options.to_dict()
        result["entities"] = [e.to_dict() for e in self.entities]
        result["arcs"] = rows_to_list(self.arcs)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chart:
        return cls(
            options=Options.from_dict(data.get("options", {})),
            entities=[Entity.from_dict(e) for e in data.get("entities", [])],
            arcs=rows_from_list(data.get("arcs", [])),
            comments=list(data.get("comments", [])),
        )
