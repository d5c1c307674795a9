"""
Document Tree

The intermediate representation between a resume and its HTML. Each node kind
maps 1:1 onto a fragment of output markup; the rendering context walks the tree
and asks the theme for anything presentational.

Nodes are frozen dataclasses holding tuples, so a tree is an immutable value:
two trees built from the same data compare equal and hash equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from vitae.contexts.templating.exceptions import InvalidNodeError
from vitae.contexts.theming.colors import ColorToken


class HorizontalAlignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    INHERIT = "inherit"


class VerticalAlignment(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"
    INHERIT = "inherit"


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class DocumentNode:
    """Base class of every node kind."""


def _freeze(node: DocumentNode, field_name: str) -> None:
    # Sequences are stored as tuples regardless of what the caller passed
    object.__setattr__(node, field_name, tuple(getattr(node, field_name)))


def _require_color(node: DocumentNode, color) -> None:
    if not isinstance(color, ColorToken):
        raise InvalidNodeError("Color must be a ColorToken", type(node).__name__, color)


# Layout


@dataclass(frozen=True)
class Document(DocumentNode):
    """Whole page root."""

    children: Tuple[DocumentNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "children")


@dataclass(frozen=True)
class Container(DocumentNode):
    """Fixed-width content wrapper."""

    children: Tuple[DocumentNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "children")


@dataclass(frozen=True)
class Aligned(DocumentNode):
    """Positions a single child within the available space."""

    child: DocumentNode
    horizontal: HorizontalAlignment = HorizontalAlignment.INHERIT
    vertical: VerticalAlignment = VerticalAlignment.INHERIT


@dataclass(frozen=True)
class Row(DocumentNode):
    """Horizontal layout, one flexible column per child."""

    children: Tuple[DocumentNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "children")


@dataclass(frozen=True)
class Column(DocumentNode):
    """Vertical layout, one flexible row per child."""

    children: Tuple[DocumentNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "children")


# Text


@dataclass(frozen=True)
class Text(DocumentNode):
    """Inline paragraph text."""

    text: str


@dataclass(frozen=True)
class Title(DocumentNode):
    """Page-level heading."""

    text: str


@dataclass(frozen=True)
class SectionTitle(DocumentNode):
    """Subsection heading."""

    text: str


# Lists


@dataclass(frozen=True)
class OrderedList(DocumentNode):
    items: Tuple[DocumentNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "items")


@dataclass(frozen=True)
class UnorderedList(DocumentNode):
    items: Tuple[DocumentNode, ...] = ()

    def __post_init__(self):
        _freeze(self, "items")


# Decoration


@dataclass(frozen=True)
class PercentBar(DocumentNode):
    """
    Progress bar filled to `percent` and labelled with `label`.

    Raises:
        InvalidNodeError: If percent is not an integer in [0, 100]
    """

    percent: int
    label: str

    def __post_init__(self):
        if isinstance(self.percent, bool) or not isinstance(self.percent, int):
            raise InvalidNodeError("Percent must be an integer", "PercentBar", self.percent)
        if not 0 <= self.percent <= 100:
            raise InvalidNodeError("Percent must be within [0, 100]", "PercentBar", self.percent)


@dataclass(frozen=True)
class Rectangle(DocumentNode):
    """Colored panel with rounded corners (radius given in percent)."""

    child: DocumentNode
    border_radius: int
    color: ColorToken

    def __post_init__(self):
        if isinstance(self.border_radius, bool) or not isinstance(self.border_radius, int):
            raise InvalidNodeError("Border radius must be an integer", "Rectangle", self.border_radius)
        if self.border_radius < 0:
            raise InvalidNodeError("Border radius must not be negative", "Rectangle", self.border_radius)
        _require_color(self, self.color)


@dataclass(frozen=True)
class Section(DocumentNode):
    """Card-like grouping whose markup is decided by the theme."""

    child: DocumentNode


@dataclass(frozen=True)
class Italics(DocumentNode):
    child: DocumentNode


@dataclass(frozen=True)
class Bold(DocumentNode):
    child: DocumentNode


@dataclass(frozen=True)
class Link(DocumentNode):
    child: DocumentNode
    url: str


@dataclass(frozen=True)
class ColoredForeground(DocumentNode):
    child: DocumentNode
    color: ColorToken

    def __post_init__(self):
        _require_color(self, self.color)


@dataclass(frozen=True)
class ColoredBackground(DocumentNode):
    child: DocumentNode
    color: ColorToken

    def __post_init__(self):
        _require_color(self, self.color)


@dataclass(frozen=True)
class FadeIn(DocumentNode):
    """Directional entrance animation. Declared but has no rendering rule."""

    direction: Direction


# The closed set of node kinds. The compiler checks it has a renderer for each.
NODE_TYPES = (
    Document,
    Container,
    Aligned,
    Row,
    Column,
    Text,
    Title,
    SectionTitle,
    OrderedList,
    UnorderedList,
    PercentBar,
    Rectangle,
    Section,
    Italics,
    Bold,
    Link,
    ColoredForeground,
    ColoredBackground,
    FadeIn,
)


# Builder shortcuts

NodeLike = Union[DocumentNode, str]


def _coerce(item: NodeLike) -> DocumentNode:
    if isinstance(item, DocumentNode):
        return item
    if isinstance(item, str):
        return Text(item)
    raise InvalidNodeError("Expected a DocumentNode or str", value=item)


def _as_text(value) -> str:
    # str() would strip the Markup subclass
    return value if isinstance(value, str) else str(value)


def _coerce_all(items: Iterable[NodeLike]) -> Tuple[DocumentNode, ...]:
    return tuple(_coerce(item) for item in items)


def html(contents: Iterable[NodeLike]) -> Document:
    return Document(_coerce_all(contents))


def container(items: Iterable[NodeLike]) -> Container:
    return Container(_coerce_all(items))


def aligned(
    contents: NodeLike,
    horizontal: HorizontalAlignment = HorizontalAlignment.INHERIT,
    vertical: VerticalAlignment = VerticalAlignment.INHERIT,
) -> Aligned:
    return Aligned(_coerce(contents), horizontal, vertical)


def row(items: Iterable[NodeLike]) -> Row:
    return Row(_coerce_all(items))


def col(items: Iterable[NodeLike]) -> Column:
    return Column(_coerce_all(items))


def ol(items: Iterable[NodeLike]) -> OrderedList:
    return OrderedList(_coerce_all(items))


def ul(items: Iterable[NodeLike]) -> UnorderedList:
    return UnorderedList(_coerce_all(items))


def title(value) -> Title:
    return Title(_as_text(value))


def section_title(value) -> SectionTitle:
    return SectionTitle(_as_text(value))


def text(value) -> Text:
    return Text(_as_text(value))


def rect(contents: NodeLike, border_radius: int, color: ColorToken) -> Rectangle:
    return Rectangle(_coerce(contents), border_radius, color)


def section(contents: NodeLike) -> Section:
    return Section(_coerce(contents))


def italics(contents: NodeLike) -> Italics:
    return Italics(_coerce(contents))


def bold(contents: NodeLike) -> Bold:
    return Bold(_coerce(contents))


def link(contents: NodeLike, url) -> Link:
    return Link(_coerce(contents), _as_text(url))


def fg(contents: NodeLike, color: ColorToken) -> ColoredForeground:
    return ColoredForeground(_coerce(contents), color)


def bg(contents: NodeLike, color: ColorToken) -> ColoredBackground:
    return ColoredBackground(_coerce(contents), color)
