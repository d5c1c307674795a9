"""
Document Tree Compiler

Renders a document tree to a single HTML string. Rendering is a depth-first
walk with no state carried between calls: every node kind has one renderer,
and anything presentational (colors, document CSS, section chrome) is asked of
the theme.

The renderer table must cover every node kind in NODE_TYPES; this module
refuses to import otherwise.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Type

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from vitae.contexts.rendering.exceptions import UnsupportedNodeError
from vitae.contexts.rendering.logger import _log_debug
from vitae.contexts.templating.document_nodes import (
    NODE_TYPES,
    Aligned,
    Bold,
    Column,
    ColoredBackground,
    ColoredForeground,
    Container,
    Document,
    DocumentNode,
    FadeIn,
    HorizontalAlignment,
    Italics,
    Link,
    OrderedList,
    PercentBar,
    Rectangle,
    Row,
    Section,
    SectionTitle,
    Text,
    Title,
    UnorderedList,
    VerticalAlignment,
)
from vitae.contexts.theming.colors import ColorToken
from vitae.contexts.theming.theme_provider import ThemeProvider
from vitae.utils.escaping import EscapePolicy, escape_text

TEMPLATES_PATH = Path(__file__).parent / "templates"
DOCUMENT_TEMPLATE = "document.html.jinja"

# Same delimiters as the templating registry; CSS braces stay literal
_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    undefined=StrictUndefined,
    variable_start_string="<<<",
    variable_end_string=">>>",
    block_start_string="<%%",
    block_end_string="%%>",
    comment_start_string="<#",
    comment_end_string="#>",
    autoescape=False,
    keep_trailing_newline=False,
)

HORIZONTAL_RULES = {
    HorizontalAlignment.LEFT: "justify-content: left;",
    HorizontalAlignment.RIGHT: "justify-content: right;",
    HorizontalAlignment.CENTER: "justify-content: center;",
    HorizontalAlignment.INHERIT: "",
}

VERTICAL_RULES = {
    VerticalAlignment.TOP: "align-items: flex-start;",
    VerticalAlignment.CENTER: "align-items: center;",
    VerticalAlignment.BOTTOM: "align-items: flex-end;",
    VerticalAlignment.INHERIT: "",
}

Renderer = Callable[[DocumentNode, ThemeProvider, EscapePolicy], str]


def render(
    node: DocumentNode,
    theme: ThemeProvider,
    escape_policy: EscapePolicy = EscapePolicy.VERBATIM,
) -> str:
    """
    Render a document tree to HTML.

    Args:
        node: Root of the tree (usually a Document)
        theme: Theme resolving colors, document CSS and section chrome
        escape_policy: VERBATIM embeds text payloads as-is; ESCAPE HTML-escapes them

    Returns:
        HTML string. Equal trees rendered with the same theme give identical output.

    Raises:
        UnsupportedNodeError: If the tree contains a FadeIn node or a non-node object
    """
    renderer = _RENDERERS.get(type(node))
    if renderer is None:
        raise UnsupportedNodeError("No rendering rule for this object", type(node).__name__)
    return renderer(node, theme, escape_policy)


def _render_all(nodes: Iterable[DocumentNode], theme: ThemeProvider, policy: EscapePolicy) -> List[str]:
    return [render(node, theme, policy) for node in nodes]


def _wrap_each(nodes, theme, policy, template: str) -> str:
    return "\n".join(template.format(rendered) for rendered in _render_all(nodes, theme, policy))


# Layout


def _render_document(node: Document, theme: ThemeProvider, policy: EscapePolicy) -> str:
    _log_debug(f"Rendering document with theme '{theme.name}' ({len(node.children)} top-level nodes)")
    template = _env.get_template(DOCUMENT_TEMPLATE)
    return template.render(
        document_css=theme.document_css(),
        foreground=theme.color_hex(ColorToken.DEFAULT_FOREGROUND),
        background=theme.color_hex(ColorToken.DEFAULT_BACKGROUND),
        content="\n".join(_render_all(node.children, theme, policy)),
    )


def _render_container(node: Container, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return '<div class="container">{}</div>'.format("\n".join(_render_all(node.children, theme, policy)))


def _render_aligned(node: Aligned, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return '<div style="height:100%; width:100%; display: flex; flex-grow: 1; {}{}">{}</div>'.format(
        HORIZONTAL_RULES[node.horizontal],
        VERTICAL_RULES[node.vertical],
        render(node.child, theme, policy),
    )


def _render_row(node: Row, theme: ThemeProvider, policy: EscapePolicy) -> str:
    cells = _wrap_each(node.children, theme, policy, '<div class="col no-gutters">{}</div>')
    return f'<div class="row no-gutters">{cells}</div>'


def _render_column(node: Column, theme: ThemeProvider, policy: EscapePolicy) -> str:
    cells = _wrap_each(node.children, theme, policy, '<div class="row no-gutters">{}</div>')
    return f'<div class="col no-gutters">{cells}</div>'


# Text


def _render_text(node: Text, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f"<p>{escape_text(node.text, policy)}</p>"


def _render_title(node: Title, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f"<h1>{escape_text(node.text, policy)}</h1>"


def _render_section_title(node: SectionTitle, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f"<h4>{escape_text(node.text, policy)}</h4>"


# Lists


def _render_ordered_list(node: OrderedList, theme: ThemeProvider, policy: EscapePolicy) -> str:
    items = _wrap_each(node.items, theme, policy, "<li>{}</li>")
    return f'<ol style="width:100%">{items}</ol>'


def _render_unordered_list(node: UnorderedList, theme: ThemeProvider, policy: EscapePolicy) -> str:
    items = _wrap_each(node.items, theme, policy, "<li>{}</li>")
    return f'<ul style="width:100%">{items}</ul>'


# Decoration


def _render_percent_bar(node: PercentBar, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return (
        '<div class="progress"><div class="progress-bar" role="progressbar" '
        'style="width:{part}%"  aria-valuenow="{part}" aria-valuemin="0" aria-valuemax="100">'
        "{label}</div></div>"
    ).format(part=node.percent, label=escape_text(node.label, policy))


def _render_rectangle(node: Rectangle, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return '<div style="height:100%; border-radius: {}%; background-color:{}">{}</div>'.format(
        node.border_radius,
        theme.color_hex(node.color),
        render(node.child, theme, policy),
    )


def _render_section(node: Section, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return theme.render_section(render(node.child, theme, policy))


def _render_italics(node: Italics, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f"<i>{render(node.child, theme, policy)}</i>"


def _render_bold(node: Bold, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f"<b>{render(node.child, theme, policy)}</b>"


def _render_link(node: Link, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f'<a href="{escape_text(node.url, policy)}">{render(node.child, theme, policy)}</a>'


def _render_colored_foreground(node: ColoredForeground, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f'<div style="color: {theme.color_hex(node.color)};">{render(node.child, theme, policy)}</div>'


def _render_colored_background(node: ColoredBackground, theme: ThemeProvider, policy: EscapePolicy) -> str:
    return f'<div style="background-color: {theme.color_hex(node.color)};">{render(node.child, theme, policy)}</div>'


def _render_fade_in(node: FadeIn, theme: ThemeProvider, policy: EscapePolicy) -> str:
    raise UnsupportedNodeError(
        f"Fade-in transitions ({node.direction.value}) have no rendering rule", "FadeIn"
    )


_RENDERERS: Dict[Type[DocumentNode], Renderer] = {
    Document: _render_document,
    Container: _render_container,
    Aligned: _render_aligned,
    Row: _render_row,
    Column: _render_column,
    Text: _render_text,
    Title: _render_title,
    SectionTitle: _render_section_title,
    OrderedList: _render_ordered_list,
    UnorderedList: _render_unordered_list,
    PercentBar: _render_percent_bar,
    Rectangle: _render_rectangle,
    Section: _render_section,
    Italics: _render_italics,
    Bold: _render_bold,
    Link: _render_link,
    ColoredForeground: _render_colored_foreground,
    ColoredBackground: _render_colored_background,
    FadeIn: _render_fade_in,
}


def missing_renderers(node_types: Iterable[Type[DocumentNode]] = NODE_TYPES) -> List[str]:
    """Names of node kinds that have no entry in the renderer table."""
    return [node_type.__name__ for node_type in node_types if node_type not in _RENDERERS]


_missing = missing_renderers()
if _missing:
    raise RuntimeError(f"Document node kinds without a renderer: {_missing}")
