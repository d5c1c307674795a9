"""Unit tests for the document tree compiler."""

from dataclasses import dataclass

import pytest

from vitae.contexts.rendering.compiler import missing_renderers, render
from vitae.contexts.rendering.exceptions import RenderError, UnsupportedNodeError
from vitae.contexts.templating.document_nodes import (
    Direction,
    DocumentNode,
    FadeIn,
    HorizontalAlignment,
    PercentBar,
    SectionTitle,
    Title,
    VerticalAlignment,
    aligned,
    bg,
    bold,
    col,
    container,
    fg,
    html,
    italics,
    link,
    ol,
    rect,
    row,
    section,
    text,
    ul,
)
from vitae.contexts.theming.colors import ColorToken
from vitae.contexts.theming.theme_provider import ThemeProvider
from vitae.utils.escaping import EscapePolicy

DOCUMENT_HEAD = (
    '<!DOCTYPE html5><html><head><meta content="text/html;charset=utf-8" http-equiv="Content-Type">'
    '<meta content="utf-8" http-equiv="encoding">'
    '<link rel="stylesheet" href="https://stackpath.bootstrapcdn.com/bootstrap/4.3.1/css/bootstrap.min.css" '
    'integrity="sha384-ggOyR0iXCbMQv3Xipma34MD+dH/1fQ784/j6cY/iJTQUOhcWr7x9JvoRxT2MZw1T" crossorigin="anonymous">'
    '<script src="https://code.jquery.com/jquery-3.3.1.slim.min.js" '
    'integrity="sha384-q8i/X+965DzO0rT7abK41JStQIAqVgRVzpbzo5smXKp4YfRvH+8abtTE1Pi6jizo" crossorigin="anonymous"></script>'
    '<script src="https://cdnjs.cloudflare.com/ajax/libs/popper.js/1.14.7/umd/popper.min.js" '
    'integrity="sha384-UO2eT0CpHqdSJQ6hJty5KVphtPhzWj9WO1clHTMGa3JDZwrnQq4sF86dIHNDz0W1" crossorigin="anonymous"></script>'
    '<script src="https://stackpath.bootstrapcdn.com/bootstrap/4.3.1/js/bootstrap.min.js" '
    'integrity="sha384-JjSmVgyd0p3pXB1rRibZUAYoIIy6OrQ6VrjIEaFf/nJGzIxFDsf4x0xIM+B07jRM" crossorigin="anonymous"></script>'
    "<style>"
)
BREAKS = "<br>" * 6


class BoxedTheme(ThemeProvider):
    """Theme with its own section chrome."""

    def color_rgb(self, token):
        return (0, 0, 0)

    def render_section(self, content):
        return f'<section class="boxed">{content}</section>'


@pytest.mark.unit
def test_document_boilerplate_is_exact(mono_theme):
    """Test that the page wrapper reproduces the boilerplate byte for byte."""
    output = render(html([text("hi"), text("there")]), mono_theme)

    expected = (
        DOCUMENT_HEAD
        + "/* mono */\nbody, div { color: #000000; background-color: #ffffff; }</style></head><body>"
        + BREAKS
        + "<p>hi</p>\n<p>there</p>"
        + BREAKS
        + "</body></html>"
    )
    assert output == expected


@pytest.mark.unit
def test_container(mono_theme):
    """Test that containers join children with newlines inside one div."""
    assert render(container(["a", "b"]), mono_theme) == '<div class="container"><p>a</p>\n<p>b</p></div>'


@pytest.mark.unit
@pytest.mark.parametrize(
    "horizontal, vertical, rules",
    [
        (HorizontalAlignment.CENTER, VerticalAlignment.INHERIT, "justify-content: center;"),
        (HorizontalAlignment.LEFT, VerticalAlignment.TOP, "justify-content: left;align-items: flex-start;"),
        (HorizontalAlignment.RIGHT, VerticalAlignment.BOTTOM, "justify-content: right;align-items: flex-end;"),
        (HorizontalAlignment.INHERIT, VerticalAlignment.CENTER, "align-items: center;"),
        (HorizontalAlignment.INHERIT, VerticalAlignment.INHERIT, ""),
    ],
)
def test_aligned_rules(mono_theme, horizontal, vertical, rules):
    """Test that alignment values map directly onto flexbox rules."""
    output = render(aligned(Title("A"), horizontal, vertical), mono_theme)
    assert output == (
        f'<div style="height:100%; width:100%; display: flex; flex-grow: 1; {rules}"><h1>A</h1></div>'
    )


@pytest.mark.unit
@pytest.mark.parametrize("count", [0, 1, 3])
def test_row_wraps_each_child_in_a_column_cell(mono_theme, count):
    """Test that a row with N children has N column cells in order."""
    items = [f"item{i}" for i in range(count)]
    output = render(row(items), mono_theme)

    assert output.startswith('<div class="row no-gutters">')
    assert output.count('<div class="col no-gutters">') == count
    cells = [f'<div class="col no-gutters"><p>item{i}</p></div>' for i in range(count)]
    assert output == '<div class="row no-gutters">' + "\n".join(cells) + "</div>"


@pytest.mark.unit
def test_column_wraps_each_child_in_a_row_cell(mono_theme):
    """Test that a column is the mirror image of a row."""
    output = render(col(["a", "b"]), mono_theme)
    assert output == (
        '<div class="col no-gutters"><div class="row no-gutters"><p>a</p></div>\n'
        '<div class="row no-gutters"><p>b</p></div></div>'
    )


@pytest.mark.unit
def test_lists_keep_item_order(mono_theme):
    """Test ordered and unordered lists render one <li> per item in order."""
    assert render(ol(["a", "b", "c"]), mono_theme) == (
        '<ol style="width:100%"><li><p>a</p></li>\n<li><p>b</p></li>\n<li><p>c</p></li></ol>'
    )
    output = render(ul(["first", "second"]), mono_theme)
    assert output.count("<li>") == 2
    assert output.index("first") < output.index("second")


@pytest.mark.unit
def test_percent_bar(mono_theme):
    """Test that the bar width and aria value use the percent verbatim."""
    assert render(PercentBar(75, "Strong"), mono_theme) == (
        '<div class="progress"><div class="progress-bar" role="progressbar" style="width:75%"  '
        'aria-valuenow="75" aria-valuemin="0" aria-valuemax="100">Strong</div></div>'
    )


@pytest.mark.unit
def test_rectangle(mono_theme):
    """Test that rectangles use the radius and the theme's color."""
    assert render(rect("x", 10, ColorToken.RED), mono_theme) == (
        '<div style="height:100%; border-radius: 10%; background-color:#ff0000"><p>x</p></div>'
    )


@pytest.mark.unit
def test_headings(mono_theme):
    """Test title and section title heading levels."""
    assert render(Title("Name"), mono_theme) == "<h1>Name</h1>"
    assert render(SectionTitle("Skills"), mono_theme) == "<h4>Skills</h4>"


@pytest.mark.unit
def test_inline_wrappers(mono_theme):
    """Test italics, bold and link wrappers."""
    assert render(italics(bold("x")), mono_theme) == "<i><b><p>x</p></b></i>"
    assert render(link("home", "https://example.com/?a=1&b=2"), mono_theme) == (
        '<a href="https://example.com/?a=1&b=2"><p>home</p></a>'
    )


@pytest.mark.unit
def test_colored_wrappers(mono_theme):
    """Test foreground and background tints resolve through the theme."""
    assert render(fg("x", ColorToken.DEFAULT_TITLE), mono_theme) == (
        '<div style="color: #7f00ff;"><p>x</p></div>'
    )
    assert render(bg("x", ColorToken.RED), mono_theme) == (
        '<div style="background-color: #ff0000;"><p>x</p></div>'
    )


@pytest.mark.unit
def test_section_uses_default_chrome(mono_theme):
    """Test that sections fall back to the default card markup."""
    assert render(section("x"), mono_theme) == (
        '<div class="card" style="height:100%"><div class="card-body" style="height:100%">'
        "<p>x</p></div></div>"
    )


@pytest.mark.unit
def test_section_delegates_to_theme():
    """Test that a theme overriding render_section controls section markup."""
    assert render(section("x"), BoxedTheme()) == '<section class="boxed"><p>x</p></section>'


@pytest.mark.unit
def test_text_is_verbatim_by_default(mono_theme):
    """Test that markup inside text is passed through unchanged."""
    assert render(text("<b>bold</b> & more"), mono_theme) == "<p><b>bold</b> & more</p>"


@pytest.mark.unit
def test_escape_policy_escapes_text_payloads(mono_theme):
    """Test that ESCAPE escapes text, headings, bar labels and URLs."""
    policy = EscapePolicy.ESCAPE

    assert render(text("<b>x</b>"), mono_theme, policy) == "<p>&lt;b&gt;x&lt;/b&gt;</p>"
    assert render(Title("A & B"), mono_theme, policy) == "<h1>A &amp; B</h1>"
    assert "&lt;i&gt;" in render(PercentBar(10, "<i>"), mono_theme, policy)
    assert render(link("x", 'https://e.com/"onclick'), mono_theme, policy) == (
        '<a href="https://e.com/&#34;onclick"><p>x</p></a>'
    )


@pytest.mark.unit
def test_render_is_deterministic(mono_theme):
    """Test that equal trees render to identical strings."""
    def build():
        return html([container([row([section(col(["a", PercentBar(50, "Some")])), ul(["b"])])])])

    assert render(build(), mono_theme) == render(build(), mono_theme)


@pytest.mark.unit
@pytest.mark.parametrize(
    "tree",
    [
        FadeIn(Direction.LEFT),
        html([FadeIn(Direction.UP)]),
        row(["a", FadeIn(Direction.RIGHT)]),
        section(col([ul([italics(FadeIn(Direction.DOWN))])])),
        html([container([rect(fg(FadeIn(Direction.LEFT), ColorToken.RED), 5, ColorToken.BLUE)])]),
    ],
)
def test_fade_in_is_fatal_anywhere(mono_theme, tree):
    """Test that a FadeIn node anywhere in the tree aborts rendering."""
    with pytest.raises(UnsupportedNodeError, match="FadeIn"):
        render(tree, mono_theme)


@pytest.mark.unit
def test_unsupported_node_error_is_a_render_error():
    """Test the exception hierarchy callers can rely on."""
    assert issubclass(UnsupportedNodeError, RenderError)
    assert issubclass(UnsupportedNodeError, NotImplementedError)


@pytest.mark.unit
def test_every_node_kind_has_a_renderer():
    """Test that the renderer table covers the closed set of node kinds."""
    assert missing_renderers() == []


@pytest.mark.unit
def test_unregistered_node_kind_is_reported(mono_theme):
    """Test that a node kind outside the renderer table is detected and refused."""

    @dataclass(frozen=True)
    class Marquee(DocumentNode):
        text: str

    assert missing_renderers([Marquee]) == ["Marquee"]
    with pytest.raises(UnsupportedNodeError, match="Marquee"):
        render(Marquee("scrolling"), mono_theme)


@pytest.mark.unit
def test_non_node_is_refused(mono_theme):
    """Test that rendering something that is not a node fails loudly."""
    with pytest.raises(UnsupportedNodeError):
        render("just a string", mono_theme)
