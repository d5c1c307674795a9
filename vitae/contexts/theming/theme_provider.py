"""
Theme Capability Interface

A theme resolves abstract ColorTokens to RGB and supplies the document-level
presentation (global CSS, section "card" chrome). The compiler never hardcodes
color values; it only asks the theme.

Concrete themes implement color_rgb() and override the other hooks only where
they differ from the defaults.
"""

from abc import ABC, abstractmethod
from typing import Tuple, final

from vitae.contexts.theming.colors import ColorToken
from vitae.contexts.theming.exceptions import ThemeError

RGB = Tuple[int, int, int]

DEFAULT_DOCUMENT_CSS = (
    "@import url('https://fonts.googleapis.com/css2?family=Roboto:wght@400;700&display=swap');\n"
    "body { font-family: 'Roboto', sans-serif; }"
)

SECTION_MARKUP = (
    '<div class="card" style="height:100%">'
    '<div class="card-body" style="height:100%">{content}</div>'
    "</div>"
)


class ThemeProvider(ABC):
    """Base class for themes. Subclasses must map every ColorToken in color_rgb()."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def color_rgb(self, token: ColorToken) -> RGB:
        """
        Resolve a color token to an (r, g, b) triple with channels in 0..255.

        There is deliberately no fallback: every theme decides every token.
        """

    @final
    def color_hex(self, token: ColorToken) -> str:
        """
        Format color_rgb(token) as a 7-character lowercase '#rrggbb' string.

        Raises:
            ThemeError: If the theme returns a malformed triple
        """
        rgb = self.color_rgb(token)
        validate_rgb(rgb, token, theme_name=self.name)
        r, g, b = rgb
        return f"#{r:02x}{g:02x}{b:02x}"

    def document_css(self) -> str:
        """Stylesheet text inlined into the document <style> block."""
        return DEFAULT_DOCUMENT_CSS

    def render_section(self, content: str) -> str:
        """Wrap already-rendered markup in the theme's card presentation."""
        return SECTION_MARKUP.format(content=content)


def validate_rgb(rgb, token=None, theme_name: str = None) -> RGB:
    """
    Check that rgb is a 3-tuple of ints in 0..255.

    Args:
        rgb: Candidate color triple
        token: Token being resolved (for the error message)
        theme_name: Theme being checked (for the error message)

    Returns:
        The triple as a tuple

    Raises:
        ThemeError: If the triple is malformed
    """
    label = f" for {token.value}" if isinstance(token, ColorToken) else ""

    if not isinstance(rgb, (tuple, list)) or len(rgb) != 3:
        raise ThemeError(f"Expected an (r, g, b) triple{label}, got {rgb!r}", theme_name)

    for channel in rgb:
        # bool is an int subclass but never a valid channel
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise ThemeError(f"Color channel out of range{label}: {rgb!r}", theme_name)

    return tuple(rgb)
