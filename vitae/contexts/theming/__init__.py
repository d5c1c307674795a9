"""
Theming Context

Responsibilities:
- Defines the abstract color vocabulary used by the document tree
- Defines the theme capability interface (colors, document CSS, section chrome)
- Loads table-driven sample themes from YAML

Owns: Color resolution, document-level presentation
Never: Decides document structure or content
"""

from vitae.contexts.theming.colors import ColorToken
from vitae.contexts.theming.exceptions import ThemeError, ThemeNotFoundError
from vitae.contexts.theming.palette_theme import PaletteTheme
from vitae.contexts.theming.theme_provider import (
    DEFAULT_DOCUMENT_CSS,
    ThemeProvider,
)
from vitae.contexts.theming.theme_registry import available_themes, get_theme

__all__ = [
    # Color vocabulary
    "ColorToken",
    # Theme interface and implementations
    "ThemeProvider",
    "PaletteTheme",
    "DEFAULT_DOCUMENT_CSS",
    # Registry
    "available_themes",
    "get_theme",
    # Errors
    "ThemeError",
    "ThemeNotFoundError",
]
