"""
Table-driven Themes

A PaletteTheme is a ThemeProvider whose colors come from a plain mapping, so
sample themes can live in YAML instead of code.
"""

from typing import Any, Dict, Mapping, Optional

from vitae.contexts.theming.colors import ColorToken
from vitae.contexts.theming.exceptions import ThemeError
from vitae.contexts.theming.theme_provider import RGB, ThemeProvider, validate_rgb


class PaletteTheme(ThemeProvider):
    """
    Theme backed by a ColorToken -> RGB table.

    The table must be total: construction fails if any token is missing.

    Attributes:
        palette: Complete token to RGB mapping
    """

    def __init__(
        self,
        name: str,
        palette: Mapping[ColorToken, RGB],
        document_css: Optional[str] = None,
    ):
        self._name = name
        self._document_css = document_css

        resolved: Dict[ColorToken, RGB] = {}
        for token, rgb in palette.items():
            token = ColorToken.parse(token)
            resolved[token] = validate_rgb(rgb, token, theme_name=name)

        missing = [token.value for token in ColorToken if token not in resolved]
        if missing:
            raise ThemeError(f"Palette does not define colors: {missing}", name)

        self.palette = resolved

    @property
    def name(self) -> str:
        return self._name

    def color_rgb(self, token: ColorToken) -> RGB:
        return self.palette[ColorToken.parse(token)]

    def document_css(self) -> str:
        if self._document_css is None:
            return super().document_css()
        return self._document_css

    @classmethod
    def from_config(cls, name: str, config: Mapping[str, Any]) -> "PaletteTheme":
        """
        Build a theme from a YAML-shaped dict.

        Args:
            name: Theme name
            config: Dict with a "palette" mapping of token name to [r, g, b]
                    and an optional "document_css" string

        Returns:
            PaletteTheme

        Raises:
            ThemeError: If the config has no palette or the palette is invalid

        Example:
            >>> PaletteTheme.from_config("mono", {"palette": {"red": [255, 0, 0], ...}})
        """
        if "palette" not in config or config["palette"] is None:
            raise ThemeError("Theme config must contain a 'palette' mapping", name)

        return cls(name, config["palette"], document_css=config.get("document_css"))

    def __repr__(self) -> str:
        return f"PaletteTheme(name={self._name!r})"
