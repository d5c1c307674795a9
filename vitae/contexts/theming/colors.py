"""
Abstract Color Names

Colors are referenced by name throughout the document tree so that the theme,
not the content, decides the actual RGB values.
"""

from enum import Enum

from vitae.contexts.theming.exceptions import ThemeError


class ColorToken(str, Enum):
    """
    Theme-independent color name.

    The DEFAULT_* members are roles whose concrete color is chosen by the theme
    and may coincide with one of the named hues.
    """

    RED = "red"
    PINK = "pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    VIOLET = "violet"
    BROWN = "brown"
    BLACK = "black"
    WHITE = "white"
    GREY = "grey"

    DEFAULT_TITLE = "default_title"
    DEFAULT_SECTION_TITLE = "default_section_title"
    DEFAULT_SUBTITLE = "default_subtitle"
    DEFAULT_FOREGROUND = "default_foreground"
    DEFAULT_BACKGROUND = "default_background"

    @classmethod
    def parse(cls, name: str) -> "ColorToken":
        """
        Look up a token by name, ignoring case and treating '-' like '_'.

        Args:
            name: Token name such as "default-title" or "DEFAULT_TITLE"

        Returns:
            Matching ColorToken

        Raises:
            ThemeError: If no token has that name
        """
        if isinstance(name, cls):
            return name

        normalized = str(name).strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            valid = [token.value for token in cls]
            raise ThemeError(f"Unknown color '{name}'. Valid colors: {valid}") from None

    @property
    def is_role(self) -> bool:
        """True for the theme-defined DEFAULT_* roles."""
        return self.value.startswith("default_")
