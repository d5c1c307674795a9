"""Custom exceptions for the theming context."""

from typing import Iterable, Optional


class ThemeError(ValueError):
    """
    Exception raised when a theme cannot resolve colors or is misconfigured.

    Attributes:
        message: Error description
        theme_name: Name of the theme involved, if known
    """

    def __init__(self, message: str, theme_name: Optional[str] = None):
        self.message = message
        self.theme_name = theme_name

        if theme_name:
            super().__init__(f"{message} (theme: {theme_name})")
        else:
            super().__init__(message)


class ThemeNotFoundError(KeyError):
    """
    Exception raised when a named theme is not present in the theme config.

    Attributes:
        theme_name: The requested theme
        available: Names of the themes that are configured
    """

    def __init__(self, theme_name: str, available: Iterable[str] = ()):
        self.theme_name = theme_name
        self.available = sorted(available)
        super().__init__(f"Theme '{theme_name}' not found. Available themes: {self.available}")

    def __str__(self) -> str:
        # KeyError quotes its argument by default
        return self.args[0]
