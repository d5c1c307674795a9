"""
Theming context logger.

Provides logging interface for theming context with automatic [theme] prefix.
All theming modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[theme]"


def _log_debug(message: str) -> None:
    """Log debug message with [theme] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_theme_loaded(theme_name: str, source: str) -> None:
    """Log which theme was built and where its palette came from."""
    _log_debug(f"Loaded theme '{theme_name}' from {source}")
