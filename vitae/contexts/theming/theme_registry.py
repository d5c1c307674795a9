"""
Theme Registry

Loads named themes from a YAML config. The config path comes from the
VITAE_THEMES_PATH environment variable when set, otherwise the palettes
shipped with the package are used.

Examples:
    >>> available_themes()
    ['default', 'dracula', 'forest']

    >>> theme = get_theme("forest")
    >>> theme.color_hex(ColorToken.DEFAULT_BACKGROUND)
    '#05386b'
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.theming.exceptions import ThemeError, ThemeNotFoundError
from vitae.contexts.theming.logger import log_theme_loaded
from vitae.contexts.theming.palette_theme import PaletteTheme

load_dotenv()
BUILTIN_THEMES_PATH = Path(__file__).parent / "palettes" / "themes.yaml"
THEMES_PATH = Path(os.getenv("VITAE_THEMES_PATH", str(BUILTIN_THEMES_PATH)))


def load_theme_configs(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the themes YAML file into a plain dict.

    Args:
        config_path: Optional path to a themes file (defaults to THEMES_PATH)

    Returns:
        Dict mapping theme name to its config ({"palette": ..., "document_css": ...})

    Raises:
        FileNotFoundError: If the config file does not exist
        ThemeError: If the file is not a mapping of theme names
    """
    if config_path is None:
        config_path = THEMES_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Themes config not found at {config_path}")

    configs = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    if not isinstance(configs, dict):
        raise ThemeError(f"Themes config must be a mapping of theme names: {config_path}")

    return configs


def available_themes(config_path: Path = None) -> List[str]:
    """Return the sorted theme names defined in the themes config."""
    return sorted(load_theme_configs(config_path).keys())


def get_theme(theme_name: str, config_path: Path = None) -> PaletteTheme:
    """
    Build a named theme from the themes config.

    Args:
        theme_name: Name of a theme in the config (e.g., "forest")
        config_path: Optional path to a themes file (defaults to THEMES_PATH)

    Returns:
        PaletteTheme

    Raises:
        ThemeNotFoundError: If theme_name is not defined
        ThemeError: If the theme's palette is incomplete or malformed
    """
    configs = load_theme_configs(config_path)

    if theme_name not in configs:
        raise ThemeNotFoundError(theme_name, configs.keys())

    theme = PaletteTheme.from_config(theme_name, configs[theme_name])
    log_theme_loaded(theme_name, config_path or THEMES_PATH)
    return theme
