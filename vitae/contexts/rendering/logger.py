"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, theme_name: str = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        theme_name: Theme used for this session, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, theme_name="forest")
        _log_info("Starting render...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Theme": theme_name} if theme_name else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_publish_start(resume_path: Path, theme_name: str, output_path: Path) -> None:
    """Log start of a publish run with context."""
    _log_info(f"Rendering {resume_path.name} with theme '{theme_name}'")
    _log_debug(f"  Source: {resume_path}")
    _log_debug(f"  Output: {output_path}")


def log_publish_result(result, elapsed_time: float) -> None:
    """
    Log publish result.

    Args:
        result: PublishResult from publish_resume()
        elapsed_time: Time taken to load, project, render and write
    """
    if result.success:
        _log_success(f"Rendered with theme '{result.theme_name}' ({elapsed_time:.2f}s)")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Render failed ({elapsed_time:.2f}s)")
        _log_error(f"  Error: {result.error}")
