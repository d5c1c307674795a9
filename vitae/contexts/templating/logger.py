"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_resume_loaded(resume_name: str, source: Path) -> None:
    """Log that a resume record was read from YAML."""
    _log_info(f"Loaded resume for {resume_name}")
    _log_debug(f"Source: {source}")


def log_projection(resume_name: str, num_skills: int, num_education: int, num_work: int) -> None:
    """Log the shape of a resume as it is projected into a document tree."""
    _log_debug(
        f"Projecting {resume_name}: {num_skills} skills, "
        f"{num_education} education entries, {num_work} work entries"
    )
