"""
Resume Publishing

Loads a resume YAML, projects it, renders it against a named theme and writes
the HTML page to disk.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vitae.contexts.rendering.compiler import render
from vitae.contexts.rendering.exceptions import RenderError
from vitae.contexts.rendering.logger import log_publish_result, log_publish_start
from vitae.contexts.templating.exceptions import InvalidResumeError, InvalidResumeStructureError
from vitae.contexts.templating.projector import ResumeProjector
from vitae.contexts.templating.resume_loader import load_resume
from vitae.contexts.theming.exceptions import ThemeError, ThemeNotFoundError
from vitae.contexts.theming.theme_registry import get_theme
from vitae.utils.escaping import EscapePolicy

# Failures reported through PublishResult rather than raised
PUBLISH_ERRORS = (
    FileNotFoundError,
    InvalidResumeError,
    InvalidResumeStructureError,
    ThemeError,
    ThemeNotFoundError,
    RenderError,
)


@dataclass
class PublishResult:
    """
    Result of publishing a resume.

    Attributes:
        success: Whether the HTML was written
        output_path: Path to the written HTML (None if failed)
        theme_name: Theme the resume was rendered with
        error: Error message if publishing failed
        elapsed_s: Wall time spent loading, rendering and writing
    """

    success: bool
    output_path: Optional[Path] = None
    theme_name: str = ""
    error: Optional[str] = None
    elapsed_s: float = 0.0


def publish_resume(
    resume_path: Path,
    theme_name: str = "default",
    output_path: Optional[Path] = None,
    escape_policy: EscapePolicy = EscapePolicy.VERBATIM,
    themes_path: Optional[Path] = None,
) -> PublishResult:
    """
    Render a resume YAML file to an HTML page.

    Args:
        resume_path: Path to the resume YAML
        theme_name: Name of a theme in the themes config
        output_path: Where to write the HTML (default: resume path with .html suffix)
        escape_policy: Escape policy for user text (default: VERBATIM)
        themes_path: Optional themes config path (default: THEMES_PATH)

    Returns:
        PublishResult with success status and output location
    """
    resume_path = Path(resume_path)
    output_path = Path(output_path) if output_path else resume_path.with_suffix(".html")

    log_publish_start(resume_path, theme_name, output_path)
    start_time = time.time()

    try:
        theme = get_theme(theme_name, themes_path)
        resume = load_resume(resume_path)
        tree = ResumeProjector(escape_policy).project(resume)
        page = render(tree, theme, escape_policy)
    except PUBLISH_ERRORS as e:
        result = PublishResult(
            success=False,
            theme_name=theme_name,
            error=str(e),
            elapsed_s=time.time() - start_time,
        )
        log_publish_result(result, result.elapsed_s)
        return result

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")

    result = PublishResult(
        success=True,
        output_path=output_path,
        theme_name=theme_name,
        elapsed_s=time.time() - start_time,
    )
    log_publish_result(result, result.elapsed_s)
    return result
