#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders a resume YAML file to a themed HTML page.

Commands:
    render - Render a resume YAML file to HTML
    themes - List the available themes

Examples:\n

    render_resume.py render data/resumes/ada_lovelace.yaml                   # Default theme

    render_resume.py render data/resumes/ada_lovelace.yaml -t forest         # Named theme

    render_resume.py render data/resumes/ada_lovelace.yaml -o out/ada.html   # Output path

    render_resume.py render data/resumes/ada_lovelace.yaml --escape          # Escape user text

    render_resume.py themes                                                  # List themes
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.rendering import publish_resume
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.theming import available_themes
from vitae.utils.escaping import EscapePolicy

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render resume YAML files to themed HTML pages",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    resume_path: Annotated[
        Path,
        typer.Argument(
            help="Path to resume YAML",
            exists=True,
            dir_okay=False,
        ),
    ],
    theme: Annotated[
        str,
        typer.Option(
            "--theme",
            "-t",
            help="Theme name (see `themes` command)",
        ),
    ] = "default",
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output HTML path (default: next to the resume YAML)",
        ),
    ] = None,
    escape: Annotated[
        bool,
        typer.Option(
            "--escape",
            help="HTML-escape user-supplied text instead of embedding it verbatim",
        ),
    ] = False,
    themes_path: Annotated[
        Optional[Path],
        typer.Option(
            "--themes-file",
            help="Themes YAML to load instead of the configured one",
        ),
    ] = None,
):
    """
    Render a resume YAML file to a themed HTML page.

    Examples:\n

        $ render_resume.py render data/resumes/ada_lovelace.yaml -t dracula
    """
    log_dir = LOGS_PATH / f"render_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_rendering_logger(log_dir, theme_name=theme)

    result = publish_resume(
        resume_path,
        theme_name=theme,
        output_path=output,
        escape_policy=EscapePolicy.ESCAPE if escape else EscapePolicy.VERBATIM,
        themes_path=themes_path,
    )

    if not result.success:
        typer.secho(f"✗ {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Wrote {result.output_path}", fg=typer.colors.GREEN)


@app.command("themes")
def themes_command(
    themes_path: Annotated[
        Optional[Path],
        typer.Option(
            "--themes-file",
            help="Themes YAML to list instead of the configured one",
        ),
    ] = None,
):
    """List the available themes."""
    for name in available_themes(themes_path):
        typer.echo(name)


if __name__ == "__main__":
    app()
