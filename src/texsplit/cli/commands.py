"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from texsplit.config import Settings, load_config
from texsplit.core.models import PartResult
from texsplit.core.project import create_project, update_project
from texsplit.core.typeset import compile_project, watch_project


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _docx(path: str) -> Path:
    p = Path(path)
    if p.suffix != ".docx":
        _fail(f"Expected a .docx file, got: {path}")
    if not p.is_file():
        _fail(f"File not found: {path}")
    return p


def _echo_part(result: PartResult) -> None:
    """Print written fragments and a summary line."""
    for path in result.articles:
        typer.echo(f"  {path}")
    typer.echo(
        f"Updated {result.part} - "
        f"{len(result.articles)} article(s), "
        f"{len(result.media)} media file(s)"
    )
    if not result.inserted:
        typer.echo("Warning: insertion sentinel not found; main document left unchanged.", err=True)


def _update(docx: Path, project_dir: Path, settings: Settings) -> None:
    try:
        result = update_project(docx, project_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    _echo_part(result)


def create_cmd(
    docx: Annotated[str, typer.Argument(help=".docx part to import")],
    project: Annotated[str, typer.Argument(help="New project directory")],
    template: Annotated[Optional[str], typer.Option("--template", help="Template directory")] = None,
    keep_preamble: Annotated[Optional[bool], typer.Option("--keep-preamble", help="Keep text before the first marker")] = None,
    ):
    """Create a project from the template, then import the part."""
    settings = _settings(overrides={"template_dir": template, "keep_preamble": keep_preamble})
    docx_path = _docx(docx)
    project_dir = Path(project)
    try:
        create_project(Path(settings.template_dir), project_dir)
    except OSError as e:
        _fail("Create failed", e)
    typer.echo(f"Created project at: {project_dir}")
    _update(docx_path, project_dir, settings)


def update_cmd(
    docx: Annotated[str, typer.Argument(help=".docx part to import")],
    project: Annotated[str, typer.Argument(help="Existing project directory")],
    keep_preamble: Annotated[Optional[bool], typer.Option("--keep-preamble", help="Keep text before the first marker")] = None,
    ):
    """Convert a part and add its articles to an existing project."""
    settings = _settings(overrides={"keep_preamble": keep_preamble})
    _update(_docx(docx), Path(project), settings)


def compile_cmd(
    project: Annotated[Optional[str], typer.Argument(help="Project directory (default: current)")] = None,
    watch: Annotated[bool, typer.Option("--watch", help="Recompile whenever project files change")] = False,
    compiler: Annotated[Optional[str], typer.Option("--compiler", help="LaTeX compiler executable")] = None,
    ):
    """Compile the project, once or continuously."""
    if project and project.endswith(".docx"):
        _fail("compile does not accept .docx files")
    settings = _settings(overrides={"compiler_cmd": compiler})
    project_dir = Path(project) if project else Path.cwd()

    if watch:
        try:
            watch_project(project_dir, settings)
        except KeyboardInterrupt:
            typer.echo("Stopped watching.")
        return

    try:
        compile_project(project_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(f"Compiled {project_dir / settings.main_file}")
