from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import (
    DEFAULT_ENCODING,
    DEFAULT_POST_PHASE,
    DESCRIPTOR_FILE,
    default_local_repository,
    default_registry_file,
)
from .creator import ArchetypeCreator, CreationFailure
from .descriptor import InputResolutionError, PomDescriptorLoader
from .engine import EngineLoadError, load_engine
from .request import ArchetypeOptions

app = typer.Typer(help="Create archetypes from existing projects.")
console = Console()
log_console = Console(stderr=True)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_INPUT = 2


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    md = "md"


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("archekit")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=log_console, show_path=False))


def _json_print(payload: dict) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=True, sort_keys=True))


def _print_key_value_table(title: str, rows: list[tuple[str, str]]) -> None:
    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(key, value)
    console.print(table)


def _emit_success(
    command: str,
    output_format: OutputFormat,
    data: dict,
    md_renderer: Callable[[dict], str] | None = None,
) -> None:
    if output_format == OutputFormat.json:
        _json_print(
            {
                "ok": True,
                "command": command,
                "exit_code": EXIT_OK,
                "data": data,
            }
        )
        return

    if output_format == OutputFormat.md and md_renderer is not None:
        console.print(md_renderer(data))
        return

    if output_format == OutputFormat.md:
        lines = [f"# {command}", ""]
        lines.extend(f"- **{key}**: {value}" for key, value in data.items())
        console.print("\n".join(lines))
    else:
        _print_key_value_table(
            title=command,
            rows=[(str(key), str(value)) for key, value in data.items()],
        )


def _emit_error(
    command: str,
    output_format: OutputFormat,
    exit_code: int,
    code: str,
    message: str,
) -> None:
    if output_format == OutputFormat.json:
        _json_print(
            {
                "ok": False,
                "command": command,
                "exit_code": exit_code,
                "error": {
                    "code": code,
                    "message": message,
                },
            }
        )
    elif output_format == OutputFormat.md:
        console.print(f"# {command}\n\n- **status**: error\n- **code**: {code}\n- **message**: {message}")
    else:
        console.print(f"[red]Error ({code}):[/red] {message}")

    raise typer.Exit(code=exit_code)


def _parse_defines(defines: list[str]) -> dict[str, str]:
    properties: dict[str, str] = {}
    for define in defines:
        key, separator, value = define.partition("=")
        if not key:
            raise ValueError(f"Invalid property definition: {define!r}")
        properties[key] = value if separator else "true"
    return properties


@app.command("create-from-project")
def create_from_project(
    interactive: bool = typer.Option(False, "--interactive", "-i", help="Prompt for the archetype properties."),
    filtered_extensions: Optional[str] = typer.Option(
        None, "--filtered-extensions", help="Comma-separated extensions of text files to filter."
    ),
    excluded_extensions: Optional[str] = typer.Option(
        None, "--excluded-extensions", help="Comma-separated extensions left out of the archetype."
    ),
    source_directory: Optional[Path] = typer.Option(
        None, "--source-directory", help=f"Create the archetype from the {DESCRIPTOR_FILE} in this directory."
    ),
    languages: Optional[str] = typer.Option(
        None, "--languages", help="Comma-separated source directory names searched for the main package."
    ),
    registry_file: Path = typer.Option(default_registry_file(), "--registry-file", help="Archetype registry file."),
    encoding: str = typer.Option(DEFAULT_ENCODING, "--encoding", help="Template encoding."),
    partial: bool = typer.Option(False, "--partial", help="Create a partial archetype."),
    preserve_cdata: bool = typer.Option(False, "--preserve-cdata", help="Preserve CDATA sections in descriptors."),
    local_repository: Path = typer.Option(
        default_local_repository(), "--local-repository", help="Local artifact repository."
    ),
    keep_parent: bool = typer.Option(
        True, "--keep-parent/--no-keep-parent", help="Keep the parent reference in generated descriptors."
    ),
    property_file: Optional[Path] = typer.Option(None, "--property-file", help="Persisted archetype properties."),
    post_phase: str = typer.Option(DEFAULT_POST_PHASE, "--post-phase", help="Build phase run on the archetype."),
    output_directory: Optional[Path] = typer.Option(
        None, "--output-directory", "-o", help="Where the archetype is created."
    ),
    test_mode: bool = typer.Option(False, "--test-mode", help="Enable test mode."),
    package_name: Optional[str] = typer.Option(None, "--package-name", help="Override the guessed package."),
    defines: Optional[List[str]] = typer.Option(None, "--define", "-D", help="Execution property as key=value."),
    project_dir: Path = typer.Option(Path("."), "--project-dir", help="Directory of the current project."),
    engine_path: Optional[str] = typer.Option(None, "--engine", help="Engine as package.module:attribute."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output."),
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format."),
):
    """Create an archetype from the current project."""
    command = "create-from-project"
    _configure_logging(verbose)

    try:
        execution_properties = _parse_defines(defines or [])
    except ValueError as error:
        _emit_error(command, output_format, EXIT_INVALID_INPUT, "invalid_property", str(error))

    engine = None
    if engine_path:
        try:
            engine = load_engine(engine_path)
        except EngineLoadError as error:
            _emit_error(command, output_format, EXIT_INVALID_INPUT, "engine_error", str(error))

    loader = PomDescriptorLoader()
    current_project = None
    if source_directory is None:
        try:
            current_project = loader.load(project_dir.resolve() / DESCRIPTOR_FILE, local_repository)
        except InputResolutionError as error:
            _emit_error(command, output_format, EXIT_INVALID_INPUT, "project_error", str(error))

    options = ArchetypeOptions(
        interactive=interactive,
        filtered_extensions=filtered_extensions,
        excluded_extensions=excluded_extensions,
        source_directory=source_directory.resolve() if source_directory else None,
        languages=languages,
        registry_file=registry_file,
        encoding=encoding,
        partial_archetype=partial,
        preserve_cdata=preserve_cdata,
        local_repository=local_repository,
        keep_parent=keep_parent,
        property_file=property_file.resolve() if property_file else None,
        post_phase=post_phase,
        output_directory=output_directory.resolve() if output_directory else None,
        test_mode=test_mode,
        package_name=package_name,
        execution_properties=execution_properties,
    )

    creator = ArchetypeCreator(loader=loader, engine=engine)
    try:
        target = creator.create(options, current_project)
    except CreationFailure as error:
        _emit_error(command, output_format, EXIT_ERROR, "creation_failed", error.message)

    data = {"path": str(target)}

    def render_md(payload: dict) -> str:
        return f"# Archetype created\n\n- **path**: `{payload['path']}`"

    _emit_success(command=command, output_format=output_format, data=data, md_renderer=render_md)


@app.command("version")
def version(
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format."),
) -> None:
    """Print version."""
    _emit_success(command="version", output_format=output_format, data={"version": __version__})


if __name__ == "__main__":
    app()
