"""Commands for listing module templates and writing configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from millwork.application.templates import ModulePreset, TemplateManager, TemplateNotFoundError
from millwork.domain.value_objects import ModuleType

templates_app = typer.Typer(
    name="templates",
    help="Manage module configuration templates.",
)

_COUNT_NAMES = ("doors", "drawers", "shelves", "divisions", "hanging_rods")


def _summary(preset: ModulePreset) -> str:
    """Size and non-zero feature counts of a preset on one line."""
    dims = preset.dimensions
    counts = [
        f"{name.replace('_', ' ')} {getattr(preset.config, name)}"
        for name in _COUNT_NAMES
        if getattr(preset.config, name)
    ]
    return f"{dims.width} x {dims.height} x {dims.depth} mm; " + (
        ", ".join(counts) or "no fronts or interior"
    )


@templates_app.command(name="list")
def list_templates() -> None:
    """List the template of every module type with its preset size and counts.

    Example:
        millwork templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()

    typer.echo("Available templates:")
    typer.echo()

    name_width = max(len(name) for name, _ in templates)
    for name, description in templates:
        label = ModuleType(name).label
        typer.echo(f"  {name:<{name_width}}  {label}: {description}")
        typer.echo(f"  {'':<{name_width}}  {_summary(manager.get_preset(name))}")

    typer.echo()
    typer.echo("Use 'millwork templates init <name>' to create a configuration file from a template.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Module type of the template (e.g. bajo-mesada)"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Write a configuration file from the template of a module type.

    Examples:
        millwork templates init placard
        millwork templates init alacena --output wall-cabinet.json
    """
    manager = TemplateManager()
    output = output or Path(f"{name}.json")

    try:
        manager.init_template(name, output, force=force)
    except TemplateNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)
    except FileExistsError:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output}")
