"""Typer CLI for furniture module calculation."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from millwork.application import ModuleOutput, calculate_from_config
from millwork.application.catalog import CatalogError, default_catalog, load_catalog
from millwork.application.config import (
    ConfigError,
    ModuleConfiguration,
    load_config,
    load_config_from_dict,
)
from millwork.application.templates import TemplateManager
from millwork.cli.commands import templates_app
from millwork.domain import MaterialCatalog, archetype_registry
from millwork.infrastructure import (
    CutListFormatter,
    JsonExporter,
    MaterialReportFormatter,
)

OUTPUT_FORMATS = ("all", "cutlist", "materials", "json")

app = typer.Typer(
    name="millwork",
    help="Calculate cut lists and bills of materials for furniture modules.",
)

app.add_typer(templates_app, name="templates")


def _merge_cli_overrides(
    config: ModuleConfiguration, overrides: dict[str, Any]
) -> ModuleConfiguration:
    """Apply CLI option values on top of a configuration.

    Options left unset (None) keep the configuration value.
    """
    data = config.model_dump(mode="json", exclude_none=True)
    for key in ("width", "height", "depth"):
        if overrides.get(key) is not None:
            data["dimensions"][key] = overrides[key]
    for key in ("doors", "drawers", "shelves", "divisions", "hanging_rods"):
        if overrides.get(key) is not None:
            data["config"][key] = overrides[key]
    if overrides.get("door_type") is not None:
        data["door_type"] = overrides["door_type"]
    if overrides.get("open_module"):
        data["open_module"] = True
    return load_config_from_dict(data)


def _load_catalog(catalog_file: Path | None) -> MaterialCatalog:
    if catalog_file is None:
        return default_catalog()
    try:
        return load_catalog(catalog_file)
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _print_output(output: ModuleOutput, output_format: str) -> None:
    if output_format == "json":
        typer.echo(JsonExporter().export(output))
        return

    result = output.result
    if output_format in ("all", "cutlist"):
        typer.echo(CutListFormatter().format(result.pieces))
    if output_format == "all":
        typer.echo()
    if output_format in ("all", "materials"):
        typer.echo(MaterialReportFormatter().format(result.materials, output.catalog))


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    module_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Module type, starting from its template"),
    ] = None,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Module width in mm"),
    ] = None,
    height: Annotated[
        int | None,
        typer.Option("--height", "-h", help="Module height in mm"),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option("--depth", "-d", help="Module depth in mm"),
    ] = None,
    doors: Annotated[int | None, typer.Option("--doors", help="Number of doors")] = None,
    drawers: Annotated[int | None, typer.Option("--drawers", help="Number of drawers")] = None,
    shelves: Annotated[int | None, typer.Option("--shelves", help="Number of shelves")] = None,
    divisions: Annotated[
        int | None, typer.Option("--divisions", help="Number of vertical divisions")
    ] = None,
    hanging_rods: Annotated[
        int | None, typer.Option("--rods", help="Number of hanging rods")
    ] = None,
    door_type: Annotated[
        str | None,
        typer.Option("--door-type", help="Door construction: board or glass"),
    ] = None,
    open_module: Annotated[
        bool,
        typer.Option("--open", help="Open module without doors or drawers"),
    ] = False,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Material catalog JSON (default: bundled catalog)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, cutlist, materials, json"),
    ] = "all",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log calculation steps"),
    ] = False,
) -> None:
    """Calculate the cut list and bill of materials of a module.

    Start from a configuration file or from the template of a module type.
    CLI options override the values of either.

    Examples:
        millwork calculate --type bajo-mesada
        millwork calculate --type placard --width 2000 --rods 1
        millwork calculate --config kitchen-base.json --format json
    """
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("millwork").setLevel(logging.DEBUG)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    if config_file is not None and module_type is not None:
        typer.echo("Error: Use either --config or --type, not both", err=True)
        raise typer.Exit(code=1)

    try:
        if config_file is not None:
            config = load_config(config_file)
        elif module_type is not None:
            manager = TemplateManager()
            if not manager.template_exists(module_type):
                available = ", ".join(t.value for t in archetype_registry.list())
                typer.echo(f"Error: Unknown module type: {module_type}", err=True)
                typer.echo(f"Available types: {available}", err=True)
                raise typer.Exit(code=1)
            config = load_config_from_dict(manager.get_config(module_type))
        else:
            typer.echo("Error: --config or --type is required", err=True)
            raise typer.Exit(code=1)

        config = _merge_cli_overrides(
            config,
            {
                "width": width,
                "height": height,
                "depth": depth,
                "doors": doors,
                "drawers": drawers,
                "shelves": shelves,
                "divisions": divisions,
                "hanging_rods": hanging_rods,
                "door_type": door_type,
                "open_module": open_module,
            },
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    catalog = _load_catalog(catalog_file)
    output = calculate_from_config(config, catalog)

    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    _print_output(output, output_format)


@app.command()
def types() -> None:
    """List the supported module types."""
    typer.echo("Module types:")
    typer.echo()
    rules = [archetype_registry.get(t) for t in archetype_registry.list()]
    name_width = max(len(rule.module_type.value) for rule in rules)
    for rule in rules:
        features = ", ".join(sorted(f.value for f in rule.features)) or "none"
        mounting = "floor" if rule.floor_standing else "wall"
        label = rule.module_type.label
        typer.echo(f"  {rule.module_type.value:<{name_width}}  {label}: {rule.description}")
        typer.echo(f"  {'':<{name_width}}  features: {features}; mounting: {mounting}")


if __name__ == "__main__":
    app()
