"""Typer CLI for paint quotations."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from paintquote.application import CatalogIntegrityError, get_factory
from paintquote.application.config import ConfigError, load_config
from paintquote.cli.commands import validate_command
from paintquote.domain import PackOption
from paintquote.domain.services import (
    calculate_room_areas,
    optimal_pack_combination,
    parse_coverage_range,
)
from paintquote.infrastructure import (
    JsonExporter,
    MaterialReportFormatter,
    RoomAreaFormatter,
)

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="paintquote",
    help="Estimate paint materials, labour and quotation totals.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log calculation details")
    ] = False,
) -> None:
    """Estimate paint materials, labour and quotation totals."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format: {output_format}. Available: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    return fmt


def _parse_pack(value: str) -> PackOption:
    """Parse ``SIZE:PRICE`` or ``SIZE:PRICE:LABEL``."""
    parts = value.split(":")
    if len(parts) not in (2, 3):
        raise typer.BadParameter(f"Expected SIZE:PRICE[:LABEL], got {value!r}")
    try:
        size = float(parts[0])
        price = float(parts[1])
    except ValueError:
        raise typer.BadParameter(f"Expected numeric SIZE and PRICE, got {value!r}")
    label = parts[2] if len(parts) == 3 else ""
    return PackOption(size=size, price=price, label=label)


@app.command()
def areas(
    length: Annotated[float, typer.Option("--length", "-l", help="Room length in feet")],
    width: Annotated[float, typer.Option("--width", "-w", help="Room width in feet")],
    height: Annotated[
        float, typer.Option("--height", "-h", help="Room height in feet (0 if unknown)")
    ] = 0.0,
    opening: Annotated[
        list[float] | None,
        typer.Option("--opening", help="Opening area in sq.ft (repeatable)"),
    ] = None,
    extra: Annotated[
        list[float] | None,
        typer.Option("--extra", help="Extra surface area in sq.ft (repeatable)"),
    ] = None,
    grill: Annotated[
        list[float] | None,
        typer.Option("--grill", help="Door/window/grill area in sq.ft (repeatable)"),
    ] = None,
    include_grill: Annotated[
        bool,
        typer.Option("--include-grill", help="Add door/window/grill area to the wall"),
    ] = False,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Show floor, wall and ceiling areas for one room."""
    fmt = _check_format(output_format)
    result = calculate_room_areas(
        length,
        width,
        height,
        openings=opening or [],
        extra_surfaces=extra or [],
        door_window_grills=grill or [],
        include_door_window_grill=include_grill,
    )
    if fmt == "json":
        typer.echo(JsonExporter().export_room_areas(result))
    else:
        typer.echo(RoomAreaFormatter().format_single(result))


@app.command()
def coverage(
    coverage_range: Annotated[
        str, typer.Argument(help='Coverage text such as "140-160" or "120"')
    ],
) -> None:
    """Resolve a coverage range to sq.ft per unit."""
    typer.echo(f"{parse_coverage_range(coverage_range):g}")


@app.command()
def packs(
    required: Annotated[
        float, typer.Option("--required", "-r", help="Quantity to buy (litres/kg)")
    ],
    pack: Annotated[
        list[str],
        typer.Option("--pack", "-p", help="Pack as SIZE:PRICE[:LABEL] (repeatable)"),
    ],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
) -> None:
    """Choose pack sizes covering a required quantity."""
    fmt = _check_format(output_format)
    options = [_parse_pack(p) for p in pack]
    combination = optimal_pack_combination(required, options)
    if fmt == "json":
        typer.echo(JsonExporter().export_packs(required, combination))
    else:
        typer.echo(MaterialReportFormatter().format_packs(required, combination))
    if combination.error:
        raise typer.Exit(code=1)


@app.command()
def estimate(
    config_file: Annotated[
        Path, typer.Option("--config", "-c", help="Path to JSON estimate file")
    ],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write output to a file")
    ] = None,
) -> None:
    """Produce a full quotation from an estimate file."""
    fmt = _check_format(output_format)
    factory = get_factory()
    try:
        config = load_config(config_file)
        command = factory.create_summary_command(config.include_door_window_grill)
        result = command.execute_config(config)
    except (ConfigError, CatalogIntegrityError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if fmt == "json":
        text = factory.get_json_exporter().export(result)
    else:
        text = factory.get_quotation_formatter().format(
            result, project_name=config.project.customer_name
        )

    if output is not None:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Quotation written to {output}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
