"""``paintquote validate``: check an estimate file before quoting it.

Schema problems stop the estimate from loading at all; advisories (products
missing from the catalog, zero rates, openings larger than the walls) are
reported on an estimate that did load.
"""

from pathlib import Path
from typing import Annotated, Sequence

import typer

from paintquote.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)
from paintquote.application.config.validator import ValidationError, ValidationWarning


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON estimate file to validate"),
    ],
) -> None:
    """Validate an estimate file.

    Exit codes:
        0 - Estimate is valid with no warnings
        1 - Estimate has errors (cannot be quoted)
        2 - Estimate is valid but has warnings

    Example:
        paintquote validate site-visit.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _report_unloadable(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report_advisories(result)
    raise typer.Exit(code=result.exit_code)


def _report_unloadable(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    for line in error.problem_lines():
        typer.echo(f"  {line}", err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _echo_findings(
    title: str, findings: Sequence[ValidationError | ValidationWarning], err: bool
) -> None:
    if not findings:
        return
    typer.echo(title, err=err)
    for finding in findings:
        typer.echo(f"  {finding.path}: {finding.message}", err=err)
        value = getattr(finding, "value", None)
        if value is not None:
            typer.echo(f"    Got: {value!r}", err=err)
        suggestion = getattr(finding, "suggestion", None)
        if suggestion:
            typer.echo(f"    Suggestion: {suggestion}", err=err)
    typer.echo()


def _report_advisories(result: ValidationResult) -> None:
    _echo_findings("Errors:", result.errors, err=True)
    _echo_findings("Warnings:", result.warnings, err=False)

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Estimate is valid.")
