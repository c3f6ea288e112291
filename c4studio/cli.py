"""CLI interface."""
from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from c4studio.layout import LayoutOptions, compute_layout, compute_semantic_zoom_level, get_zoom_range
from c4studio.models.architecture_model import ArchitectureModel, create_empty_model
from c4studio.tools.model_io import ModelImportError, export_model, import_model_file, write_model_file
from c4studio.utils.config import settings
from c4studio.validation import get_validation_summary, repair_model, validate_model
from c4studio.validation.diagnostics import errors_only

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level.")):
    """Validate, lay out and repair architecture models."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load(file: str) -> ArchitectureModel:
    try:
        return import_model_file(file)
    except ModelImportError as exc:
        raise typer.BadParameter(str(exc), param_hint="FILE") from exc


def _emit(model: ArchitectureModel, output: Optional[str]) -> None:
    if output:
        path = write_model_file(model, output)
        typer.echo(f"Wrote {path}")
    else:
        typer.echo(export_model(model))


@app.command()
def validate(
    file: str = typer.Argument(..., help="Path to an .arch.json model."),
    as_json: bool = typer.Option(False, "--json", help="Print diagnostics as JSON."),
):
    """Validate a model; exits 1 when any error is reported."""
    model = _load(file)
    diagnostics = validate_model(model)
    if as_json:
        typer.echo(json.dumps([d.to_dict() for d in diagnostics], indent=2))
    else:
        for diagnostic in diagnostics:
            typer.echo(diagnostic.format())
        typer.echo(get_validation_summary(diagnostics))
    if errors_only(diagnostics):
        raise typer.Exit(code=1)


@app.command()
def layout(
    file: str = typer.Argument(..., help="Path to an .arch.json model."),
    view: str = typer.Option(..., "--view", help="Id of the view to lay out."),
    algorithm: Optional[str] = typer.Option(None, "--algorithm"),
    spacing: Optional[float] = typer.Option(None, "--spacing"),
    padding: Optional[float] = typer.Option(None, "--padding"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the updated model here."),
):
    """Recompute one view's layout on the deterministic grid."""
    model = _load(file)
    target = model.find_view(view)
    if target is None:
        raise typer.BadParameter(f"View '{view}' not found", param_hint="--view")
    options = LayoutOptions(
        algorithm=algorithm or settings.layout_algorithm,
        spacing=spacing if spacing is not None else settings.layout_spacing,
        padding=padding if padding is not None else settings.layout_padding,
    )
    updated = model.model_copy(deep=True)
    updated.find_view(view).layout = compute_layout(model, target, options)
    _emit(updated, output)


@app.command()
def zoom(value: float = typer.Argument(..., help="Zoom factor, nominally 0..1.")):
    """Print the hierarchy level shown at a zoom factor."""
    level = compute_semantic_zoom_level(value)
    low, high = get_zoom_range(level)
    typer.echo(f"{level.value} [{low}, {high}]")


@app.command()
def repair(
    file: str = typer.Argument(..., help="Path to an .arch.json model."),
    output: Optional[str] = typer.Option(None, "--output", "-o"),
):
    """Attach parentless systems to a landscape."""
    model = _load(file)
    result = repair_model(model)
    if not result.applied:
        typer.echo("Nothing to repair", err=True)
    for change in result.changes_made:
        typer.echo(change, err=True)
    _emit(result.model, output)


@app.command()
def new(
    title: str = typer.Option("New Architecture", "--title"),
    output: Optional[str] = typer.Option(None, "--output", "-o"),
):
    """Create an empty model."""
    _emit(create_empty_model(title), output)


if __name__ == "__main__":
    app()
