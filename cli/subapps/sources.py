from __future__ import annotations

import typer

from station import InvalidInputError

from ..common import console, plant_from, print_error
from ..i18n import t
from ..views import render_issues, render_sources

sources_app = typer.Typer(help="Inspect and control energy sources")


@sources_app.command("monitor")
def monitor(ctx: typer.Context) -> None:
    render_sources(plant_from(ctx))


@sources_app.command("control")
def control(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Source number as listed by `monitor` (1-based)"),
    value: float = typer.Argument(..., help="New energy level in kW"),
) -> None:
    plant = plant_from(ctx)
    try:
        source = plant.source(index - 1)
    except InvalidInputError as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc
    source.set_energy(value)
    console().print(t("msgs.updated", kind=source.kind, energy=source.generate_energy()))


@sources_app.command("issues")
def issues(ctx: typer.Context) -> None:
    render_issues(plant_from(ctx))
