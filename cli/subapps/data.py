from __future__ import annotations

import typer

from station import InvalidInputError, LogParseError, preset_window

from ..common import console, plant_from, print_error
from ..i18n import t
from ..views import render_history, render_statistics

data_app = typer.Typer(help="Collect and analyse logged energy data")


@data_app.command("collect")
def collect(ctx: typer.Context) -> None:
    plant = plant_from(ctx)
    try:
        plant.collect()
    except OSError as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc
    console().print(t("msgs.collected"))


@data_app.command("history")
def history(ctx: typer.Context) -> None:
    plant = plant_from(ctx)
    try:
        readings = plant.history()
    except (LogParseError, OSError) as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc
    render_history(readings, plant.storage_capacity(readings))


@data_app.command("analyze")
def analyze(
    ctx: typer.Context,
    window: str = typer.Option("day", "--window", "-w", help="hour, day, week or month"),
) -> None:
    plant = plant_from(ctx)
    try:
        start, end = preset_window(window.lower())
        summary = plant.analyze(start, end)
    except (InvalidInputError, LogParseError, OSError) as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc
    if summary is None:
        console().print(t("msgs.no_window_data"))
        return
    render_statistics(summary)
