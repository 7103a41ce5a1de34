from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from station import ConfigurationError, PowerPlant, load_settings

from .common import configure_logging, print_error
from .menu import run_menu
from .subapps.data import data_app
from .subapps.sources import sources_app

app = typer.Typer(help="Renewable energy station command line interface")
app.add_typer(sources_app, name="sources")
app.add_typer(data_app, name="data")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML or JSON configuration file"),
    data_file: Optional[Path] = typer.Option(None, "--data-file", help="Energy log file (overrides configuration)"),
) -> None:
    try:
        settings = load_settings(config)
    except ConfigurationError as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc
    configure_logging("station", settings.log_dir)
    plant = PowerPlant.from_settings(settings, data_file=data_file)
    ctx.obj = {"settings": settings, "plant": plant}

    if ctx.invoked_subcommand is None:
        run_menu(plant)


if __name__ == "__main__":
    app()
