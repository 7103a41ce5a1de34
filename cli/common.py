from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from station import PowerPlant

from .i18n import t

_CONSOLE = Console()


def console() -> Console:
    return _CONSOLE


def configure_logging(name: str, log_dir: Path) -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{name}.log"
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def plant_from(ctx: typer.Context) -> PowerPlant:
    return ctx.obj["plant"]


def print_error(exc: Exception) -> None:
    console().print(t("msgs.error", error=escape(str(exc))))
