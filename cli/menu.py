from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from station import LogParseError, PowerPlant, preset_window

from .common import console, print_error
from .i18n import t
from .views import render_history, render_issues, render_sources, render_statistics

LOGGER = logging.getLogger(__name__)

MENU_OPTIONS = ("monitor", "control", "collect", "history", "analyze", "issues", "exit")
WINDOW_OPTIONS = ("hour", "day", "week", "month")


def render_menu(options: Iterable[tuple[str, str]], title: Optional[str] = None, subtitle: Optional[str] = None) -> None:
    table = Table()
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Option", style="green")
    for idx, (_, label) in enumerate(options, start=1):
        table.add_row(str(idx), label)
    console().print(Panel(table, title=title or t("menu.title"), subtitle=subtitle or t("menu.subtitle")))


def parse_choice(raw: str, upper: int) -> Optional[int]:
    """Return ``raw`` as an int in ``1..upper`` or ``None``."""
    try:
        choice = int(raw.strip())
    except ValueError:
        return None
    return choice if 1 <= choice <= upper else None


def _control(plant: PowerPlant) -> None:
    for idx, source in enumerate(plant.sources(), start=1):
        raw = typer.prompt(t("prompts.energy_value", kind=source.kind, index=idx))
        try:
            value = float(raw)
        except ValueError:
            # Remaining sources keep their level.
            console().print(t("msgs.invalid_value"))
            return
        source.set_energy(value)


def _collect(plant: PowerPlant) -> None:
    plant.collect()
    console().print(t("msgs.collected"))


def _history(plant: PowerPlant) -> None:
    readings = plant.history()
    render_history(readings, plant.storage_capacity(readings))


def _analyze(plant: PowerPlant) -> None:
    render_menu(
        [(key, t(f"windows.{key}")) for key in WINDOW_OPTIONS],
        title=t("windows.title"),
        subtitle=t("prompts.window_choice"),
    )
    choice = parse_choice(typer.prompt(t("prompts.window_choice")), len(WINDOW_OPTIONS))
    if choice is None:
        console().print(t("msgs.invalid_window"))
        return
    start, end = preset_window(WINDOW_OPTIONS[choice - 1])
    summary = plant.analyze(start, end)
    if summary is None:
        console().print(t("msgs.no_window_data"))
        return
    render_statistics(summary)


def run_menu(plant: PowerPlant) -> None:
    """Interactive loop over the seven station actions until Exit is chosen."""
    actions: Dict[str, Callable[[PowerPlant], None]] = {
        "monitor": render_sources,
        "control": _control,
        "collect": _collect,
        "history": _history,
        "analyze": _analyze,
        "issues": render_issues,
    }
    while True:
        render_menu([(key, t(f"menu.options.{key}")) for key in MENU_OPTIONS])
        choice = parse_choice(typer.prompt(t("prompts.menu_choice")), len(MENU_OPTIONS))
        if choice is None:
            console().print(t("msgs.invalid_option"))
            continue
        selected = MENU_OPTIONS[choice - 1]
        if selected == "exit":
            console().print(t("msgs.exiting"))
            return
        try:
            actions[selected](plant)
        except (LogParseError, OSError) as exc:
            LOGGER.error("Menu action %s failed: %s", selected, exc)
            print_error(exc)
