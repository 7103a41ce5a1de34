"""Console rendering for station data."""
from __future__ import annotations

from typing import Dict, Sequence

from rich.markup import escape
from rich.table import Table

from station import EnergyReading, PowerPlant, StatisticsSummary
from station.energy_log import format_timestamp

from .common import console
from .i18n import t


def render_sources(plant: PowerPlant) -> None:
    table = Table(title=t("sources.title"))
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column(t("history.source"), style="green")
    table.add_column(t("history.energy"), justify="right")
    for idx, source in enumerate(plant.sources(), start=1):
        table.add_row(str(idx), escape(source.kind), f"{source.generate_energy()} kW")
    console().print(table)


def render_history(readings: Sequence[EnergyReading], capacity: Dict[str, float]) -> None:
    if readings:
        table = Table(title=t("history.title"))
        table.add_column(t("history.timestamp"), no_wrap=True)
        table.add_column(t("history.source"), style="green")
        table.add_column(t("history.energy"), justify="right")
        for reading in readings:
            table.add_row(format_timestamp(reading.timestamp), escape(reading.source_name), f"{reading.energy}")
        console().print(table)
    else:
        console().print(t("msgs.no_history"))

    console().print(f"[bold]{t('storage.title')}:[/]")
    for name, total in capacity.items():
        console().print(t("storage.line", name=escape(name), total=total))


def render_statistics(summary: StatisticsSummary) -> None:
    console().print(f"[bold]{t('analysis.title')}[/] ({summary.count})")
    for key in ("mean", "median", "mode", "range", "midrange"):
        console().print(f"{t('analysis.' + key)}: {getattr(summary, key)} kW")


def render_issues(plant: PowerPlant) -> None:
    console().print(t("issues.title"))
    for idx, (source, issue) in enumerate(plant.check_issues(), start=1):
        status = t("issues.alert", issue=escape(issue)) if issue else t("issues.none")
        console().print(f"{idx}. {escape(source.kind)}: {status}")
