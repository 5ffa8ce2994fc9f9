"""Console rendering of run output: JSON dump, statistics table, name bar charts."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from config.settings import EXPORTS_DIR
from phase2_statistics.name_analytics import NameFrequencyResult
from phase2_statistics.statistics_engine import StatisticsResult

console = Console()

BAR_WIDTH = 30

STATISTIC_LABELS = [
    ("total", "Total employees"),
    ("workload_10", "Workload 10h"),
    ("workload_20", "Workload 20h"),
    ("workload_30", "Workload 30h"),
    ("workload_40", "Workload 40h"),
    ("average_age", "Average age"),
    ("min_age", "Minimum age"),
    ("max_age", "Maximum age"),
    ("median_age", "Median age"),
    ("median_workload", "Median workload"),
    ("average_women_workload", "Average women workload"),
]

SLICE_TITLES = {
    "all": "All employees",
    "female": "Women",
    "male": "Men",
    "femalePartTime": "Women, part-time",
    "maleFullTime": "Men, full-time",
}


def print_json(data) -> None:
    console.print_json(data=data)


def statistics_table(stats: StatisticsResult) -> Table:
    table = Table(title="Employee Statistics")
    table.add_column("Statistic", style="cyan")
    table.add_column("Value", justify="right", style="green")
    for attr, label in STATISTIC_LABELS:
        table.add_row(label, str(getattr(stats, attr)))
    return table


def _bar(value: int, peak: int) -> str:
    if peak <= 0:
        return ""
    return "█" * max(1, round(BAR_WIDTH * value / peak))


def name_chart_table(slice_name: str, points: list[dict]) -> Table:
    """Horizontal bar chart of one slice's chart data, in chart order."""
    table = Table(title=SLICE_TITLES.get(slice_name, slice_name))
    table.add_column("Name", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("", style="magenta")

    peak = max((p["value"] for p in points), default=0)
    for point in points:
        table.add_row(point["label"], str(point["value"]), _bar(point["value"], peak))
    return table


def render_statistics(stats: StatisticsResult) -> None:
    console.print(statistics_table(stats))


def render_names(names: NameFrequencyResult) -> None:
    for slice_name, points in names.chart_data.items():
        if not points:
            console.print(f"  [dim]{SLICE_TITLES.get(slice_name, slice_name)}: no employees[/dim]")
            continue
        console.print(name_chart_table(slice_name, points))


def export_json(data, name: Optional[str] = None, directory: Path = EXPORTS_DIR) -> Path:
    """Write output under data/exports/ and return the file path."""
    directory.mkdir(parents=True, exist_ok=True)
    name = name or f"employees_{datetime.now():%Y%m%d_%H%M%S}"
    path = directory / f"{name}.json"
    with open(path, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return path
