"""Interactive entry point: ask for parameters, generate a batch, print the chosen output."""

import sys
from datetime import date
from pathlib import Path
from typing import Callable, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from phase1_synthetic_data.orchestrator import GenerationError, generate_batch
from phase2_statistics.common import EmptyInputError
from phase2_statistics.name_analytics import NameFrequencyResult, compute_name_frequencies
from phase2_statistics.statistics_engine import StatisticsResult, compute_statistics
from phase3_output.prompts import RunParameters, collect_parameters
from phase3_output.renderer import export_json, print_json, render_names, render_statistics
from phase3_output.sections import InvalidSectionError, select_output, to_serializable

console = Console()


def run(
    params: RunParameters,
    reference_date: Optional[date] = None,
    seed: Optional[int] = None,
):
    """Generate the batch, run both engines, return the selected output objects."""
    reference_date = reference_date or date.today()
    employees = generate_batch(
        params.count, params.min_age, params.max_age,
        reference_date=reference_date, seed=seed,
    )

    name_analytics = compute_name_frequencies(employees)
    statistics = compute_statistics(employees, reference_date)

    return select_output(params.section, employees, statistics, name_analytics)


def _render(output) -> None:
    parts = output if isinstance(output, tuple) else (output,)
    for part in parts:
        if isinstance(part, StatisticsResult):
            render_statistics(part)
        elif isinstance(part, NameFrequencyResult):
            render_names(part)


def main(
    ask: Callable[[str], str] = console.input,
    export: Optional[bool] = None,
) -> bool:
    """Full interactive session. Returns False when the run failed."""
    console.print(Panel.fit(
        "[bold green]Employee Data Generator[/bold green]\n"
        "Random employees with general and name statistics",
        title="Employees",
    ))

    params = collect_parameters(ask)

    try:
        output = run(params)
    except (EmptyInputError, InvalidSectionError, GenerationError) as e:
        console.print(f"[bold red]FAILED: {e}[/bold red]")
        return False

    data = to_serializable(output)
    console.rule("Output")
    print_json(data)
    _render(output)

    if export is None:
        export = Confirm.ask("Save output to data/exports?", default=False)
    if export:
        path = export_json(data)
        console.print(f"\nResults saved to {path}")

    return True


def cli() -> None:
    success = main()
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    cli()
