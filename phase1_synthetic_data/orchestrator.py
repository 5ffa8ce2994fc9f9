"""Orchestrator: resets the shared state, runs the employee generator, returns the batch."""

import sys
from datetime import date
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.panel import Panel

from config.settings import SAVE_RAW_DATA
from phase1_synthetic_data.generators.employee_generator import EmployeeGenerator
from phase1_synthetic_data.generators.shared_state import EmployeeRecord, SharedState

console = Console()


class GenerationError(RuntimeError):
    """The generator produced records that failed validation."""


def generate_batch(
    count: int,
    min_age: int,
    max_age: int,
    reference_date: Optional[date] = None,
    seed: Optional[int] = None,
    save: Optional[bool] = None,
) -> tuple[EmployeeRecord, ...]:
    """Generate `count` employees aged min_age..max_age at reference_date."""
    # Fresh singleton per run so batches never accumulate
    state = SharedState.reset(seed)

    generator = EmployeeGenerator(state, count, min_age, max_age, reference_date=reference_date)
    if not generator.run(save=SAVE_RAW_DATA if save is None else save):
        raise GenerationError(f"{generator.name} generator failed validation")

    return state.batch()


if __name__ == "__main__":
    console.print(Panel.fit(
        "[bold green]Synthetic Employee Generation[/bold green]\n"
        "Generating 50 employees aged 18-65",
        title="Employee Data Generator",
    ))
    try:
        batch = generate_batch(50, 18, 65, save=True)
    except GenerationError as e:
        console.print(f"[bold red]FAILED: {e}[/bold red]")
        sys.exit(1)
    console.print(f"[green]Generated {len(batch)} employees[/green]")
