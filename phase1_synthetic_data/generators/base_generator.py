"""Abstract base class for the record generators."""

from abc import ABC, abstractmethod
import pandas as pd
from rich.console import Console
from rich.table import Table

from config.settings import RAW_DATA_DIR

console = Console()


class BaseGenerator(ABC):
    """Base class for generators that fill the shared state with records.

    Subclasses build their records in generate(), register them as named
    DataFrames, and may add checks to validate() and rows to breakdown().
    """

    name: str = "base"

    def __init__(self, shared_state: "SharedState"):
        self.state = shared_state
        self._dataframes: dict[str, pd.DataFrame] = {}

    @abstractmethod
    def generate(self) -> None:
        """Draw the records and populate self._dataframes."""
        ...

    def validate(self) -> list[str]:
        """Returns list of error messages (empty = pass)."""
        errors = []
        for name, df in self._dataframes.items():
            if df.empty:
                errors.append(f"{self.name}/{name}: no rows generated")
        return errors

    def register(self, name: str, df: pd.DataFrame) -> None:
        self._dataframes[name] = df

    def frame(self, name: str) -> pd.DataFrame:
        return self._dataframes[name]

    def save(self) -> None:
        """Write every registered frame to data/raw/{generator_name}/{frame}.csv."""
        output_dir = RAW_DATA_DIR / self.name
        output_dir.mkdir(parents=True, exist_ok=True)

        for name, df in self._dataframes.items():
            df.to_csv(output_dir / f"{name}.csv", index=False)

    def breakdown(self) -> dict[str, int]:
        """Extra label -> count rows for the summary table."""
        return {}

    def summary(self) -> None:
        table = Table(title=f"{self.name} generator summary")
        table.add_column("Item", style="cyan")
        table.add_column("Count", justify="right", style="green")

        for name, df in self._dataframes.items():
            table.add_row(f"{name} rows", str(len(df)))
        for label, count in self.breakdown().items():
            table.add_row(label, str(count))

        console.print(table)

    def run(self, save: bool = False) -> bool:
        """generate -> validate -> save (optional) -> summary. False on validation errors."""
        console.print(f"\n[bold blue]Generating {self.name}...[/bold blue]")
        self.generate()

        errors = self.validate()
        if errors:
            for err in errors:
                console.print(f"  [red]ERROR: {err}[/red]")
            return False

        if save:
            self.save()
        self.summary()
        return True
