"""First-name frequency tables per employee slice, plus chart-ready label/value data.

Slices overlap: every record is in "all" and in its gender slice, and may
also fall in "femalePartTime" or "maleFullTime".

Tables are ordered by descending count. Names with equal counts keep the
order in which they first appear in the slice, so a fixed batch always gives
the same tables.
"""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from config.employee_profile import FEMALE, FULL_TIME_WORKLOAD, MALE, PART_TIME_WORKLOADS
from phase1_synthetic_data.generators.shared_state import EmployeeRecord

SLICES: dict[str, Callable[[EmployeeRecord], bool]] = {
    "all": lambda r: True,
    "female": lambda r: r.gender == FEMALE,
    "male": lambda r: r.gender == MALE,
    "femalePartTime": lambda r: r.gender == FEMALE and r.workload in PART_TIME_WORKLOADS,
    "maleFullTime": lambda r: r.gender == MALE and r.workload == FULL_TIME_WORKLOAD,
}


@dataclass(frozen=True)
class NameFrequencyResult:
    names: Mapping[str, Mapping[str, int]]
    chart_data: Mapping[str, tuple[Mapping[str, object], ...]]

    def __post_init__(self):
        # Read-only views, so a result cannot change after construction
        object.__setattr__(self, "names", MappingProxyType({
            slice_name: MappingProxyType(dict(table))
            for slice_name, table in self.names.items()
        }))
        object.__setattr__(self, "chart_data", MappingProxyType({
            slice_name: tuple(MappingProxyType(dict(point)) for point in points)
            for slice_name, points in self.chart_data.items()
        }))

    def to_dict(self) -> dict:
        return {
            "names": {slice_name: dict(table) for slice_name, table in self.names.items()},
            "chartData": {
                slice_name: [dict(point) for point in points]
                for slice_name, points in self.chart_data.items()
            },
        }


def most_common_names(records: Sequence[EmployeeRecord]) -> dict[str, int]:
    """{first_name: count}, highest count first, ties in first-seen order."""
    # Counter keeps insertion order and most_common() sorts stably
    counts = Counter(r.first_name for r in records)
    return dict(counts.most_common())


def chart_data(table: dict[str, int]) -> list[dict]:
    """Frequency table -> [{"label": name, "value": count}, ...] in table order."""
    return [{"label": name, "value": count} for name, count in table.items()]


def compute_name_frequencies(batch: Sequence[EmployeeRecord]) -> NameFrequencyResult:
    names = {
        slice_name: most_common_names([r for r in batch if keep(r)])
        for slice_name, keep in SLICES.items()
    }
    return NameFrequencyResult(
        names=names,
        chart_data={slice_name: chart_data(table) for slice_name, table in names.items()},
    )
