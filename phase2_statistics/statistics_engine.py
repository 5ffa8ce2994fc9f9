"""General employee statistics: headcount, workload histogram, ages, medians."""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

from config.employee_profile import FEMALE, WORKLOADS
from phase1_synthetic_data.generators.shared_state import EmployeeRecord, records_to_frame
from phase2_statistics.common import age, mean, median, round_one_decimal

Number = Union[int, float]


@dataclass(frozen=True)
class StatisticsResult:
    total: int
    workload_10: int
    workload_20: int
    workload_30: int
    workload_40: int
    average_age: float
    min_age: int
    max_age: int
    median_age: Number
    median_workload: Number
    average_women_workload: Number
    sorted_by_workload: tuple[EmployeeRecord, ...]

    def to_dict(self) -> dict:
        """camelCase interchange form; sortedByWorkload entries keep birthdate second."""
        return {
            "total": self.total,
            "workload10": self.workload_10,
            "workload20": self.workload_20,
            "workload30": self.workload_30,
            "workload40": self.workload_40,
            "averageAge": self.average_age,
            "minAge": self.min_age,
            "maxAge": self.max_age,
            "medianAge": self.median_age,
            "medianWorkload": self.median_workload,
            "averageWomenWorkload": self.average_women_workload,
            "sortedByWorkload": [_sorted_entry(r) for r in self.sorted_by_workload],
        }


def _sorted_entry(record: EmployeeRecord) -> dict:
    data = record.to_dict()
    return {key: data[key] for key in ("gender", "birthdate", "name", "surname", "workload")}


def workload_counts(batch: Sequence[EmployeeRecord]) -> dict[int, int]:
    """Count employees at each known workload level (10, 20, 30, 40)."""
    df = records_to_frame(batch)
    counts = df["workload"].value_counts().reindex(WORKLOADS, fill_value=0)
    return {int(level): int(n) for level, n in counts.items()}


def average_women_workload(batch: Sequence[EmployeeRecord]) -> Number:
    """Mean workload of female employees, one decimal; 0 when there are none."""
    workloads = [r.workload for r in batch if r.gender == FEMALE]
    if not workloads:
        return 0
    return round_one_decimal(mean(workloads))


def sort_by_workload(batch: Sequence[EmployeeRecord]) -> tuple[EmployeeRecord, ...]:
    """Ascending workload; equal workloads keep their batch order."""
    df = records_to_frame(batch)
    order = df.sort_values("workload", kind="stable").index
    return tuple(batch[int(i)] for i in order)


def compute_statistics(
    batch: Sequence[EmployeeRecord],
    reference_date: Optional[date] = None,
) -> StatisticsResult:
    """Aggregate statistics over a batch, ages taken at reference_date (default today).

    Raises EmptyInputError for an empty batch. The batch itself is not
    reordered.
    """
    reference_date = reference_date or date.today()
    ages = [age(r.birthdate, reference_date) for r in batch]

    median_age = median(ages)
    median_workload = median([r.workload for r in batch])
    counts = workload_counts(batch)

    return StatisticsResult(
        total=len(batch),
        workload_10=counts[10],
        workload_20=counts[20],
        workload_30=counts[30],
        workload_40=counts[40],
        average_age=round_one_decimal(mean(ages)),
        min_age=min(ages),
        max_age=max(ages),
        median_age=median_age,
        median_workload=median_workload,
        average_women_workload=average_women_workload(batch),
        sorted_by_workload=sort_by_workload(batch),
    )
