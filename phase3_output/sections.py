"""Pick which part of a run's output to return, and make it JSON-ready."""

from enum import IntEnum
from typing import Sequence, Union

from phase1_synthetic_data.generators.shared_state import EmployeeRecord
from phase2_statistics.name_analytics import NameFrequencyResult
from phase2_statistics.statistics_engine import StatisticsResult


class Section(IntEnum):
    EMPLOYEES = 1
    STATISTICS = 2
    NAMES = 3
    ALL = 4


SECTION_LABELS = {
    Section.EMPLOYEES: "Employee list",
    Section.STATISTICS: "General employee statistics and sorted list",
    Section.NAMES: "Employee name statistics",
    Section.ALL: "All employee information",
}


class InvalidSectionError(ValueError):
    """Requested output section is not one of 1-4."""

    def __init__(self, section):
        self.section = section
        super().__init__(f"Unknown output section: {section!r} (expected 1-4)")


def parse_section(section: Union[int, str, Section]) -> Section:
    """Section member from an int, an enum member or the digit typed at the prompt."""
    if isinstance(section, bool):
        raise InvalidSectionError(section)
    try:
        if isinstance(section, str):
            # isdecimal rejects "²" and "①", which int() cannot parse
            text = section.strip()
            if not text.isdecimal():
                raise ValueError(section)
            return Section(int(text))
        return Section(section)
    except (ValueError, TypeError):
        raise InvalidSectionError(section) from None


def select_output(
    section: Union[int, str, Section],
    employees: Sequence[EmployeeRecord],
    statistics: StatisticsResult,
    name_analytics: NameFrequencyResult,
):
    """1 -> employees, 2 -> statistics, 3 -> name analytics, 4 -> (names, statistics)."""
    chosen = parse_section(section)
    if chosen is Section.EMPLOYEES:
        return list(employees)
    if chosen is Section.STATISTICS:
        return statistics
    if chosen is Section.NAMES:
        return name_analytics
    return name_analytics, statistics


def to_serializable(output):
    """Turn anything select_output returns into plain lists/dicts/scalars."""
    if isinstance(output, (StatisticsResult, NameFrequencyResult, EmployeeRecord)):
        return output.to_dict()
    if isinstance(output, (list, tuple)):
        return [to_serializable(item) for item in output]
    return output
