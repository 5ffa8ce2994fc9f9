"""Employee record type and the shared state every generator writes into."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from config.settings import RANDOM_SEED

RECORD_COLUMNS = ["gender", "name", "surname", "birthdate", "workload"]


def parse_birthdate(value: date | datetime | str) -> date:
    """Accept a date, a datetime or an ISO-8601 string ("1990-05-21T00:00:00.000Z")."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def age(birthdate: date | datetime | str, reference_date: Optional[date] = None) -> int:
    """Whole years between birthdate and reference_date (default: today).

    One year is subtracted when the birthday has not yet come round in the
    reference year. A reference date before the birthdate gives a negative
    or meaningless result.
    """
    born = parse_birthdate(birthdate)
    today = reference_date or date.today()
    if isinstance(today, datetime):
        today = today.date()

    years = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        years -= 1
    return years


def format_birthdate(value: date) -> str:
    """ISO-8601 date-time at midnight UTC."""
    return f"{value.isoformat()}T00:00:00.000Z"


@dataclass(frozen=True)
class EmployeeRecord:
    gender: str
    first_name: str
    last_name: str
    birthdate: date
    workload: int

    def to_dict(self) -> dict:
        """Interchange form, as printed and exported."""
        return {
            "gender": self.gender,
            "name": self.first_name,
            "surname": self.last_name,
            "birthdate": format_birthdate(self.birthdate),
            "workload": self.workload,
        }

    @classmethod
    def from_dict(cls, data: dict) -> EmployeeRecord:
        return cls(
            gender=data["gender"],
            first_name=data["name"],
            last_name=data["surname"],
            birthdate=parse_birthdate(data["birthdate"]),
            workload=int(data["workload"]),
        )


def records_to_frame(records: Iterable[EmployeeRecord]) -> pd.DataFrame:
    """One row per record, in batch order."""
    rows = [
        {
            "gender": r.gender,
            "name": r.first_name,
            "surname": r.last_name,
            "birthdate": r.birthdate,
            "workload": r.workload,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


class SharedState:
    """Singleton holding the seeded RNG and the records generated in this run.

    Generators read the RNG from here and register their output so that
    downstream steps see one consistent batch.
    """

    _instance: Optional[SharedState] = None

    def __new__(cls) -> SharedState:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._initialized = True

        self.rng = np.random.default_rng(RANDOM_SEED)
        self.employees: list[EmployeeRecord] = []

    @classmethod
    def reset(cls, seed: Optional[int] = None) -> SharedState:
        """Reset the singleton (useful for testing). `seed` overrides RANDOM_SEED."""
        cls._instance = None
        state = cls()
        if seed is not None:
            state.rng = np.random.default_rng(seed)
        return state

    def register_employee(self, emp: EmployeeRecord) -> None:
        self.employees.append(emp)

    def batch(self) -> tuple[EmployeeRecord, ...]:
        """Immutable snapshot of the registered records, in generation order."""
        return tuple(self.employees)
