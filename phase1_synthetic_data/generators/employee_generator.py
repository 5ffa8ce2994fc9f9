"""Employee record generator: gender, names, birthdate and workload per employee."""

from datetime import date
from typing import Optional

import numpy as np
from faker import Faker

from config.employee_profile import (
    FEMALE, FIRST_NAMES, GENDER_DISTRIBUTION, MALE, SURNAMES, WORKLOADS,
)
from config.settings import FAKER_LOCALE, NAME_SOURCE
from phase1_synthetic_data.generators.base_generator import BaseGenerator
from phase1_synthetic_data.generators.distributions import (
    birth_date_for_age_range, uniform_choice, weighted_choice,
)
from phase1_synthetic_data.generators.shared_state import (
    EmployeeRecord, SharedState, age, records_to_frame,
)


class EmployeeGenerator(BaseGenerator):
    name = "employees"

    def __init__(
        self,
        shared_state: SharedState,
        count: int,
        min_age: int,
        max_age: int,
        reference_date: Optional[date] = None,
        name_source: Optional[str] = None,
    ):
        super().__init__(shared_state)
        self.count = count
        self.min_age = min_age
        self.max_age = max_age
        self.reference_date = reference_date or date.today()
        self.name_source = (name_source or NAME_SOURCE).lower()
        self._fake: Optional[Faker] = None

    def generate(self) -> None:
        rng = self.state.rng

        if self.name_source == "faker":
            self._fake = Faker(FAKER_LOCALE)
            # Tie Faker to the shared RNG so a fixed seed reproduces names too
            self._fake.seed_instance(int(rng.integers(0, 2**31)))

        for _ in range(self.count):
            self.state.register_employee(self._create_employee(rng))

        self.register("employees", records_to_frame(self.state.employees))

    def _create_employee(self, rng: np.random.Generator) -> EmployeeRecord:
        gender = weighted_choice(rng, GENDER_DISTRIBUTION)[0]
        first_name, last_name = self._draw_names(rng, gender)
        birthdate = birth_date_for_age_range(
            rng, self.reference_date, self.min_age, self.max_age,
        )[0]
        workload = uniform_choice(rng, WORKLOADS)[0]

        return EmployeeRecord(
            gender=gender,
            first_name=first_name,
            last_name=last_name,
            birthdate=birthdate,
            workload=workload,
        )

    def _draw_names(self, rng: np.random.Generator, gender: str) -> tuple[str, str]:
        if self._fake is not None:
            if gender == MALE:
                return self._fake.first_name_male(), self._fake.last_name_male()
            return self._fake.first_name_female(), self._fake.last_name_female()

        first_name = uniform_choice(rng, FIRST_NAMES[gender])[0]
        last_name = uniform_choice(rng, SURNAMES[gender])[0]
        return first_name, last_name

    def validate(self) -> list[str]:
        # An empty batch is valid when nothing was requested
        errors = super().validate() if self.count else []

        df = self._dataframes.get("employees")
        if df is None:
            return errors + ["employees: nothing registered"]

        if len(df) != self.count:
            errors.append(f"Expected {self.count} employees, generated {len(df)}")

        bad_workloads = df[~df["workload"].isin(WORKLOADS)]
        if len(bad_workloads) > 0:
            errors.append(f"{len(bad_workloads)} employees with unknown workload")

        bad_genders = df[~df["gender"].isin([MALE, FEMALE])]
        if len(bad_genders) > 0:
            errors.append(f"{len(bad_genders)} employees with unknown gender")

        ages = df["birthdate"].map(lambda b: age(b, self.reference_date))
        out_of_range = ages[(ages < self.min_age) | (ages > self.max_age)]
        if len(out_of_range) > 0:
            errors.append(
                f"{len(out_of_range)} employees outside age range "
                f"{self.min_age}-{self.max_age}"
            )

        return errors

    def breakdown(self) -> dict[str, int]:
        df = self._dataframes.get("employees")
        if df is None:
            return {}
        counts = {g: int((df["gender"] == g).sum()) for g in (FEMALE, MALE)}
        for workload in WORKLOADS:
            counts[f"workload {workload}h"] = int((df["workload"] == workload).sum())
        return counts
