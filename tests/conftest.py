import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure project root is on sys.path before imports
ROOT = Path(__file__).parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phase1_synthetic_data.generators.shared_state import EmployeeRecord, SharedState
from tests.factories import make_record


@pytest.fixture
def reference_date() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def batch() -> tuple[EmployeeRecord, ...]:
    """Six employees aged 24, 30, 34, 40, 45 and 50 on 2024-03-15."""
    return (
        make_record("John", "male", 40, date(2000, 3, 15)),
        make_record("Mary", "female", 10, date(1994, 1, 1)),
        make_record("John", "male", 20, date(1989, 12, 31)),
        make_record("Linda", "female", 30, date(1983, 7, 4)),
        make_record("Mary", "female", 40, date(1978, 11, 30)),
        make_record("James", "male", 40, date(1973, 9, 9)),
    )


@pytest.fixture(autouse=True)
def fresh_state():
    SharedState.reset(seed=42)
    yield
    SharedState.reset()
