from datetime import date

import pytest

from phase2_statistics.common import EmptyInputError
from phase2_statistics.statistics_engine import (
    compute_statistics, sort_by_workload, workload_counts,
)
from tests.factories import make_record


def test_statistics_on_fixture_batch(batch, reference_date):
    stats = compute_statistics(batch, reference_date)

    assert stats.total == 6
    assert (stats.workload_10, stats.workload_20, stats.workload_30, stats.workload_40) == (1, 1, 1, 3)
    # ages: 24, 30, 34, 40, 45, 50
    assert stats.min_age == 24
    assert stats.max_age == 50
    assert stats.median_age == 37.0
    assert stats.average_age == 37.2
    assert stats.median_workload == 35.0
    # women: 10, 30, 40
    assert stats.average_women_workload == 26.7


def test_workload_histogram_sums_to_total(batch, reference_date):
    stats = compute_statistics(batch, reference_date)
    assert stats.workload_10 + stats.workload_20 + stats.workload_30 + stats.workload_40 == stats.total


def test_age_ordering_properties(batch, reference_date):
    stats = compute_statistics(batch, reference_date)
    assert stats.min_age <= stats.median_age <= stats.max_age
    assert stats.min_age <= stats.average_age <= stats.max_age


def test_empty_batch_raises(reference_date):
    with pytest.raises(EmptyInputError):
        compute_statistics((), reference_date)


def test_no_women_gives_zero_average():
    batch = (make_record("John", "male", 40), make_record("James", "male", 10))
    stats = compute_statistics(batch, date(2024, 1, 1))
    assert stats.average_women_workload == 0


def test_sorted_by_workload_is_stable():
    a = make_record("A", workload=40)
    b = make_record("B", workload=10)
    c = make_record("C", workload=40)

    result = sort_by_workload([a, b, c])

    assert [r.first_name for r in result] == ["B", "A", "C"]


def test_statistics_sorted_by_workload_keeps_equal_workloads_in_batch_order(reference_date):
    batch = (
        make_record("A", workload=40),
        make_record("B", workload=10),
        make_record("C", workload=40),
    )

    stats = compute_statistics(batch, reference_date)

    assert [(r.first_name, r.workload) for r in stats.sorted_by_workload] == [
        ("B", 10), ("A", 40), ("C", 40),
    ]
    assert [e["name"] for e in stats.to_dict()["sortedByWorkload"]] == ["B", "A", "C"]
    assert [r.first_name for r in batch] == ["A", "B", "C"]


def test_sorting_leaves_batch_untouched(batch, reference_date):
    original = list(batch)
    as_list = list(batch)
    compute_statistics(as_list, reference_date)
    assert as_list == original


def test_workload_counts_include_missing_levels():
    counts = workload_counts([make_record(workload=20), make_record(workload=20)])
    assert counts == {10: 0, 20: 2, 30: 0, 40: 0}


def test_statistics_are_idempotent(batch, reference_date):
    assert compute_statistics(batch, reference_date) == compute_statistics(batch, reference_date)


def test_single_employee(reference_date):
    stats = compute_statistics([make_record(workload=30, birthdate=date(2000, 3, 15))], reference_date)
    assert stats.median_age == stats.min_age == stats.max_age == 24
    assert stats.average_age == 24.0
    assert stats.median_workload == 30


def test_to_dict_uses_interchange_keys(batch, reference_date):
    data = compute_statistics(batch, reference_date).to_dict()

    assert list(data) == [
        "total", "workload10", "workload20", "workload30", "workload40",
        "averageAge", "minAge", "maxAge", "medianAge", "medianWorkload",
        "averageWomenWorkload", "sortedByWorkload",
    ]
    first = data["sortedByWorkload"][0]
    assert list(first) == ["gender", "birthdate", "name", "surname", "workload"]
    assert first == {
        "gender": "female",
        "birthdate": "1994-01-01T00:00:00.000Z",
        "name": "Mary",
        "surname": "Smith",
        "workload": 10,
    }
