import pytest

from phase2_statistics.name_analytics import (
    SLICES, NameFrequencyResult, chart_data, compute_name_frequencies, most_common_names,
)
from tests.factories import make_record


def test_basic_frequencies():
    batch = [
        make_record("Jan", "male"),
        make_record("Jan", "male"),
        make_record("Eva", "female"),
    ]

    result = compute_name_frequencies(batch)

    assert list(result.names["all"].items()) == [("Jan", 2), ("Eva", 1)]
    assert result.names["male"] == {"Jan": 2}
    assert result.names["female"] == {"Eva": 1}
    assert list(result.chart_data["all"]) == [
        {"label": "Jan", "value": 2},
        {"label": "Eva", "value": 1},
    ]


def test_ties_keep_first_seen_order():
    batch = [make_record(n) for n in ["Zoe", "Adam", "Adam", "Zoe", "Max"]]

    table = most_common_names(batch)

    assert list(table.items()) == [("Zoe", 2), ("Adam", 2), ("Max", 1)]


def test_higher_count_moves_ahead_of_earlier_name():
    batch = [make_record(n) for n in ["Ann", "Bob", "Bob"]]
    assert list(most_common_names(batch)) == ["Bob", "Ann"]


def test_part_time_and_full_time_slices(batch):
    result = compute_name_frequencies(batch)

    # women part-time: Mary(10), Linda(30); Mary(40) is full-time
    assert result.names["femalePartTime"] == {"Mary": 1, "Linda": 1}
    # men full-time: John(40), James(40); John(20) is part-time
    assert result.names["maleFullTime"] == {"John": 1, "James": 1}
    assert result.names["all"] == {"John": 2, "Mary": 2, "Linda": 1, "James": 1}
    assert list(result.names["all"]) == ["John", "Mary", "Linda", "James"]


def test_empty_slices_are_not_errors():
    result = compute_name_frequencies([make_record("Jan", "male", workload=10)])

    assert result.names["female"] == {}
    assert result.chart_data["female"] == ()
    assert result.names["maleFullTime"] == {}
    assert result.chart_data["maleFullTime"] == ()


def test_empty_batch():
    result = compute_name_frequencies([])
    assert all(table == {} for table in result.names.values())
    assert set(result.names) == set(SLICES)


def test_chart_data_preserves_order():
    assert chart_data({"B": 3, "A": 1}) == [
        {"label": "B", "value": 3},
        {"label": "A", "value": 1},
    ]


def test_idempotent(batch):
    assert compute_name_frequencies(batch) == compute_name_frequencies(batch)


def test_to_dict_shape(batch):
    data = compute_name_frequencies(batch).to_dict()

    assert set(data) == {"names", "chartData"}
    assert list(data["names"]) == ["all", "female", "male", "femalePartTime", "maleFullTime"]
    assert data["chartData"]["male"][0] == {"label": "John", "value": 2}


def test_result_cannot_be_changed_after_construction(batch):
    result = compute_name_frequencies(batch)

    with pytest.raises(TypeError):
        result.names["all"]["John"] = 99
    with pytest.raises(TypeError):
        result.names["extra"] = {}
    with pytest.raises(TypeError):
        result.chart_data["all"][0]["value"] = 99
    with pytest.raises(AttributeError):
        result.chart_data["all"].append({"label": "X", "value": 1})

    assert result == compute_name_frequencies(batch)


def test_result_copies_caller_tables():
    table = {"Jan": 2}
    points = [{"label": "Jan", "value": 2}]
    result = NameFrequencyResult(names={"all": table}, chart_data={"all": points})

    table["Jan"] = 5
    points[0]["value"] = 5

    assert result.names["all"] == {"Jan": 2}
    assert result.chart_data["all"][0]["value"] == 2
