"""Age, median and rounding helpers shared by the statistics engines."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence, Union

from phase1_synthetic_data.generators.shared_state import age  # noqa: F401

Number = Union[int, float]


class EmptyInputError(ValueError):
    """A statistic that needs at least one data point was given none."""


def median(values: Sequence[Number]) -> Number:
    """Median of values; raises EmptyInputError for an empty sequence.

    Sorts a copy. Odd counts return the middle element itself, even counts
    the float mean of the two middle elements.
    """
    if len(values) == 0:
        raise EmptyInputError("median of an empty sequence is undefined")

    ordered = sorted(values)
    half = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[half]
    return (ordered[half - 1] + ordered[half]) / 2.0


def round_one_decimal(value: Number) -> float:
    """Round to one decimal place, halves away from zero (2.25 -> 2.3, -2.25 -> -2.3)."""
    return float(Decimal(str(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def mean(values: Sequence[Number]) -> float:
    if len(values) == 0:
        raise EmptyInputError("mean of an empty sequence is undefined")
    return sum(values) / len(values)
