"""Random draw helpers for synthetic employee generation."""

from datetime import date, timedelta

import numpy as np


def weighted_choice(rng: np.random.Generator, options: dict[str, float], size: int = 1) -> list[str]:
    """Pick from weighted options. options = {"male": 0.5, "female": 0.5}"""
    keys = list(options.keys())
    weights = np.array(list(options.values()))
    weights = weights / weights.sum()  # normalize
    indices = rng.choice(len(keys), size=size, p=weights)
    return [keys[i] for i in indices]


def uniform_choice(rng: np.random.Generator, options: list, size: int = 1) -> list:
    """Pick uniformly from a list, keeping the Python type of each option."""
    indices = rng.integers(0, len(options), size=size)
    return [options[i] for i in indices]


def years_before(reference: date, years: int) -> date:
    """Same calendar day `years` earlier. Feb 29 falls back to Feb 28."""
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


def random_date_between(rng: np.random.Generator, start: date, end: date,
                        size: int = 1) -> list[date]:
    """Generate random dates uniformly between start and end, both inclusive."""
    delta_days = (end - start).days
    if delta_days <= 0:
        return [start] * size
    offsets = rng.integers(0, delta_days + 1, size=size)
    return [start + timedelta(days=int(d)) for d in offsets]


def birth_date_for_age_range(rng: np.random.Generator, reference_date: date,
                             min_age: int, max_age: int, size: int = 1) -> list[date]:
    """Birth dates whose age at reference_date lies in [min_age, max_age].

    The youngest possible person turned min_age today; the oldest turns
    max_age + 1 tomorrow.
    """
    latest = years_before(reference_date, min_age)
    earliest = years_before(reference_date, max_age + 1) + timedelta(days=1)
    return random_date_between(rng, earliest, latest, size=size)
