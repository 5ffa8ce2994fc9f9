"""Interactive parameter collection: pure validation predicates plus a re-prompt loop."""

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from rich.console import Console

from config.employee_profile import MAX_ALLOWED_AGE, MIN_ALLOWED_AGE
from phase3_output.sections import SECTION_LABELS, Section

console = Console()

T = TypeVar("T")

SECTION_QUESTION = "\n".join(
    ["Which part of the output would you like to display?"]
    + [f"{section.value} => {label}" for section, label in SECTION_LABELS.items()]
    + ["Enter a number (1-4): "]
)


@dataclass(frozen=True)
class RunParameters:
    section: Section
    min_age: int
    max_age: int
    count: int


def parse_int(raw: str) -> Optional[int]:
    """Integer from user input, or None when the text is not a whole number."""
    try:
        return int(raw.strip())
    except (ValueError, AttributeError):
        return None


def parse_section_choice(raw: str) -> Optional[Section]:
    value = parse_int(raw)
    if value is None:
        return None
    try:
        return Section(value)
    except ValueError:
        return None


def is_valid_section(section: Optional[Section]) -> bool:
    return section is not None


def is_valid_min_age(value: Optional[int]) -> bool:
    return value is not None and MIN_ALLOWED_AGE <= value <= MAX_ALLOWED_AGE


def is_valid_max_age(value: Optional[int], min_age: int) -> bool:
    # Equal bounds are allowed: min_age == 100 must still leave a valid answer
    return value is not None and min_age <= value <= MAX_ALLOWED_AGE


def is_valid_count(value: Optional[int]) -> bool:
    return value is not None and value > 0


def ask_until_valid(
    ask: Callable[[str], str],
    question: str,
    parse: Callable[[str], Optional[T]],
    is_valid: Callable[[Optional[T]], bool],
    error: str,
) -> T:
    """Ask until the parsed answer passes is_valid; print error after each rejection."""
    while True:
        value = parse(ask(question))
        if is_valid(value):
            return value
        console.print(f"[red]{error}[/red]")


def collect_parameters(ask: Callable[[str], str] = console.input) -> RunParameters:
    """Section, minimum age, maximum age, then employee count."""
    section = ask_until_valid(
        ask, SECTION_QUESTION, parse_section_choice, is_valid_section,
        "Invalid selection.",
    )
    min_age = ask_until_valid(
        ask, f"Enter minimum employee age ({MIN_ALLOWED_AGE} to {MAX_ALLOWED_AGE}): ",
        parse_int, is_valid_min_age,
        f"Invalid age. Enter a number between {MIN_ALLOWED_AGE} and {MAX_ALLOWED_AGE}.",
    )
    max_age = ask_until_valid(
        ask, f"Enter maximum employee age ({min_age} to {MAX_ALLOWED_AGE}): ",
        parse_int, lambda v: is_valid_max_age(v, min_age),
        f"Invalid age. Enter a number from {min_age} up to {MAX_ALLOWED_AGE}.",
    )
    count = ask_until_valid(
        ask, "Enter the number of employees to generate: ",
        parse_int, is_valid_count,
        "Invalid count. Enter a positive number.",
    )
    return RunParameters(section=section, min_age=min_age, max_age=max_age, count=count)
