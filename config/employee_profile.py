"""Reference lists and bounds for synthetic employee generation."""

MALE = "male"
FEMALE = "female"

GENDER_DISTRIBUTION = {
    MALE: 0.5,
    FEMALE: 0.5,
}

FIRST_NAMES = {
    MALE: [
        "John", "James", "Robert", "Michael", "David",
        "William", "Richard", "Joseph", "Charles", "Thomas",
    ],
    FEMALE: [
        "Mary", "Patricia", "Jennifer", "Linda", "Elizabeth",
        "Barbara", "Susan", "Jessica", "Sarah", "Karen",
    ],
}

_SURNAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones",
    "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
]

SURNAMES = {
    MALE: list(_SURNAMES),
    FEMALE: list(_SURNAMES),
}

# Weekly hours
WORKLOADS = [10, 20, 30, 40]
PART_TIME_WORKLOADS = (10, 20, 30)
FULL_TIME_WORKLOAD = 40

# Age bounds accepted by the interactive prompts
MIN_ALLOWED_AGE = 18
MAX_ALLOWED_AGE = 100
