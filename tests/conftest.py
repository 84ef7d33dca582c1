import random
from datetime import date, timedelta

import pytest

from daylio_matrix.core import DiaryRecord

MOODS = ["fugly", "awful", "meh", "good", "rad"]


@pytest.fixture
def moods():
    return list(MOODS)


@pytest.fixture
def example_records():
    return [
        DiaryRecord(date(2021, 1, 1), "good", {"run"}),
        DiaryRecord(date(2021, 1, 2), "meh", {"run", "read"}),
        DiaryRecord(date(2021, 1, 5), "rad", {"read"}),
    ]


@pytest.fixture
def diary():
    """Sixty days of synthetic entries with activities adopted at different times."""
    rng = random.Random(7)
    start = date(2022, 3, 1)
    activities = ["run", "read", "cook", "gaming", "friends"]
    adopted = {"run": 0, "read": 0, "cook": 10, "gaming": 25, "friends": 40}

    records = []
    for offset in range(60):
        if rng.random() < 0.15:
            continue  # day without an entry
        tags = {a for a in activities if offset >= adopted[a] and rng.random() < 0.5}
        records.append(DiaryRecord(start + timedelta(days=offset), rng.choice(MOODS), tags))
    return records, activities
