"""
Parsed diary records and activity vocabulary discovery.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, Iterable, List


@dataclass(frozen=True)
class DiaryRecord:
    """One parsed diary entry: the day, its mood label and its activity tags."""

    date: date
    mood: str
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # accept any iterable of tags but always store a frozenset
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))


def discover_activities(records: Iterable[DiaryRecord]) -> List[str]:
    """
    Collect the activity vocabulary from a record stream.

    Tags are returned once each, sorted by name, so the vocabulary (and every
    column and matrix axis derived from it) does not depend on record order.

    Args:
        records: Parsed diary records

    Returns:
        Sorted, duplicate-free list of activity names
    """
    tags = set()
    for record in records:
        tags.update(record.tags)
    return sorted(tags)
