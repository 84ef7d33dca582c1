"""
Attribute Timelines

A timeline is the sparse day-by-day record of a single attribute: either an
activity tag (value is always the empty string, only presence matters) or the
reserved "mood" attribute (value is the raw mood label).

Timelines are populated by a TimelineBuilder while the record stream is
consumed and then frozen. Each frozen timeline caches its earliest day so the
pairwise co-occurrence loop never has to scan for it.
"""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Literal, Mapping, Optional, Tuple

from loguru import logger

from ..errors import ConfigurationMismatch
from .records import DiaryRecord

MOOD_ATTRIBUTE = "mood"

UnknownTagPolicy = Literal["abort", "skip"]
UNKNOWN_TAG_POLICIES = ("abort", "skip")


@dataclass(frozen=True)
class AttributeTimeline:
    """Frozen sparse mapping from day to value for one attribute."""

    name: str
    entries: Mapping[date, str] = field(default_factory=dict)
    first_date: Optional[date] = None

    @classmethod
    def freeze(cls, name: str, entries: Dict[date, str]) -> "AttributeTimeline":
        """Snapshot builder entries into an immutable timeline."""
        snapshot = dict(entries)
        first = min(snapshot) if snapshot else None
        return cls(name=name, entries=MappingProxyType(snapshot), first_date=first)

    def __contains__(self, day: date) -> bool:
        return day in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, day: date) -> Optional[str]:
        return self.entries.get(day)

    @property
    def dates(self) -> List[date]:
        return sorted(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(frozen=True)
class TimelineSet:
    """All timelines of one run: every known activity plus mood."""

    activities: Tuple[str, ...]
    mood: AttributeTimeline
    by_activity: Mapping[str, AttributeTimeline]

    def activity(self, name: str) -> AttributeTimeline:
        return self.by_activity[name]

    def __iter__(self) -> Iterator[AttributeTimeline]:
        for name in self.activities:
            yield self.by_activity[name]
        yield self.mood

    def __len__(self) -> int:
        return len(self.activities) + 1


class TimelineBuilder:
    """
    Populate attribute timelines from a record stream.

    Every known activity gets a timeline up front, even if it never occurs.
    Writes are "add if absent": the first value seen for a given day wins,
    so duplicate records for the same day only count once.

    Unknown tags are handled according to ``unknown_tag_policy``:
    - "abort": raise ConfigurationMismatch on the first unknown tag
    - "skip": log it, keep it in ``mismatches`` and drop the tag
    """

    def __init__(self, activities: Iterable[str], unknown_tag_policy: UnknownTagPolicy = "abort"):
        """
        Initialize the builder.

        Args:
            activities: Ordered, duplicate-free known activity names
            unknown_tag_policy: What to do with tags outside ``activities``
        """
        if unknown_tag_policy not in UNKNOWN_TAG_POLICIES:
            raise ValueError(f"Unknown tag policy: {unknown_tag_policy}")

        self.activities: Tuple[str, ...] = tuple(activities)
        if len(set(self.activities)) != len(self.activities):
            raise ValueError("Activity names must be unique")
        if MOOD_ATTRIBUTE in self.activities:
            raise ConfigurationMismatch(
                MOOD_ATTRIBUTE,
                message=f"Activity name {MOOD_ATTRIBUTE!r} is reserved for the mood timeline",
            )

        self.unknown_tag_policy = unknown_tag_policy
        self.mismatches: List[ConfigurationMismatch] = []
        self.n_records = 0

        self._activity_entries: Dict[str, Dict[date, str]] = {name: {} for name in self.activities}
        self._mood_entries: Dict[date, str] = {}

    def add(self, record: DiaryRecord) -> None:
        """Fold one record into the timelines."""
        for tag in sorted(record.tags):
            entries = self._activity_entries.get(tag)
            if entries is None:
                self._unknown_tag(tag, record.date)
                continue
            entries.setdefault(record.date, "")

        self._mood_entries.setdefault(record.date, record.mood)
        self.n_records += 1

    def add_all(self, records: Iterable[DiaryRecord]) -> "TimelineBuilder":
        for record in records:
            self.add(record)
        return self

    def _unknown_tag(self, tag: str, day: date) -> None:
        mismatch = ConfigurationMismatch(tag, day)
        if self.unknown_tag_policy == "abort":
            raise mismatch
        logger.warning(f"{mismatch}; skipping tag")
        self.mismatches.append(mismatch)

    def build(self) -> TimelineSet:
        """Freeze the collected entries into a TimelineSet."""
        by_activity = {
            name: AttributeTimeline.freeze(name, self._activity_entries[name])
            for name in self.activities
        }
        mood = AttributeTimeline.freeze(MOOD_ATTRIBUTE, self._mood_entries)

        n_unused = sum(1 for t in by_activity.values() if t.is_empty)
        logger.info(
            f"Built {len(by_activity) + 1} timelines from {self.n_records} records "
            f"({len(mood)} mood days, {n_unused} activities never used)"
        )
        if self.mismatches:
            logger.warning(f"Skipped {len(self.mismatches)} unknown tag occurrences")

        return TimelineSet(
            activities=self.activities,
            mood=mood,
            by_activity=MappingProxyType(by_activity),
        )


def build_timelines(
    records: Iterable[DiaryRecord],
    activities: Iterable[str],
    unknown_tag_policy: UnknownTagPolicy = "abort",
) -> TimelineSet:
    """Shortcut for building timelines in one call."""
    return TimelineBuilder(activities, unknown_tag_policy).add_all(records).build()
