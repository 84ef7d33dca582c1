"""
Flat Daily Matrix

Turns the sparse timelines into one fixed-width row per observed day:

    date, mood, <one bit per mood level>, <one bit per activity>

The ``mood`` column holds the position of the day's mood in the mood
vocabulary. Labels outside the vocabulary get UNKNOWN_MOOD_INDEX (-1) and
are reported as DomainMismatch, they are never folded into position 0.
"""

from typing import Iterable, List, Optional, Sequence

import pandas as pd
from loguru import logger

from ..errors import ConfigurationMismatch, DomainMismatch
from .day_index import DayIndex
from .timeline import TimelineSet

UNKNOWN_MOOD_INDEX = -1


class MatrixFlattener:
    """Flatten timelines into a dense day x attribute frame."""

    def __init__(
        self,
        moods: Sequence[str],
        activities: Optional[Iterable[str]] = None,
        strict: bool = False,
    ):
        """
        Initialize the flattener.

        Args:
            moods: Ordered mood vocabulary (e.g. worst to best)
            activities: Activity columns, in order. Defaults to the
                activities of the timelines being flattened.
            strict: Raise DomainMismatch on unknown moods instead of
                reporting them and writing the sentinel index
        """
        self.moods = tuple(moods)
        if not self.moods:
            raise ValueError("Mood vocabulary is empty")
        if len(set(self.moods)) != len(self.moods):
            raise ValueError(f"Mood vocabulary has duplicate labels: {list(self.moods)}")

        self.activities = tuple(activities) if activities is not None else None
        self.strict = strict
        self.mismatches: List[DomainMismatch] = []
        self._mood_positions = {mood: i for i, mood in enumerate(self.moods)}

    def mood_index(self, mood: Optional[str]) -> int:
        """Vocabulary position of ``mood``, or UNKNOWN_MOOD_INDEX."""
        if mood is None:
            return UNKNOWN_MOOD_INDEX
        return self._mood_positions.get(mood, UNKNOWN_MOOD_INDEX)

    def columns(self, activities: Sequence[str]) -> List[str]:
        """Header of the flat matrix. Every column name must be unique."""
        columns = ["date", "mood", *self.moods, *activities]
        seen = set()
        for name in columns:
            if name in seen:
                raise ConfigurationMismatch(
                    name,
                    message=f"Column name {name!r} is used more than once in the flat matrix header",
                )
            seen.add(name)
        return columns

    def flatten(self, timelines: TimelineSet, day_index: DayIndex) -> pd.DataFrame:
        """
        Build the flat matrix.

        Args:
            timelines: Frozen timelines for the run
            day_index: Shared day axis

        Returns:
            DataFrame with one row per day in day_index order
        """
        activities = self.activities if self.activities is not None else timelines.activities
        missing = [name for name in activities if name not in timelines.by_activity]
        if missing:
            raise ConfigurationMismatch(
                missing[0],
                message=f"No timeline for activity columns {missing}",
            )
        columns = self.columns(activities)
        activity_timelines = [timelines.activity(name) for name in activities]
        self.mismatches = []

        rows = []
        for day in day_index:
            mood = timelines.mood.get(day)
            index = self.mood_index(mood)
            if index == UNKNOWN_MOOD_INDEX:
                self._report(DomainMismatch(mood, day))

            mood_bits = [int(level == mood) for level in self.moods]
            activity_bits = [int(day in timeline) for timeline in activity_timelines]
            rows.append([day, index, *mood_bits, *activity_bits])

        frame = pd.DataFrame(rows, columns=columns)
        logger.info(
            f"Flattened {len(frame)} days x {len(self.moods)} moods x {len(activities)} activities"
        )
        if self.mismatches:
            logger.warning(f"{len(self.mismatches)} days have a mood outside the vocabulary")
        return frame

    def _report(self, mismatch: DomainMismatch) -> None:
        if self.strict:
            raise mismatch
        logger.warning(str(mismatch))
        self.mismatches.append(mismatch)
