"""
Day Index

The shared time axis: every distinct day that appears in any timeline,
sorted ascending. Both the flat matrix rows and the co-occurrence windows
are expressed as positions on this axis.
"""

from datetime import date
from typing import Dict, Iterable, Iterator, Tuple

import numpy as np

from .timeline import AttributeTimeline


class DayIndex:
    """Sorted, duplicate-free sequence of observed days."""

    def __init__(self, days: Iterable[date]):
        self.days: Tuple[date, ...] = tuple(sorted(set(days)))
        self._positions: Dict[date, int] = {day: i for i, day in enumerate(self.days)}

    @classmethod
    def from_timelines(cls, timelines: Iterable[AttributeTimeline]) -> "DayIndex":
        """Union of the day keys of every timeline."""
        days = set()
        for timeline in timelines:
            days.update(timeline.entries)
        return cls(days)

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[date]:
        return iter(self.days)

    def __getitem__(self, i):
        return self.days[i]

    def __contains__(self, day: date) -> bool:
        return day in self._positions

    def __eq__(self, other) -> bool:
        if not isinstance(other, DayIndex):
            return NotImplemented
        return self.days == other.days

    def __repr__(self) -> str:
        if not self.days:
            return "DayIndex([])"
        return f"DayIndex({len(self.days)} days, {self.days[0]} .. {self.days[-1]})"

    def position(self, day: date) -> int:
        """Position of ``day`` on the axis. Raises KeyError for unknown days."""
        return self._positions[day]

    def presence(self, timeline: AttributeTimeline) -> np.ndarray:
        """Boolean vector over the axis, True where ``timeline`` has an entry."""
        mask = np.zeros(len(self.days), dtype=bool)
        if timeline.entries:
            mask[[self._positions[day] for day in timeline.entries]] = True
        return mask
