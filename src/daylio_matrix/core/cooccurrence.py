"""
Activity co-occurrence matrix.

For every ordered pair of distinct activities (a, b):

1. Each activity is "in play" from the first day it was logged.
2. The comparison window starts at the later of the two first days and runs
   to the last observed day, so an activity that was adopted late is not
   penalized for the days before it existed.
3. rate(a, b) = days in the window where both were logged / window length

Pairs where either activity never occurs, or whose window is empty, are
undefined and left out of the matrix. The diagonal is always undefined.

After all pairs are computed every rate is divided by the largest one. This
only spreads the values over [0, 1] for graph tooling contrast. It is not a
statistical normalization and the values are not correlation coefficients.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from loguru import logger

from .day_index import DayIndex
from .timeline import TimelineSet


@dataclass
class CooccurrenceCell:
    """Co-occurrence statistic for one ordered activity pair."""

    activity_a: str
    activity_b: str
    start_index: int
    window_length: int
    matches: int
    rate: float
    value: float = 0.0  # rate after rescaling by the matrix maximum

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "activity_a": self.activity_a,
            "activity_b": self.activity_b,
            "start_index": self.start_index,
            "window_length": self.window_length,
            "matches": self.matches,
            "rate": round(self.rate, 6),
            "value": round(self.value, 6),
        }


class CooccurrenceEngine:
    """Compute the rescaled pairwise co-occurrence matrix."""

    def __init__(self):
        self.cells: List[CooccurrenceCell] = []
        self.highest: float = 0.0

    def first_indices(self, timelines: TimelineSet, day_index: DayIndex) -> Dict[str, int]:
        """Day-axis position of each activity's first entry. Unused activities are left out."""
        return {
            name: day_index.position(timelines.activity(name).first_date)
            for name in timelines.activities
            if timelines.activity(name).first_date is not None
        }

    def compute(self, timelines: TimelineSet, day_index: DayIndex) -> pd.DataFrame:
        """
        Compute co-occurrence for all activity pairs.

        Args:
            timelines: Frozen timelines for the run
            day_index: Shared day axis

        Returns:
            Square DataFrame indexed by activity on both axes. Undefined
            cells (diagonal, unused activities, empty windows) are NaN.
        """
        names = list(timelines.activities)
        n_days = len(day_index)

        first = self.first_indices(timelines, day_index)
        presence = {name: day_index.presence(timelines.activity(name)) for name in first}

        logger.info(
            f"Computing co-occurrence for {len(names)} activities "
            f"({len(first)} in use) over {n_days} days"
        )

        self.cells = []
        for a in names:
            if a not in first:
                continue
            for b in names:
                if b == a or b not in first:
                    continue
                cell = self._pair(a, b, first, presence, n_days)
                if cell is not None:
                    self.cells.append(cell)

        self.highest = max((cell.rate for cell in self.cells), default=0.0)
        for cell in self.cells:
            cell.value = cell.rate / self.highest if self.highest > 0 else 0.0

        if self.cells and self.highest == 0:
            logger.warning("No activity pair ever co-occurred; matrix is all zeros")

        matrix = pd.DataFrame(np.nan, index=names, columns=names, dtype=float)
        for cell in self.cells:
            matrix.at[cell.activity_a, cell.activity_b] = cell.value

        logger.info(f"Computed {len(self.cells)} defined pairs (max rate {self.highest:.4f})")
        return matrix

    def _pair(
        self,
        a: str,
        b: str,
        first: Dict[str, int],
        presence: Dict[str, np.ndarray],
        n_days: int,
    ) -> Optional[CooccurrenceCell]:
        start = max(first[a], first[b])
        window_length = n_days - start
        if window_length <= 0:
            logger.debug(f"Skipping {a}/{b}: empty window from day {start}")
            return None

        both = presence[a][start:] & presence[b][start:]
        matches = int(np.count_nonzero(both))
        return CooccurrenceCell(
            activity_a=a,
            activity_b=b,
            start_index=start,
            window_length=window_length,
            matches=matches,
            rate=matches / window_length,
        )

    def to_frame(self) -> pd.DataFrame:
        """Long-format table of every defined cell."""
        columns = ["activity_a", "activity_b", "start_index", "window_length", "matches", "rate", "value"]
        return pd.DataFrame([cell.to_dict() for cell in self.cells], columns=columns)

    def get_summary_stats(self) -> dict:
        """Summary of the last computed matrix."""
        if not self.cells:
            return {"n_pairs": 0}

        values = np.array([cell.value for cell in self.cells])
        return {
            "n_pairs": len(self.cells),
            "n_nonzero": int(np.count_nonzero(values)),
            "max_rate": self.highest,
            "value_mean": float(values.mean()),
            "value_std": float(values.std()),
        }
