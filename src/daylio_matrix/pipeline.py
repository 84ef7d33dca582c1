"""
End-to-end derivation pass.

    records -> TimelineBuilder -> timelines -> DayIndex
                                        |-> MatrixFlattener     -> flat matrix
                                        |-> CooccurrenceEngine  -> co-occurrence matrix

The flattener and the engine only share the frozen timelines and the day
index; neither depends on the other's output.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import pandas as pd
from loguru import logger

from .core.cooccurrence import CooccurrenceEngine
from .core.day_index import DayIndex
from .core.flatten import MatrixFlattener
from .core.records import DiaryRecord, discover_activities
from .core.timeline import TimelineBuilder, TimelineSet
from .errors import ConfigurationMismatch, DomainMismatch


@dataclass
class PipelineResult:
    """Everything one derivation pass produces."""

    timelines: TimelineSet
    day_index: DayIndex
    flat: pd.DataFrame
    cooccurrence: pd.DataFrame
    engine: CooccurrenceEngine
    configuration_mismatches: List[ConfigurationMismatch] = field(default_factory=list)
    domain_mismatches: List[DomainMismatch] = field(default_factory=list)

    def summary(self) -> dict:
        return {
            "n_days": len(self.day_index),
            "n_activities": len(self.timelines.activities),
            "unknown_tags": len(self.configuration_mismatches),
            "unknown_moods": len(self.domain_mismatches),
            **self.engine.get_summary_stats(),
        }


def run_pipeline(
    records: Iterable[DiaryRecord],
    moods: Sequence[str],
    activities: Optional[Sequence[str]] = None,
    unknown_tag_policy: str = "abort",
    strict_moods: bool = False,
) -> PipelineResult:
    """
    Derive the flat matrix and the co-occurrence matrix from parsed records.

    Args:
        records: Parsed diary records
        moods: Ordered mood vocabulary
        activities: Known activities; discovered from the records if None
        unknown_tag_policy: "abort" or "skip" for tags outside ``activities``
        strict_moods: Raise DomainMismatch on moods outside the vocabulary

    Returns:
        PipelineResult
    """
    records = list(records)
    if activities is None:
        activities = discover_activities(records)
        logger.info(f"Discovered {len(activities)} activities from {len(records)} records")

    builder = TimelineBuilder(activities, unknown_tag_policy=unknown_tag_policy)
    timelines = builder.add_all(records).build()

    day_index = DayIndex.from_timelines(timelines)
    logger.info(f"Day index: {day_index!r}")

    flattener = MatrixFlattener(moods, strict=strict_moods)
    flat = flattener.flatten(timelines, day_index)

    engine = CooccurrenceEngine()
    cooccurrence = engine.compute(timelines, day_index)

    return PipelineResult(
        timelines=timelines,
        day_index=day_index,
        flat=flat,
        cooccurrence=cooccurrence,
        engine=engine,
        configuration_mismatches=list(builder.mismatches),
        domain_mismatches=list(flattener.mismatches),
    )
