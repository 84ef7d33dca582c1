"""
Derivation core: timelines, day axis, flat matrix and co-occurrence.
"""

from .records import DiaryRecord, discover_activities
from .timeline import (
    MOOD_ATTRIBUTE,
    AttributeTimeline,
    TimelineBuilder,
    TimelineSet,
    build_timelines,
)
from .day_index import DayIndex
from .flatten import UNKNOWN_MOOD_INDEX, MatrixFlattener
from .cooccurrence import CooccurrenceCell, CooccurrenceEngine

__all__ = [
    'DiaryRecord',
    'discover_activities',
    'MOOD_ATTRIBUTE',
    'AttributeTimeline',
    'TimelineBuilder',
    'TimelineSet',
    'build_timelines',
    'DayIndex',
    'UNKNOWN_MOOD_INDEX',
    'MatrixFlattener',
    'CooccurrenceCell',
    'CooccurrenceEngine',
]
