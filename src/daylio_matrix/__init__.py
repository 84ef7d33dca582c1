"""
daylio-matrix: daily mood/activity matrices and activity co-occurrence
graphs from Daylio diary exports.
"""

from .errors import ConfigurationMismatch, DaylioMatrixError, DomainMismatch
from .core import (
    AttributeTimeline,
    CooccurrenceEngine,
    DayIndex,
    DiaryRecord,
    MatrixFlattener,
    TimelineBuilder,
    TimelineSet,
    UNKNOWN_MOOD_INDEX,
    discover_activities,
)
from .pipeline import PipelineResult, run_pipeline

__version__ = "0.1.0"

__all__ = [
    'ConfigurationMismatch',
    'DaylioMatrixError',
    'DomainMismatch',
    'AttributeTimeline',
    'CooccurrenceEngine',
    'DayIndex',
    'DiaryRecord',
    'MatrixFlattener',
    'TimelineBuilder',
    'TimelineSet',
    'UNKNOWN_MOOD_INDEX',
    'discover_activities',
    'PipelineResult',
    'run_pipeline',
]
