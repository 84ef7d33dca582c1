"""
Exceptions raised while deriving diary matrices.

Mismatches can either be raised or collected and reported, depending on the
policy the caller picks. Both kinds keep the offending value and the day it was
seen on so they can be logged or summarized later.
"""

from datetime import date
from typing import Optional


class DaylioMatrixError(Exception):
    """Base class for all package errors."""


class ConfigurationMismatch(DaylioMatrixError):
    """A tag was seen in the records that is not in the known-activity list."""

    def __init__(self, tag: str, day: Optional[date] = None, message: Optional[str] = None):
        self.tag = tag
        self.day = day
        if message is None:
            where = f" on {day.isoformat()}" if day is not None else ""
            message = f"Unknown activity tag {tag!r}{where}"
        super().__init__(message)


class DomainMismatch(DaylioMatrixError):
    """A recorded mood label is not part of the mood vocabulary."""

    def __init__(self, mood: Optional[str], day: date):
        self.mood = mood
        self.day = day
        if mood is None:
            message = f"No mood recorded on {day.isoformat()}"
        else:
            message = f"Mood {mood!r} on {day.isoformat()} is not in the mood vocabulary"
        super().__init__(message)
