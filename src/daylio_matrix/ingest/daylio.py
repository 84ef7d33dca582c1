"""
Daylio CSV Export Loader

Two export layouts are supported:

Legacy:
    year,date,weekday,time,mood,activities,note
    2021,January 5,Tuesday,8:30 pm,rad,"read | run",""

Current:
    full_date,date,weekday,time,mood,activities,note_title,note
    2021-01-05,January 5,Tuesday,20:30,rad,"read | run",,""

Activities are pipe-separated. Rows with an unparseable date or an empty
mood are skipped with a warning.
"""

from typing import List

import pandas as pd
from loguru import logger

from ..core.records import DiaryRecord
from .base import BaseExportLoader


class DaylioExportLoader(BaseExportLoader):
    """Load a Daylio CSV export into DiaryRecord values."""

    TAG_SEPARATOR = "|"

    def read_frame(self) -> pd.DataFrame:
        """Read the raw export as strings with normalized column names."""
        df = pd.read_csv(
            self.path,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
            skipinitialspace=True,
        )
        df.columns = [str(c).strip().lower() for c in df.columns]

        if "mood" not in df.columns:
            raise ValueError(f"No 'mood' column in {self.path.name}: {list(df.columns)}")

        logger.info(f"Loaded {self.path.name}: {len(df)} rows, columns {list(df.columns)}")
        return df

    def parse_dates(self, df: pd.DataFrame) -> pd.Series:
        """Parse the entry day of every row (NaT where unparseable)."""
        if "full_date" in df.columns:
            raw = df["full_date"].str.strip()
        elif "year" in df.columns and "date" in df.columns:
            raw = df["date"].str.strip() + " " + df["year"].str.strip()
        else:
            raise ValueError(
                f"Cannot find a date in {self.path.name}: need 'full_date' or 'year' + 'date'"
            )

        return pd.to_datetime(
            raw,
            errors="coerce",
            format=self.config.get("date_format", "mixed"),
            dayfirst=self.config.get("dayfirst", False),
        )

    @classmethod
    def split_tags(cls, value: str) -> frozenset:
        """Split a pipe-separated activity field into clean tags."""
        if not value:
            return frozenset()
        tags = (tag.strip() for tag in value.split(cls.TAG_SEPARATOR))
        return frozenset(tag for tag in tags if tag)

    def load_records(self) -> List[DiaryRecord]:
        df = self.read_frame()
        dates = self.parse_dates(df)
        activities = df["activities"] if "activities" in df.columns else pd.Series([""] * len(df))

        records = []
        n_skipped = 0
        # row 1 is the header
        for row, (when, mood, tags) in enumerate(zip(dates, df["mood"], activities), start=2):
            mood = mood.strip()
            if pd.isna(when):
                logger.warning(f"Line {row}: unparseable date, skipping")
                n_skipped += 1
                continue
            if not mood:
                logger.warning(f"Line {row}: empty mood, skipping")
                n_skipped += 1
                continue

            records.append(DiaryRecord(date=when.date(), mood=mood, tags=self.split_tags(tags)))

        logger.info(f"Parsed {len(records)} records ({n_skipped} skipped)")
        return records
