"""
Base class for diary export loaders.

Provides a standardized interface for turning an exported diary file into
parsed DiaryRecord values. New export formats should inherit from this class.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from ..core.records import DiaryRecord, discover_activities


class BaseExportLoader(ABC):
    """
    Abstract base class for export loaders.

    Subclasses implement ``load_records``; everything downstream only sees
    DiaryRecord values, never the raw file.
    """

    def __init__(self, path: Path, config: Optional[Dict] = None):
        """
        Initialize the loader.

        Args:
            path: Path to the exported file
            config: Optional configuration dictionary
        """
        self.path = Path(path)
        self.config = config or {}
        self._validate_path()

    def _validate_path(self) -> None:
        """Verify the export file exists."""
        if not self.path.exists():
            raise FileNotFoundError(f"Export file not found: {self.path}")

    @abstractmethod
    def load_records(self) -> List[DiaryRecord]:
        """
        Parse the export.

        Returns:
            DiaryRecord values in file order. Malformed lines are skipped.
        """
        pass

    def load_activities(self) -> List[str]:
        """Activity vocabulary of the export, sorted by name."""
        return discover_activities(self.load_records())
