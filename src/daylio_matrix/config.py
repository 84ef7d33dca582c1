"""
Configuration loading.

Settings live in a YAML file (see configs/default.yaml). Every key is
optional; missing keys fall back to the PipelineConfig defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .core.timeline import UNKNOWN_TAG_POLICIES

DEFAULT_MOODS = ["fugly", "awful", "meh", "good", "rad"]


def load_config(config_path: str = 'configs/default.yaml') -> Dict:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config YAML file

    Returns:
        Dictionary containing configuration
    """
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    return config or {}


@dataclass
class OutputNames:
    """File names written under the output directory."""

    flat_matrix: str = "flatmatrix.csv"
    gephi_matrix: str = "gephi-matrix.csv"
    graph: str = "cooccurrence.gexf"
    pairs: str = "cooccurrence_pairs.csv"
    heatmap: str = "cooccurrence_heatmap.png"


@dataclass
class PipelineConfig:
    """Settings for one derivation run."""

    moods: List[str] = field(default_factory=lambda: list(DEFAULT_MOODS))
    activities: Optional[List[str]] = None  # None: discover from the records
    unknown_tag_policy: str = "abort"
    strict_moods: bool = False
    delimiter: str = ","
    min_edge_weight: float = 0.0
    date_format: str = "mixed"
    dayfirst: bool = False
    outputs: OutputNames = field(default_factory=OutputNames)

    def __post_init__(self):
        if not self.moods:
            raise ValueError("Mood vocabulary is empty")
        if self.unknown_tag_policy not in UNKNOWN_TAG_POLICIES:
            raise ValueError(f"Unknown tag policy: {self.unknown_tag_policy}")

    @classmethod
    def from_dict(cls, config: Dict) -> "PipelineConfig":
        """Build a PipelineConfig from a loaded YAML mapping."""
        export = config.get('export', {}) or {}
        ingest = config.get('ingest', {}) or {}
        graph = config.get('graph', {}) or {}
        outputs = OutputNames(**(config.get('outputs', {}) or {}))

        return cls(
            moods=list(config.get('moods', DEFAULT_MOODS)),
            activities=config.get('activities'),
            unknown_tag_policy=config.get('unknown_tag_policy', 'abort'),
            strict_moods=bool(config.get('strict_moods', False)),
            delimiter=export.get('delimiter', ','),
            min_edge_weight=float(graph.get('min_weight', 0.0)),
            date_format=ingest.get('date_format', 'mixed'),
            dayfirst=bool(ingest.get('dayfirst', False)),
            outputs=outputs,
        )

    @classmethod
    def from_file(cls, config_path: Path) -> "PipelineConfig":
        return cls.from_dict(load_config(str(config_path)))
