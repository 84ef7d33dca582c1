"""
CSV writers for the derived matrices.

- flat matrix: one row per day, dates written as ISO strings
- Gephi adjacency matrix: ';'-separated, node names stripped of anything
  but word characters, undefined cells written as 0
"""

import re
from pathlib import Path

import pandas as pd
from loguru import logger


def write_flat_matrix(frame: pd.DataFrame, path: Path, delimiter: str = ",") -> Path:
    """
    Write the flat daily matrix.

    Args:
        frame: Output of MatrixFlattener.flatten
        path: Destination CSV file
        delimiter: Field separator

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    out = frame.copy()
    out["date"] = [day.isoformat() for day in out["date"]]
    out.to_csv(path, index=False, sep=delimiter)

    logger.info(f"Saved flat matrix ({len(out)} days) to {path}")
    return path


def gephi_name(activity: str) -> str:
    """Strip characters Gephi's matrix importer chokes on."""
    return re.sub(r"[^\w]", "", activity)


def write_gephi_matrix(matrix: pd.DataFrame, path: Path) -> Path:
    """
    Write the co-occurrence matrix in Gephi's adjacency-matrix CSV format.

    Args:
        matrix: Square co-occurrence frame (NaN for undefined cells)
        path: Destination CSV file

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    names = [gephi_name(a) for a in matrix.index]
    if len(set(names)) != len(names):
        logger.warning("Some activity names collapse to the same Gephi node name")

    out = matrix.fillna(0.0)
    out.index = names
    out.columns = names
    out.to_csv(path, sep=";")

    logger.info(f"Saved Gephi matrix ({len(names)} nodes) to {path}")
    return path
