"""
Figures for the co-occurrence matrix.
"""

from pathlib import Path

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
from loguru import logger


def plot_cooccurrence_heatmap(
    matrix: pd.DataFrame,
    output_path: Path,
    title: str = "Activity Co-occurrence",
) -> None:
    """Save a heatmap of the rescaled co-occurrence matrix (blank cells are undefined)."""
    n_activities = len(matrix)
    if n_activities == 0:
        logger.warning("No activities to plot in heatmap")
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    size = max(6, n_activities * 0.4)
    fig, ax = plt.subplots(figsize=(size + 2, size))

    sns.heatmap(
        matrix,
        cmap="viridis",
        vmin=0.0,
        vmax=1.0,
        square=True,
        annot=n_activities <= 15,
        fmt=".2f",
        ax=ax,
    )

    ax.set_title(f"{title}\n(rescaled to [0, 1] for contrast)")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    plt.close(fig)

    logger.info(f"Saved heatmap to {output_path}")
