"""
Co-occurrence graph export for graph visualization tools.
"""

from pathlib import Path

import networkx as nx
import numpy as np
import pandas as pd
from loguru import logger


def cooccurrence_graph(matrix: pd.DataFrame, min_weight: float = 0.0) -> nx.Graph:
    """
    Build an undirected activity graph from the co-occurrence matrix.

    Args:
        matrix: Square co-occurrence frame (NaN for undefined cells)
        min_weight: Only cells strictly above this value become edges

    Returns:
        Graph with one node per activity and ``weight`` on each edge
    """
    G = nx.Graph()
    names = list(matrix.index)
    G.add_nodes_from((name, {"label": name}) for name in names)

    for i, a in enumerate(names):
        for b in names[i + 1:]:
            weight = matrix.at[a, b]
            if np.isnan(weight) or weight <= min_weight:
                continue
            G.add_edge(a, b, weight=float(weight))

    logger.info(f"Co-occurrence graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G


def get_graph_statistics(G: nx.Graph) -> dict:
    """Get graph statistics."""
    stats = {
        'num_nodes': G.number_of_nodes(),
        'num_edges': G.number_of_edges(),
        'density': nx.density(G) if G.number_of_nodes() > 1 else 0.0,
    }
    if G.number_of_nodes() > 0:
        degrees = [d for n, d in G.degree()]
        stats['avg_degree'] = float(np.mean(degrees))
        stats['max_degree'] = int(np.max(degrees))
        stats['avg_clustering'] = nx.average_clustering(G, weight='weight')
    return stats


def write_gexf(G: nx.Graph, path: Path) -> Path:
    """Write the graph as GEXF (Gephi's native format)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    nx.write_gexf(G, path)
    logger.info(f"Saved graph to {path}")
    return path
