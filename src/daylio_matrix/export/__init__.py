"""
Writers for the flat matrix and the co-occurrence matrix.
"""

from .tables import gephi_name, write_flat_matrix, write_gephi_matrix
from .graph import cooccurrence_graph, get_graph_statistics, write_gexf

__all__ = [
    'gephi_name',
    'write_flat_matrix',
    'write_gephi_matrix',
    'cooccurrence_graph',
    'get_graph_statistics',
    'write_gexf',
]
