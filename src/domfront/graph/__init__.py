"""
Graph capability and backends for dominance analysis.

- interface.py: abstract Graph capability and the Edge type
- adjacency.py: adjacency-list multigraph backend
- nxgraph.py: adapter over networkx directed graphs
- reverse.py: direction-swapping view used for post-dominance
- indexing.py: dense vertex indexing for array-based algorithms
"""

from .interface import Edge, Graph
from .adjacency import AdjacencyGraph
from .nxgraph import NetworkXGraph
from .reverse import ReversedGraph
from .indexing import VertexIndex

__all__ = [
    "Edge",
    "Graph",
    "AdjacencyGraph",
    "NetworkXGraph",
    "ReversedGraph",
    "VertexIndex",
]
