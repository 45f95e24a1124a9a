"""
domfront - dominance and post-dominance frontiers for control-flow graphs.

Typical use::

    from domfront import AdjacencyGraph, compute_dominance_frontiers

    g = AdjacencyGraph.from_edges(
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], entry="A", exit="D"
    )
    compute_dominance_frontiers(g)
    # {'A': [], 'B': ['D'], 'C': ['D'], 'D': []}
"""

from domfront.application.config import DominanceConfig
from domfront.application.errors import (
    ConfigError,
    DominanceError,
    GraphError,
    InternalError,
    InvalidEntryError,
    MissingExitError,
)
from domfront.graph import (
    AdjacencyGraph,
    Edge,
    Graph,
    NetworkXGraph,
    ReversedGraph,
    VertexIndex,
)
from domfront.analysis.dominance import (
    DominanceDumper,
    build_dominator_tree,
    build_post_dominator_tree,
    compute_dominance_frontiers,
    compute_dominance_frontiers_from_idoms,
    compute_post_dominance_frontiers,
)

__version__ = "0.1.0"

__all__ = [
    "DominanceConfig",
    "ConfigError",
    "DominanceError",
    "GraphError",
    "InternalError",
    "InvalidEntryError",
    "MissingExitError",
    "AdjacencyGraph",
    "Edge",
    "Graph",
    "NetworkXGraph",
    "ReversedGraph",
    "VertexIndex",
    "DominanceDumper",
    "build_dominator_tree",
    "build_post_dominator_tree",
    "compute_dominance_frontiers",
    "compute_dominance_frontiers_from_idoms",
    "compute_post_dominance_frontiers",
]
