"""
Dominance analysis: immediate dominators, dominance frontiers and their
post-dominance duals.

**Module Structure:**
- construction.py: dominator tree and frontier algorithms over a Graph
- dump.py: diagnostic summaries and text/DOT/JSON dumps
"""

from .construction import (
    DominanceFrontierBuilder,
    build_dominator_tree,
    build_post_dominator_tree,
    compute_dominance_frontiers,
    compute_dominance_frontiers_from_idoms,
    compute_post_dominance_frontiers,
)
from .dump import (
    DominanceDumper,
    dump_dominance,
    dump_dominance_to_directory,
    format_frontiers,
    format_idoms,
)

__all__ = [
    "DominanceFrontierBuilder",
    "build_dominator_tree",
    "build_post_dominator_tree",
    "compute_dominance_frontiers",
    "compute_dominance_frontiers_from_idoms",
    "compute_post_dominance_frontiers",
    "DominanceDumper",
    "dump_dominance",
    "dump_dominance_to_directory",
    "format_frontiers",
    "format_idoms",
]
