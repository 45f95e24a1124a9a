"""
Dominance and post-dominance frontier construction.

**Definitions:**

- A node u dominates v if all paths from entry to v pass through u.
- A node u strictly dominates v if u dominates v and u != v.
- The immediate dominator (idom) of v is the unique node that strictly
  dominates v but does not strictly dominate any other strict dominator of v.
- The dominance frontier of a node n is the set of nodes that are not
  strictly dominated by n but have a predecessor dominated by n.

Post-dominators and post-dominance frontiers are the dual notions, computed
as dominators and dominance frontiers of the reversed graph from its exit.

**Frontier Algorithm:**

The iterative formulation of Cooper, Harvey and Kennedy is used:
- For each node n and each in-edge (p, n)
- Walk up the dominator tree from p until reaching idom(n) or n itself
- Add n to the dominance frontier of each node on this path

Because the walk stops as soon as it reaches n, a node is never placed in
its own frontier, self-loops included. Edges from unreachable nodes are
ignored: unreachable nodes neither contribute nor receive frontier entries.

**Results:**

Immediate-dominator maps cover every vertex (None for the entry and for
unreachable vertices). Frontier maps map a node to a duplicate-free list in
order of first discovery; every vertex is a key unless the config asks to
prune empty frontiers.
"""

import logging
from typing import Dict, Hashable, List, Optional

from domfront.application.context import makeContext
from domfront.application.errors import InternalError, InvalidEntryError
from domfront.graph.indexing import VertexIndex
from domfront.util.graphalgorithim import dominator
from . import dump

LOG = logging.getLogger(__name__)

IDomMap = Dict[Hashable, Optional[Hashable]]
FrontierMap = Dict[Hashable, List[Hashable]]


class DominanceFrontierBuilder(object):
    """
    Builds the immediate dominators and dominance frontiers of one graph.

    A builder is created per analysis call and owns all scratch state of
    that call.

    Attributes:
        graph: The graph being analysed
        entry: Entry vertex of the analysis
        context: AnalysisContext with config and console
        index: Dense VertexIndex of the graph, shared by all steps
        idoms: Immediate-dominator map, filled by build_idoms()
        frontiers: Frontier map, filled by build_frontiers()
    """

    def __init__(self, graph, entry, context):
        if entry not in graph:
            raise InvalidEntryError(entry)

        self.graph = graph
        self.entry = entry
        self.context = context
        self.index = VertexIndex(graph)
        self.idoms = None
        self.frontiers = None

    @property
    def config(self):
        return self.context.config

    def build_idoms(self) -> IDomMap:
        with self.context.console.scope("dominator tree"):
            self.idoms = dominator.findIDoms(
                self.graph, self.entry, self.config.algorithm, self.index
            )
        return self.idoms

    def build_frontiers(self) -> FrontierMap:
        if self.idoms is None:
            self.build_idoms()

        with self.context.console.scope("dominance frontier"):
            self.frontiers = walkFrontiers(
                self.graph, self.entry, self.idoms, self.config.prune_empty
            )

        if LOG.isEnabledFor(logging.DEBUG):
            for line in dump.format_frontiers(self.frontiers):
                LOG.debug(line)

        return self.frontiers

    def construct(self) -> FrontierMap:
        """
        Run the whole pipeline: immediate dominators, then frontiers.
        """
        self.build_idoms()
        return self.build_frontiers()


def walkFrontiers(graph, entry, idoms, prune_empty=False):
    """
    Compute dominance frontiers from an immediate-dominator map.

    Args:
        graph: The graph the idoms were computed on
        entry: The entry the idoms were computed from
        idoms: Immediate-dominator map covering every vertex
        prune_empty: If True, leave nodes with an empty frontier out

    Returns:
        FrontierMap for the graph
    """
    frontiers = {v: [] for v in graph.vertices()}
    members = {v: set() for v in frontiers}

    for n in graph.vertices():
        idom_n = idoms[n]

        # Unreachable nodes receive no frontier entries
        if idom_n is None and n != entry:
            continue

        for e in graph.in_edges(n):
            runner = e.source

            # Unreachable predecessors contribute none
            if idoms[runner] is None and runner != entry:
                continue

            steps = 0
            while runner is not None and runner != idom_n and runner != n:
                if n not in members[runner]:
                    members[runner].add(n)
                    frontiers[runner].append(n)
                runner = idoms[runner]

                steps += 1
                if steps > len(frontiers):
                    raise InternalError(
                        "dominator chain from %r does not reach the entry" % (e.source,)
                    )

    if prune_empty:
        frontiers = {v: df for v, df in frontiers.items() if df}

    return frontiers


def build_dominator_tree(graph, entry, config=None) -> IDomMap:
    """
    Compute the immediate dominator of every vertex of a graph.

    Args:
        graph: Graph to analyse
        entry: Entry vertex, must belong to the graph
        config: DominanceConfig, mapping of options, or AnalysisContext

    Returns:
        Mapping from every vertex to its immediate dominator, or None for the
        entry and for vertices unreachable from it

    Raises:
        InvalidEntryError: If entry is not a vertex of the graph
    """
    builder = DominanceFrontierBuilder(graph, entry, makeContext(config))
    return builder.build_idoms()


def compute_dominance_frontiers(graph, entry=None, config=None) -> FrontierMap:
    """
    Compute the dominance frontier of every vertex of a graph.

    Args:
        graph: Graph to analyse
        entry: Entry vertex, defaults to graph.entry
        config: DominanceConfig, mapping of options, or AnalysisContext

    Returns:
        Mapping from node to the duplicate-free list of its frontier nodes,
        in order of first discovery

    Raises:
        InvalidEntryError: If entry is not a vertex of the graph
    """
    if entry is None:
        entry = graph.entry

    context = makeContext(config)
    LOG.debug("Dominance Frontiers")
    with context.console.scope("dominance"):
        return DominanceFrontierBuilder(graph, entry, context).construct()


def compute_dominance_frontiers_from_idoms(graph, idoms, entry=None, config=None) -> FrontierMap:
    """
    Compute dominance frontiers for callers that already hold the
    immediate-dominator map of the graph.

    Raises:
        InvalidEntryError: If entry is not a vertex of the graph
    """
    if entry is None:
        entry = graph.entry

    context = makeContext(config)
    builder = DominanceFrontierBuilder(graph, entry, context)
    builder.idoms = idoms
    return builder.build_frontiers()


def build_post_dominator_tree(graph, config=None) -> IDomMap:
    """
    Compute the immediate post-dominator of every vertex of a graph.

    Returns an empty map if the graph has no exit.
    """
    if not graph.has_exit():
        LOG.debug("graph has no exit, skipping post-dominator tree")
        return {}

    reversed_graph = graph.reverse()
    return build_dominator_tree(reversed_graph, reversed_graph.entry, config)


def compute_post_dominance_frontiers(graph, config=None) -> FrontierMap:
    """
    Compute the post-dominance frontier of every vertex of a graph.

    This is exactly the dominance frontier computation applied to the
    reversed graph, starting from the original exit.

    Returns an empty map if the graph has no exit: post-dominance is not
    defined without a unique exit.
    """
    if not graph.has_exit():
        LOG.debug("graph has no exit, skipping post-dominance frontiers")
        return {}

    reversed_graph = graph.reverse()
    context = makeContext(config)
    LOG.debug("Post-Dominance Frontiers")
    with context.console.scope("post-dominance"):
        return DominanceFrontierBuilder(reversed_graph, reversed_graph.entry, context).construct()
