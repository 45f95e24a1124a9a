"""
Dominator tree computation algorithms.

This module provides algorithms for computing immediate dominators in
directed graphs. A node d dominates a node n if every path from the entry
point to n must pass through d. The immediate dominator (idom) of a node n
is the unique strict dominator of n that is dominated by all other strict
dominators of n.

Two algorithms are provided:
1. LengauerTarjan: semidominators over a depth-first spanning tree with
   path compression (the default)
2. iterativeIDoms: Cooper-Harvey-Kennedy fixed-point iteration over reverse
   post-order

Both work on dense vertex indexes (see domfront.graph.indexing) and only
consider vertices reachable from the entry. findIDoms maps the result back to
graph vertices; unreachable vertices and the entry map to None.
"""

import logging

from domfront.application.errors import InternalError
from domfront.graph.indexing import VertexIndex
from .basic import DepthFirstSpanningTree

LOG = logging.getLogger(__name__)

LENGAUER_TARJAN = "lengauer-tarjan"
ITERATIVE = "iterative"

ALGORITHMS = (LENGAUER_TARJAN, ITERATIVE)

NONE = -1


def intersect(doms, b1, b2):
    """
    Find the intersection (common dominator) of two nodes in a dominator tree.

    Uses the "finger" algorithm: advances both nodes up their dominator chains
    until they meet at their common ancestor (least common ancestor in the
    dominator tree).

    Parameters
    ----------
    doms : list
        Array where doms[i] is the immediate dominator of node i (in reverse
        post-order numbering). Nodes are numbered such that dominators always
        have smaller numbers than their dominated nodes.
    b1 : int
        First node (in reverse post-order numbering)
    b2 : int
        Second node (in reverse post-order numbering)

    Returns
    -------
    int
        The common dominator of b1 and b2 (the node where the two paths meet)
    """
    finger1 = b1
    finger2 = b2
    while finger1 != finger2:
        # Advance finger1 up the dominator chain until it's <= finger2
        while finger1 > finger2:
            finger1 = doms[finger1]

        # Advance finger2 up the dominator chain until it's <= finger1
        while finger2 > finger1:
            finger2 = doms[finger2]
    return finger1


def iterativeIDoms(graph, index, dfs):
    """
    Compute immediate dominators using fixed-point iteration.

    This algorithm uses the classic iterative data-flow approach:
    1. Number reachable nodes in reverse post-order
    2. Iteratively refine dominator information until convergence
    3. For each node, find the intersection of all its predecessors' dominators

    Parameters
    ----------
    graph : Graph
        The graph being analysed
    index : VertexIndex
        Dense index of the graph's vertices
    dfs : DepthFirstSpanningTree
        Depth-first search of the graph from the entry

    Returns
    -------
    list of int
        idom[i] is the index of the immediate dominator of vertex i, or -1 for
        the entry and for unreachable vertices
    """
    order = dfs.reversePostorder()

    # vertex index -> reverse post-order number
    forward = [NONE] * len(index)
    for i, node in enumerate(order):
        forward[node] = i

    # Build predecessor lists in reverse post-order space
    pred = [[] for _ in order]
    for n, node in enumerate(order):
        for p in graph.predecessors(index.vertex(node)):
            i = forward[index[p]]

            # Unreachable predecessors and self-cycles do not constrain dominance
            if i == NONE or i == n:
                continue
            pred[n].append(i)

    count = len(order)
    doms = [None] * count

    # The head is its own dominator while iterating
    doms[0] = 0

    changed = True
    while changed:
        changed = False
        for node in range(1, count):
            # Find an initial value for the immediate dominator
            if doms[node] is None:
                # Start with the predecessor with smallest number
                new_idom = min(pred[node])
                assert new_idom < node  # Property of reverse post-order
            else:
                new_idom = doms[node]

            # Refine: immediate dominator must dominate all predecessors
            for p in pred[node]:
                if doms[p] is not None:
                    new_idom = intersect(doms, new_idom, p)

            if doms[node] != new_idom:
                doms[node] = new_idom
                changed = True

    # Map solution back to vertex indexes
    idom = [NONE] * len(index)
    for node in range(1, count):
        idom[order[node]] = order[doms[node]]
    return idom


class LengauerTarjan(object):
    """
    The Lengauer-Tarjan algorithm for calculating dominators.

    All scratch arrays are indexed by depth-first number, so vertex i of the
    spanning tree is dfs.preorder[i]. The ancestor forest is compressed on
    every eval, which gives O(E log V) running time.

    Algorithm as can be found on page 448 of Appel, "Modern Compiler
    Implementation".
    """

    def __init__(self, graph, index, dfs):
        self.graph = graph
        self.index = index
        self.dfs = dfs

        count = len(dfs.preorder)
        self.semi = list(range(count))
        self.ancestor = [NONE] * count
        self.best = list(range(count))
        self.idom = [NONE] * count
        self.samedom = [NONE] * count

    def predecessors(self, w):
        """Reachable predecessors of spanning tree vertex w, as dfs numbers."""
        dfnum = self.dfs.dfnum
        vertex = self.index.vertex(self.dfs.preorder[w])
        for p in self.graph.predecessors(vertex):
            v = dfnum[self.index[p]]
            if v != NONE:
                yield v

    def compute(self):
        """
        Compute immediate dominators.

        Returns
        -------
        list of int
            idom[i] is the index of the immediate dominator of vertex i, or
            -1 for the entry and for unreachable vertices
        """
        dfs = self.dfs
        count = len(dfs.preorder)
        parent = [NONE] * count
        for w in range(1, count):
            parent[w] = dfs.dfnum[dfs.parent[dfs.preorder[w]]]

        bucket = [[] for _ in range(count)]

        # Loop over nodes in reversed dfs order, skipping the root
        for w in range(count - 1, 0, -1):
            p = parent[w]

            # Determine semi dominator for w
            s = p
            for v in self.predecessors(w):
                if v <= w:
                    candidate = v
                else:
                    candidate = self.semi[self.eval(v)]
                if candidate < s:
                    s = candidate
            self.semi[w] = s
            bucket[s].append(w)

            self.link(p, w)

            # Now that the path from p to w is linked, resolve p's bucket
            for v in bucket[p]:
                y = self.eval(v)
                if self.semi[y] == self.semi[v]:
                    self.idom[v] = p
                else:
                    self.samedom[v] = y
            bucket[p] = []

        # Deferred idoms, in dfs order so samedom targets are final
        for w in range(1, count):
            if self.samedom[w] != NONE:
                self.idom[w] = self.idom[self.samedom[w]]

        idom = [NONE] * len(self.index)
        for w in range(1, count):
            idom[dfs.preorder[w]] = dfs.preorder[self.idom[w]]
        return idom

    def link(self, p, w):
        """Mark p as the parent of w in the ancestor forest."""
        self.ancestor[w] = p
        self.best[w] = w

    def eval(self, v):
        """
        Ancestor of v (v included, root excluded) with the lowest semi.

        Compresses the ancestor path of v. Uses an explicit stack instead of
        recursion since paths can be as long as the graph.
        """
        ancestor = self.ancestor
        best = self.best
        semi = self.semi

        path = []
        u = v
        while ancestor[ancestor[u]] != NONE:
            path.append(u)
            u = ancestor[u]

        while path:
            x = path.pop()
            a = ancestor[x]
            if semi[best[a]] < semi[best[x]]:
                best[x] = best[a]
            ancestor[x] = ancestor[a]

        return best[v]


def findIDoms(graph, entry, algorithm=LENGAUER_TARJAN, index=None):
    """
    Find the immediate dominator of every vertex of a graph.

    Parameters
    ----------
    graph : Graph
        The graph to analyse
    entry : hashable
        The entry vertex, must belong to the graph
    algorithm : str
        LENGAUER_TARJAN or ITERATIVE
    index : VertexIndex, optional
        Dense index of the graph's vertices, built if not given

    Returns
    -------
    dict
        Mapping from every vertex (in graph order) to its immediate dominator,
        or None for the entry and for vertices unreachable from the entry
    """
    if index is None:
        index = VertexIndex(graph)

    dfs = DepthFirstSpanningTree(graph, index, entry)

    if algorithm == LENGAUER_TARJAN:
        idom = LengauerTarjan(graph, index, dfs).compute()
    elif algorithm == ITERATIVE:
        idom = iterativeIDoms(graph, index, dfs)
    else:
        raise InternalError("unknown dominator algorithm %r" % (algorithm,))

    idoms = {}
    for i, v in enumerate(index):
        d = idom[i]
        idoms[v] = index.vertex(d) if d != NONE else None

    if LOG.isEnabledFor(logging.DEBUG):
        for v, d in idoms.items():
            if d is not None:
                LOG.debug("%s is the immediate dominator of %s", d, v)
            else:
                LOG.debug("%s is not dominated by anyone!", v)

    return idoms
