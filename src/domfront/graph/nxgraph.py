"""
networkx graph backend.

NetworkXGraph adapts a networkx DiGraph or MultiDiGraph to the Graph
capability without copying it. The networkx graph keeps ownership of the
vertices and edges; entry and exit are designated by the adapter.
"""

import networkx as nx

from domfront.application.errors import GraphError, MissingExitError
from .interface import Edge, Graph


class NetworkXGraph(Graph):
    """
    Read-only Graph view over a directed networkx graph.

    Each parallel edge of a MultiDiGraph is reported once.

    Attributes:
        nxgraph: The wrapped networkx graph
    """

    def __init__(self, nxgraph, entry, exit=None):
        if not nxgraph.is_directed():
            raise GraphError("dominance requires a directed graph")
        if entry not in nxgraph:
            raise GraphError("entry %r is not in the graph" % (entry,))
        if exit is not None and exit not in nxgraph:
            raise GraphError("exit %r is not in the graph" % (exit,))

        self.nxgraph = nxgraph
        self._entry = entry
        self._exit = exit

    @classmethod
    def from_edges(cls, edges, entry, exit=None, multigraph=False):
        nxgraph = nx.MultiDiGraph() if multigraph else nx.DiGraph()
        nxgraph.add_node(entry)
        nxgraph.add_edges_from(edges)
        if exit is not None:
            nxgraph.add_node(exit)
        return cls(nxgraph, entry, exit)

    def vertices(self):
        return iter(self.nxgraph.nodes)

    def in_edges(self, v):
        for source, target in self.nxgraph.in_edges(v):
            yield Edge(source, target)

    def out_edges(self, v):
        for source, target in self.nxgraph.out_edges(v):
            yield Edge(source, target)

    def __contains__(self, v):
        return v in self.nxgraph

    def __len__(self):
        return self.nxgraph.number_of_nodes()

    @property
    def entry(self):
        return self._entry

    def has_exit(self):
        return self._exit is not None

    @property
    def exit(self):
        if self._exit is None:
            raise MissingExitError("graph has no exit vertex")
        return self._exit
