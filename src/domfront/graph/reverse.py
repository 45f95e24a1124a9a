"""
Reversed graph view.

Post-dominance is dominance on the reversed graph, with the exit playing
the role of the entry. ReversedGraph forwards every read to the original
graph with the edge direction swapped; it never copies or mutates the
original storage.
"""

from domfront.application.errors import MissingExitError
from .interface import Graph


class ReversedGraph(Graph):
    """
    View of a graph with every edge flipped and entry/exit swapped.

    Attributes:
        graph: The original graph
    """

    __slots__ = ("graph",)

    def __init__(self, graph):
        self.graph = graph

    def vertices(self):
        return self.graph.vertices()

    def in_edges(self, v):
        for e in self.graph.out_edges(v):
            yield e.reversed()

    def out_edges(self, v):
        for e in self.graph.in_edges(v):
            yield e.reversed()

    def __contains__(self, v):
        return v in self.graph

    def __len__(self):
        return len(self.graph)

    @property
    def entry(self):
        if not self.graph.has_exit():
            raise MissingExitError("reversed graph needs an exit to use as entry")
        return self.graph.exit

    def has_exit(self):
        # The original entry always exists.
        return True

    @property
    def exit(self):
        return self.graph.entry

    def reverse(self):
        return self.graph

    def __repr__(self):
        return "ReversedGraph(%r)" % (self.graph,)
