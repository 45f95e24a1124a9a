"""
Adjacency-list graph backend.

AdjacencyGraph keeps, for every vertex, the list of its outgoing and of its
incoming edges. Vertex order is insertion order, and parallel edges and
self-loops are kept as given, so the graph behaves as a multigraph.
"""

from domfront.application.errors import GraphError, MissingExitError
from .interface import Edge, Graph


class AdjacencyGraph(Graph):
    """
    Mutable directed multigraph stored as adjacency lists.

    Examples
    --------
    >>> g = AdjacencyGraph.from_edges([("A", "B"), ("B", "C")], entry="A", exit="C")
    >>> g.successors("A")
    ['B']
    """

    def __init__(self, entry=None, exit=None):
        self._out = {}
        self._in = {}
        self._entry = None
        self._exit = None

        if entry is not None:
            self.set_entry(entry)
        if exit is not None:
            self.set_exit(exit)

    @classmethod
    def from_edges(cls, edges, entry, exit=None, vertices=()):
        """
        Build a graph from an iterable of (source, target) pairs.

        Parameters
        ----------
        edges : iterable
            Pairs (source, target); repeated pairs become parallel edges
        entry : hashable
            The entry vertex (added if missing)
        exit : hashable, optional
            The exit vertex (added if missing)
        vertices : iterable, optional
            Extra vertices, added first so isolated vertices keep their place

        Returns
        -------
        AdjacencyGraph
        """
        g = cls()
        g.add_vertex(entry)
        for v in vertices:
            g.add_vertex(v)
        for source, target in edges:
            g.add_edge(source, target)
        g.set_entry(entry)
        if exit is not None:
            g.set_exit(exit)
        return g

    def add_vertex(self, v):
        if v is None:
            raise GraphError("None cannot be used as a vertex")
        if v not in self._out:
            self._out[v] = []
            self._in[v] = []

    def add_edge(self, source, target):
        self.add_vertex(source)
        self.add_vertex(target)
        e = Edge(source, target)
        self._out[source].append(e)
        self._in[target].append(e)
        return e

    def set_entry(self, v):
        self.add_vertex(v)
        self._entry = v

    def set_exit(self, v):
        self.add_vertex(v)
        self._exit = v

    def vertices(self):
        return iter(self._out)

    def in_edges(self, v):
        return iter(self._in[v])

    def out_edges(self, v):
        return iter(self._out[v])

    def __contains__(self, v):
        return v in self._out

    def __len__(self):
        return len(self._out)

    @property
    def entry(self):
        if self._entry is None:
            raise GraphError("graph has no entry vertex")
        return self._entry

    def has_exit(self):
        return self._exit is not None

    @property
    def exit(self):
        if self._exit is None:
            raise MissingExitError("graph has no exit vertex")
        return self._exit

    def __repr__(self):
        return "AdjacencyGraph(%d vertices, entry=%r, exit=%r)" % (
            len(self),
            self._entry,
            self._exit,
        )
