"""
Abstract graph capability used by the dominance analyses.

The dominator tree builder and the frontier computer only depend on the
read operations defined here, never on a concrete graph type. Concrete
backends live in adjacency.py and nxgraph.py; reverse.py provides the
direction-swapping view used for post-dominance.

There is no in-band "null vertex": analyses report a missing dominator as
None, so None can never be a vertex.
"""

import abc
from collections import namedtuple
from typing import Hashable, Iterable, Iterator


class Edge(namedtuple("Edge", ["source", "target"])):
    """
    A directed edge. Parallel edges are distinct Edge values in the
    iterators even though they compare equal.
    """

    __slots__ = ()

    def reversed(self):
        return Edge(self.target, self.source)


class Graph(abc.ABC):
    """
    Read-only directed multigraph with a designated entry and an optional
    designated exit.

    Implementations must enumerate vertices and edges in a stable order so
    that analyses are deterministic. The graph must not be mutated while an
    analysis is running on it.
    """

    @abc.abstractmethod
    def vertices(self) -> Iterable[Hashable]:
        """All vertices, in a stable order."""

    @abc.abstractmethod
    def in_edges(self, v) -> Iterable[Edge]:
        """Edges whose target is v."""

    @abc.abstractmethod
    def out_edges(self, v) -> Iterable[Edge]:
        """Edges whose source is v."""

    @abc.abstractmethod
    def __contains__(self, v) -> bool:
        pass

    @property
    @abc.abstractmethod
    def entry(self):
        """The designated entry vertex."""

    @abc.abstractmethod
    def has_exit(self) -> bool:
        """True if the graph has a designated exit vertex."""

    @property
    @abc.abstractmethod
    def exit(self):
        """
        The designated exit vertex.

        Raises:
            MissingExitError: If has_exit() is False
        """

    def __len__(self):
        return sum(1 for _ in self.vertices())

    def __iter__(self) -> Iterator:
        return iter(self.vertices())

    def predecessors(self, v):
        return [e.source for e in self.in_edges(v)]

    def successors(self, v):
        return [e.target for e in self.out_edges(v)]

    def edges(self):
        for v in self.vertices():
            for e in self.out_edges(v):
                yield e

    def reverse(self):
        """A view of this graph with every edge flipped and entry/exit swapped."""
        from domfront.graph.reverse import ReversedGraph

        return ReversedGraph(self)
