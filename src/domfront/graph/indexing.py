"""
Dense vertex indexing.

Array-based algorithms need each vertex mapped to an integer in 0..V-1.
VertexIndex builds that mapping once per analysis call, in the graph's
vertex order, so it can be shared by every step that needs array storage.
"""


class VertexIndex(object):
    """
    Bidirectional mapping between vertices and dense integer indexes.

    Examples
    --------
    >>> idx = VertexIndex(["A", "B"])
    >>> idx["B"], idx.vertex(0)
    (1, 'A')
    """

    __slots__ = "forward", "reverse"

    def __init__(self, vertices):
        """
        Parameters
        ----------
        vertices : iterable
            The vertices to index, usually a Graph (iterating a Graph yields
            its vertices)
        """
        self.forward = {}  # vertex -> index
        self.reverse = []  # index -> vertex
        for v in vertices:
            if v not in self.forward:
                self.forward[v] = len(self.reverse)
                self.reverse.append(v)

    def __getitem__(self, v):
        return self.forward[v]

    def __contains__(self, v):
        return v in self.forward

    def __len__(self):
        return len(self.reverse)

    def __iter__(self):
        return iter(self.reverse)

    def vertex(self, i):
        return self.reverse[i]
