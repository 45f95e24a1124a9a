"""
Basic traversals over the Graph capability.

This module provides the depth-first search shared by the dominator tree
algorithms. Only vertices reachable from the start vertex are visited; the
graph itself is never modified.
"""


class DepthFirstSpanningTree(object):
    """
    Depth-first spanning tree of the vertices reachable from a start vertex.

    The search uses an explicit stack instead of recursion to avoid Python's
    recursion limit on long graphs. Based on the PADS (Python Algorithms and
    Data Structures) approach.

    All per-vertex arrays are indexed by the dense VertexIndex of the graph.

    Attributes
    ----------
    preorder : list of int
        Vertex indexes in the order they were first visited
    postorder : list of int
        Vertex indexes in the order their subtrees were finished
    dfnum : list of int
        Preorder number of each vertex, -1 if unreachable
    parent : list of int
        Spanning tree parent of each vertex, -1 for the start and for
        unreachable vertices
    """

    def __init__(self, graph, index, start):
        count = len(index)
        self.preorder = []
        self.postorder = []
        self.dfnum = [-1] * count
        self.parent = [-1] * count

        root = index[start]
        self._visit(root)

        stack = [(root, iter(graph.successors(start)))]
        while stack:
            node, children = stack[-1]
            for child in children:
                c = index[child]
                if self.dfnum[c] < 0:
                    self._visit(c)
                    self.parent[c] = node
                    stack.append((c, iter(graph.successors(child))))
                    break
            else:
                # All children processed, add to post-order
                self.postorder.append(node)
                stack.pop()

    def _visit(self, i):
        self.dfnum[i] = len(self.preorder)
        self.preorder.append(i)

    def reachable(self, i):
        return self.dfnum[i] >= 0

    def reversePostorder(self):
        return list(reversed(self.postorder))
