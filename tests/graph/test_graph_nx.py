import unittest

import networkx as nx

from domfront import (
    AdjacencyGraph,
    Edge,
    GraphError,
    MissingExitError,
    NetworkXGraph,
    compute_dominance_frontiers,
)


class TestNetworkXGraph(unittest.TestCase):
    def testDiGraph(self):
        G = nx.DiGraph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
        g = NetworkXGraph(G, entry="A", exit="D")

        self.assertEqual(list(g.vertices()), ["A", "B", "C", "D"])
        self.assertEqual(len(g), 4)
        self.assertEqual(list(g.in_edges("D")), [Edge("B", "D"), Edge("C", "D")])
        self.assertEqual(g.successors("A"), ["B", "C"])
        self.assertEqual(g.entry, "A")
        self.assertEqual(g.exit, "D")

    def testNoCopy(self):
        G = nx.DiGraph([("A", "B")])
        g = NetworkXGraph(G, entry="A")
        G.add_edge("B", "C")
        self.assertIn("C", g)
        self.assertIs(g.nxgraph, G)

    def testMultiDiGraphParallelEdges(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B")
        G.add_edge("A", "B")
        g = NetworkXGraph(G, entry="A")
        self.assertEqual(g.predecessors("B"), ["A", "A"])

    def testRejectsUndirected(self):
        with self.assertRaises(GraphError):
            NetworkXGraph(nx.Graph([(1, 2)]), entry=1)

    def testRejectsUnknownEntryAndExit(self):
        G = nx.DiGraph([(1, 2)])
        with self.assertRaises(GraphError):
            NetworkXGraph(G, entry=3)
        with self.assertRaises(GraphError):
            NetworkXGraph(G, entry=1, exit=3)

    def testNoExit(self):
        g = NetworkXGraph.from_edges([(1, 2)], entry=1)
        self.assertFalse(g.has_exit())
        with self.assertRaises(MissingExitError):
            g.exit

    def testSameFrontiersAsAdjacencyGraph(self):
        edges = [(1, 2), (1, 3), (2, 5), (3, 4), (4, 5), (5, 2)]
        nxg = NetworkXGraph.from_edges(edges, entry=1, exit=5)
        adj = AdjacencyGraph.from_edges(edges, entry=1, exit=5)
        self.assertEqual(compute_dominance_frontiers(nxg), compute_dominance_frontiers(adj))
