import unittest

import networkx as nx

from eulergraph.adapters import get_adapter
from eulergraph.adapters.manager import ensure_materialized
from eulergraph.adapters.networkx import from_nx, to_nx
from eulergraph.core.adjacency import AdjacencyStore
from eulergraph.core.generator import generate_euler


class TestNetworkXAdapter(unittest.TestCase):

    def setUp(self):
        # Build a small undirected graph with one untouched vertex
        G = AdjacencyStore(5)
        G.add_edge(0, 1)
        G.add_edge(1, 2)
        G.add_edge(2, 0)
        self.G = G

    def test_roundtrip(self):
        nxG = to_nx(self.G)

        # NX assertions
        self.assertIsInstance(nxG, nx.Graph)
        self.assertFalse(nxG.is_directed())
        self.assertIn(4, nxG.nodes)
        self.assertEqual(nxG.number_of_nodes(), 5)
        self.assertIn((0, 1), nxG.edges)
        self.assertEqual(nxG.graph["edge_type"], "undirected")

        # Reimport
        G2 = from_nx(nxG)
        self.assertEqual(self.G, G2)

    def test_directed_export(self):
        G = AdjacencyStore.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)
        nxG = to_nx(G)
        self.assertIsInstance(nxG, nx.DiGraph)
        self.assertEqual(sorted(nxG.edges), [(0, 1), (1, 2), (2, 0)])
        self.assertTrue(nx.is_eulerian(nxG))

    def test_from_nx_rejects_foreign_labels(self):
        with self.assertRaises(ValueError):
            from_nx(nx.path_graph(["a", "b", "c"]))
        with self.assertRaises(ValueError):
            from_nx(nx.MultiGraph([(0, 1), (0, 1)]))

    def test_get_adapter(self):
        nxG = get_adapter("NetworkX").export(self.G)
        self.assertEqual(nxG.number_of_edges(), 3)
        with self.assertRaises(ValueError):
            get_adapter("graph-tool")


class TestLazyProxy(unittest.TestCase):

    def test_forwards_algorithms(self):
        G = generate_euler(8, 0.5, seed=6)
        self.assertTrue(G.nx.is_eulerian())
        self.assertTrue(G.nx.is_connected())
        self.assertEqual(G.nx.number_of_edges(), G.number_of_edges())

    def test_cache_is_refreshed_after_mutation(self):
        G = AdjacencyStore(4)
        G.add_edge(0, 1)
        first = ensure_materialized("networkx", G)
        self.assertIs(ensure_materialized("networkx", G), first)
        G.add_edge(2, 3)
        second = ensure_materialized("networkx", G)
        self.assertIsNot(second, first)
        self.assertEqual(second["graph"].number_of_edges(), 2)


if __name__ == "__main__":
    unittest.main()
