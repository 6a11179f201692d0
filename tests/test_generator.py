import unittest

import networkx as nx
import numpy as np

from eulergraph.adapters.networkx import to_nx
from eulergraph.config import GeneratorConfig
from eulergraph.core.closer import ClosingStrategy
from eulergraph.core.generator import EulerGraphGenerator, generate_euler
from eulergraph.errors import InvalidConfiguration
from eulergraph.utils.validation import check_eulerian, reachable_from

from .helpers import assert_balanced, assert_even_degrees

SIZES = (4, 5, 6, 9, 14)
DENSITIES = (0.05, 0.3, 0.5, 0.8, 1.0)
SEEDS = range(6)


def _generate(n, density, directed, seed, start=0):
    cfg = GeneratorConfig(vertex_count=n, density=density, directed=directed, seed=seed, start=start)
    return EulerGraphGenerator(cfg, history=False).generate()


class TestEulerianProperties(unittest.TestCase):

    def _check_all(self, directed):
        for n in SIZES:
            for density in DENSITIES:
                for seed in SEEDS:
                    with self.subTest(n=n, density=density, seed=seed):
                        result = _generate(n, density, directed, seed)
                        G = result.store
                        report = check_eulerian(G)
                        self.assertTrue(report.ok, report.problems())
                        self.assertEqual(G.self_loops(), [])
                        # every vertex ends up on the circuit
                        self.assertEqual(report.isolated, [])
                        self.assertEqual(reachable_from(G, 0), set(range(n)))
                        self.assertTrue(G.nx.is_eulerian())

    def test_undirected(self):
        self._check_all(directed=False)

    def test_directed(self):
        self._check_all(directed=True)

    def test_circuit_uses_every_edge_once(self):
        for directed in (False, True):
            G = _generate(12, 0.4, directed, seed=42).store
            nxG = to_nx(G)
            circuit = list(nx.eulerian_circuit(nxG, source=0))
            self.assertEqual(len(circuit), G.number_of_edges())
            self.assertEqual(circuit[0][0], 0)
            self.assertEqual(circuit[-1][1], 0)

    def test_nonzero_start(self):
        for directed in (False, True):
            for seed in SEEDS:
                G = _generate(7, 0.5, directed, seed, start=3).store
                self.assertTrue(check_eulerian(G, start=3).ok)
                self.assertTrue(G.nx.is_eulerian())


class TestTrailPhaseEdgeCount(unittest.TestCase):

    def test_trail_overshoots_target_unless_closed_early(self):
        for directed in (False, True):
            for density in DENSITIES:
                for seed in SEEDS:
                    trail = _generate(9, density, directed, seed).trail
                    if trail.closed_early:
                        self.assertLessEqual(trail.edges_added, trail.target_edges)
                    else:
                        self.assertEqual(trail.edges_added, trail.target_edges + 1)

    def test_edge_count_at_least_target_without_early_close(self):
        for seed in SEEDS:
            result = _generate(14, 0.3, False, seed)
            if not result.trail.closed_early:
                self.assertGreaterEqual(result.edge_count, result.trail.target_edges)


class TestScenarios(unittest.TestCase):

    def test_four_vertices_full_density_undirected(self):
        for seed in range(20):
            result = _generate(4, 1.0, False, seed)
            G = result.store
            assert_even_degrees(self, G)
            self.assertLessEqual(G.number_of_edges(), 6)
            # K4 has odd degrees, so the walk saturates and the closer reroutes
            self.assertEqual(G.number_of_edges(), 4)
            self.assertEqual(result.closure.strategy, ClosingStrategy.SPLICE)
            self.assertTrue(result.trail.closed_early)
            self.assertTrue(check_eulerian(G).connected)

    def test_six_vertices_sparse_directed(self):
        for seed in SEEDS:
            result = _generate(6, 0.3, True, seed)
            G = result.store
            self.assertEqual(result.trail.target_edges, 9)
            if not result.trail.closed_early:
                self.assertEqual(result.trail.edges_added, 10)
            assert_balanced(self, G)
            self.assertEqual(reachable_from(G, 0), set(range(6)))
            for v in range(6):
                self.assertTrue(nx.has_path(to_nx(G), 0, v))

    def test_directed_close_goes_through_repair(self):
        result = _generate(6, 0.3, True, seed=1)
        self.assertEqual(result.closure.isolated[0], 0)


class TestGeneratorApi(unittest.TestCase):

    def test_seed_is_reproducible(self):
        a = generate_euler(10, 0.4, seed=7)
        b = generate_euler(10, 0.4, seed=7)
        self.assertEqual(a, b)

    def test_injected_rng(self):
        cfg = GeneratorConfig(vertex_count=8, density=0.5)
        a = EulerGraphGenerator(cfg, rng=np.random.default_rng(5)).generate().store
        b = EulerGraphGenerator(cfg, rng=np.random.default_rng(5)).generate().store
        self.assertEqual(a, b)

    def test_invalid_configuration_before_construction(self):
        with self.assertRaises(InvalidConfiguration):
            generate_euler(3, 0.5)
        with self.assertRaises(InvalidConfiguration):
            generate_euler(5, 0.0)

    def test_history_marks_phases(self):
        cfg = GeneratorConfig(vertex_count=5, density=0.5, seed=2)
        G = EulerGraphGenerator(cfg).generate().store
        marks = [e["label"] for e in G.history() if e["op"] == "mark"]
        self.assertEqual(marks, ["trail", "close"])
        added = [e for e in G.history() if e["op"] == "add_edge"]
        self.assertGreaterEqual(len(added), G.number_of_edges())


if __name__ == "__main__":
    unittest.main()
