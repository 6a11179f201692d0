# tests/helpers.py
import itertools

import numpy as np

from eulergraph.core.adjacency import AdjacencyStore


class ScriptedRng:
    """Stand-in for numpy.random.Generator returning scripted draws, cycled forever."""

    def __init__(self, values):
        self._values = itertools.cycle(list(values))
        self.calls = 0

    def integers(self, n):
        self.calls += 1
        return next(self._values) % n


def constant_rng(value=0):
    return ScriptedRng([value])


def store_from_trail(n, trail, directed=False):
    """Store holding the walk trail[0] -> trail[1] -> ... (no history)."""
    return AdjacencyStore.from_edges(n, zip(trail, trail[1:]), directed=directed)


def assert_even_degrees(testcase, store):
    degrees = store.degrees()
    testcase.assertTrue(np.all(degrees % 2 == 0), f"odd degrees: {degrees.tolist()}")


def assert_balanced(testcase, store):
    testcase.assertEqual(store.in_degrees().tolist(), store.out_degrees().tolist())
