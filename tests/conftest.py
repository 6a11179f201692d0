# tests/conftest.py
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from eulergraph.core.adjacency import AdjacencyStore  # noqa: E402


@pytest.fixture
def cycle_store():
    """Undirected 4-cycle 0-1-2-3-0."""
    return AdjacencyStore.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def directed_triangle():
    """Directed 3-edge path 0->1, 1->2, 2->0."""
    return AdjacencyStore.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def tmpdir_fixture(tmp_path):
    return tmp_path
