from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .adjacency import AdjacencyStore
from .structure import Close, Continue, Step

logger = logging.getLogger(__name__)

__all__ = [
    "TrailBuilder",
    "TrailResult",
    "next_vertex",
    "target_edge_count",
]


def target_edge_count(n: int, density: float, directed: bool) -> int:
    """``floor(density * complete_edges)`` for ``n`` vertices."""
    division = 1 if directed else 2
    complete_edges = n * (n - 1) // division
    return int(math.floor(density * complete_edges))


def next_vertex(store: AdjacencyStore, u: int, start: int, rng: np.random.Generator) -> Step:
    """
    Search for a free edge leaving ``u``.

    A vertex ``v`` qualifies when ``v != u``, ``v != start`` and the edge
    (u, v) does not exist yet. ``start`` never qualifies: it is kept for the
    closing edge only.

    Parameters
    ----------
    store : AdjacencyStore
        Relation to search.
    u : int
        Current trail endpoint.
    start : int
        First vertex of the trail.
    rng : numpy.random.Generator
        Random source; only ``rng.integers(n)`` is used.

    Returns
    -------
    Continue or Close
        ``Continue(v)`` for a qualifying vertex, ``Close()`` when none exists.

    Notes
    -----
    The search runs in two phases:

    1. up to ``n`` uniform draws from ``[0, n)``; the first qualifying draw wins;
    2. if every draw failed, a scan of ``0..n-1`` in which the *last*
       qualifying index wins.

    Bounding phase 1 keeps the cost per step ``O(n)`` even when ``u`` has few
    free neighbours left.
    """
    n = store.n
    for _ in range(n):
        v = int(rng.integers(n))
        if v != u and v != start and not store.has_edge(u, v):
            return Continue(v)

    free = store.free_vertices(u)
    free = free[free != start]
    if free.size == 0:
        return Close()
    return Continue(int(free[-1]))


@dataclass(frozen=True)
class TrailResult:
    start: int
    end: int
    edges_added: int
    target_edges: int
    closed_early: bool

    @property
    def overshoot(self) -> int:
        return self.edges_added - self.target_edges


class TrailBuilder:
    """
    Grow an open trail from ``start`` by a randomized walk.

    Each step adds the edge (u, v) for a vertex ``v`` found by
    :func:`next_vertex`, then moves to ``v``. The walk stops once the edge
    counter passes the target, or as soon as the search reports that the
    endpoint has no free edge left.

    Parameters
    ----------
    store : AdjacencyStore
        Relation to grow. Mutated in place.
    rng : numpy.random.Generator, optional
        Random source. Defaults to a fresh unseeded generator.
    """

    def __init__(self, store: AdjacencyStore, rng: np.random.Generator | None = None):
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()

    def next_vertex(self, u: int, start: int) -> Step:
        return next_vertex(self.store, u, start, self.rng)

    def build(self, density: float, start: int = 0) -> TrailResult:
        """
        Run the walk.

        The counter is tested before it is incremented, so the edge that
        pushes the count past the target is still added: unless the walk
        closes early, exactly ``target_edges + 1`` edges are added.

        Returns
        -------
        TrailResult
            ``end`` is the endpoint handed to the circuit closer.
        """
        store = self.store
        target = target_edge_count(store.n, density, store.directed)
        logger.info("Growing trail from %d: target %d edges on %d vertices", start, target, store.n)

        counter = 0
        u = start
        step = self.next_vertex(u, start)
        while counter <= target and isinstance(step, Continue):
            counter += 1
            store.add_edge(u, step.vertex)
            u = step.vertex
            step = self.next_vertex(u, start)

        closed_early = isinstance(step, Close) and counter <= target
        logger.info("Trail stopped at %d after %d edges (closed early: %s)", u, counter, closed_early)
        return TrailResult(
            start=start, end=u, edges_added=counter, target_edges=target, closed_early=closed_early
        )
