from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .adjacency import AdjacencyStore
from .structure import Close
from .trail import next_vertex

logger = logging.getLogger(__name__)

__all__ = [
    "CircuitCloser",
    "ClosingStrategy",
    "ClosureResult",
]


class ClosingStrategy(str, Enum):
    """How the final closing step reached ``start``.

    Attributes:
        NONE: The trail already ended at ``start``
        DIRECT: The edge (u, start) was added
        DETOUR: (u, start) existed; closed through a vertex still free from ``u``
        SPLICE: (u, start) existed and ``u`` was saturated; an edge was rerouted
    """

    NONE = "none"
    DIRECT = "direct"
    DETOUR = "detour"
    SPLICE = "splice"


@dataclass(frozen=True)
class ClosureResult:
    isolated: tuple = field(default_factory=tuple)
    end: int = 0
    strategy: ClosingStrategy = ClosingStrategy.NONE
    via: int | None = None


class CircuitCloser:
    """
    Turn an open trail ending at ``u`` into a closed circuit through ``start``.

    Two steps run in order: every untouched vertex is threaded onto the end of
    the trail, then a closing edge back to ``start`` is added, rerouted when
    the direct edge already exists.

    Parameters
    ----------
    store : AdjacencyStore
        Relation holding the trail. Mutated in place.
    rng : numpy.random.Generator, optional
        Random source for the free-edge search of the closing step.
    """

    def __init__(self, store: AdjacencyStore, rng: np.random.Generator | None = None):
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()

    def close(self, u: int, start: int) -> ClosureResult:
        isolated = self.store.isolated_vertices()
        u = self.repair_isolated(u, isolated)
        if u == start:
            return ClosureResult(isolated=tuple(isolated), end=u)
        strategy, via = self.add_finish_edge(u, start)
        return ClosureResult(isolated=tuple(isolated), end=u, strategy=strategy, via=via)

    def repair_isolated(self, u: int, isolated=None) -> int:
        """
        Thread every isolated vertex onto the trail, in index order.

        A vertex counts as isolated when no edge enters it (zero column sum),
        in both modes. In directed mode this includes ``start``, since the walk
        never enters it.

        Returns
        -------
        int
            New trail endpoint.
        """
        if isolated is None:
            isolated = self.store.isolated_vertices()
        if isolated:
            logger.info("Absorbing %d isolated vertices: %s", len(isolated), isolated)
        for v in isolated:
            self.store.add_edge(u, v)
            u = v
        return u

    def add_finish_edge(self, u: int, start: int):
        """
        Add the edge that closes the trail from ``u`` back to ``start``.

        Precedence:

        1. the direct edge (u, start) when it is still free;
        2. otherwise a vertex ``vert`` free from ``u``, found by :func:`next_vertex`;
        3. if ``u`` is saturated, ``vert = max(start + 1, u + 1) mod n``,
           skipping ``start`` and ``u``;
        4. splice through ``vert``.

        The splice toggles (u, vert) and adds (vert, start). In the saturated
        case (u, vert) exists and is removed, turning the blocked return into
        ``u -> start -> vert``. When ``vert`` was free the toggle adds it, giving
        the detour ``u -> vert -> start``. Either way only ``u`` and ``start``
        change degree parity.

        Returns
        -------
        tuple[ClosingStrategy, int | None]
            Strategy used and the intermediate vertex, if any.
        """
        store = self.store
        if not store.has_edge(u, start):
            store.add_edge(u, start)
            return ClosingStrategy.DIRECT, None

        # only reachable in undirected mode: the walk never enters start
        step = next_vertex(store, u, start, self.rng)
        if isinstance(step, Close):
            vert = max(start + 1, u + 1) % store.n
            while vert in (u, start):
                vert = (vert + 1) % store.n
            strategy = ClosingStrategy.SPLICE
        else:
            vert = step.vertex
            strategy = ClosingStrategy.DETOUR

        logger.info("Direct close %d -> %d blocked; closing via %d (%s)", u, start, vert, strategy.value)
        if store.has_edge(u, vert):
            store.remove_edge(u, vert)
        else:
            store.add_edge(u, vert)
        store.add_edge(vert, start)
        return strategy, vert
