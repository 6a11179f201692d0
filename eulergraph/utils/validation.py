from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from scipy.sparse.csgraph import connected_components

from ..core.adjacency import AdjacencyStore

__all__ = [
    "EulerianReport",
    "assert_eulerian",
    "check_eulerian",
    "reachable_from",
]


@dataclass(frozen=True)
class EulerianReport:
    """Result of :func:`check_eulerian`.

    Attributes:
        odd_vertices: Undirected mode: vertices of odd degree
        unbalanced: Directed mode: vertices whose in-degree differs from their out-degree
        self_loops: Vertices with an edge to themselves
        unreachable: Vertices with edges that are not weakly connected to ``start``
        isolated: Vertices without any edge
    """

    directed: bool
    odd_vertices: list = field(default_factory=list)
    unbalanced: list = field(default_factory=list)
    self_loops: list = field(default_factory=list)
    unreachable: list = field(default_factory=list)
    isolated: list = field(default_factory=list)

    @property
    def balanced(self) -> bool:
        return not self.odd_vertices and not self.unbalanced

    @property
    def no_self_loops(self) -> bool:
        return not self.self_loops

    @property
    def connected(self) -> bool:
        return not self.unreachable

    @property
    def ok(self) -> bool:
        return self.balanced and self.no_self_loops and self.connected

    def problems(self) -> list[str]:
        out = []
        if self.odd_vertices:
            out.append(f"odd degree at {self.odd_vertices}")
        if self.unbalanced:
            out.append(f"in-degree != out-degree at {self.unbalanced}")
        if self.self_loops:
            out.append(f"self-loops at {self.self_loops}")
        if self.unreachable:
            out.append(f"not connected to the start vertex: {self.unreachable}")
        return out


def reachable_from(store: AdjacencyStore, start: int = 0) -> set[int]:
    """Vertices weakly connected to ``start`` (``start`` included)."""
    _, labels = connected_components(store.to_sparse(), directed=store.directed, connection="weak")
    return set(np.flatnonzero(labels == labels[start]).tolist())


def check_eulerian(store: AdjacencyStore, start: int = 0) -> EulerianReport:
    """
    Check that *store* is a single Eulerian circuit through ``start``.

    Parameters
    ----------
    store : AdjacencyStore
    start : int, optional
        Vertex the circuit must pass through.

    Returns
    -------
    EulerianReport
        ``report.ok`` is True when every vertex is balanced (even degree, or
        in-degree equal to out-degree), there is no self-loop, and every vertex
        with an edge is weakly connected to ``start``.

    Notes
    -----
    Connectivity is computed with SciPy's ``connected_components`` on the CSR
    form of the relation. For a balanced directed graph weak and strong
    connectivity coincide on the vertices that carry edges.
    """
    indeg = store.in_degrees()
    outdeg = store.out_degrees()
    if store.directed:
        odd = []
        unbalanced = np.flatnonzero(indeg != outdeg).tolist()
        deg = indeg + outdeg
    else:
        deg = outdeg
        odd = np.flatnonzero(deg % 2 == 1).tolist()
        unbalanced = []

    reach = reachable_from(store, start)
    touched = np.flatnonzero(deg > 0).tolist()
    unreachable = sorted(v for v in touched if v not in reach)
    isolated = np.flatnonzero(deg == 0).tolist()

    return EulerianReport(
        directed=store.directed,
        odd_vertices=odd,
        unbalanced=unbalanced,
        self_loops=store.self_loops(),
        unreachable=unreachable,
        isolated=isolated,
    )


def assert_eulerian(store: AdjacencyStore, start: int = 0) -> EulerianReport:
    """Like :func:`check_eulerian`, but raise ``ValueError`` listing every problem found."""
    report = check_eulerian(store, start)
    if not report.ok:
        raise ValueError("Graph is not a single Eulerian circuit: " + "; ".join(report.problems()))
    return report
