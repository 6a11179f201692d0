# adapters/networkx.py
from __future__ import annotations

import networkx as nx

from ..core.adjacency import AdjacencyStore
from ._base import GraphAdapter

__all__ = [
    "NetworkXAdapter",
    "from_nx",
    "to_backend",
    "to_nx",
]


def to_nx(store: AdjacencyStore, *, directed: bool | None = None):
    """
    Export an adjacency store to NetworkX.

    Parameters
    ----------
    store : AdjacencyStore
    directed : bool, optional
        Override the store's mode. Defaults to ``store.directed``.

    Returns
    -------
    networkx.Graph | networkx.DiGraph
        Every vertex ``0..n-1`` is present, including isolated ones.
    """
    if directed is None:
        directed = store.directed
    G = nx.DiGraph() if directed else nx.Graph()
    G.add_nodes_from(range(store.n))
    G.add_edges_from(store.edges())
    G.graph["edge_type"] = store.edge_type.value
    return G


def from_nx(G, *, history: bool = False) -> AdjacencyStore:
    """
    Build an adjacency store from a NetworkX graph whose nodes are ``0..n-1``.

    Raises
    ------
    ValueError
        If the nodes are not exactly the integers ``0..n-1``, or if the graph
        is a multigraph.
    """
    if G.is_multigraph():
        raise ValueError("Multigraphs cannot be stored in a boolean adjacency relation.")
    n = G.number_of_nodes()
    if set(G.nodes) != set(range(n)):
        raise ValueError("Node labels must be the integers 0..n-1.")
    return AdjacencyStore.from_edges(n, G.edges(), directed=G.is_directed(), history=history)


def to_backend(store: AdjacencyStore):
    return to_nx(store)


class NetworkXAdapter(GraphAdapter):
    def export(self, store: AdjacencyStore, **kwargs):
        return to_nx(store, **kwargs)
