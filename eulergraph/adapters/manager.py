from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from ._base import GraphAdapter
from ._proxy import BackendProxy
from .networkx import NetworkXAdapter, to_backend as nx_to_backend

if TYPE_CHECKING:
    from ..core.adjacency import AdjacencyStore

__all__ = [
    'ensure_materialized',
    'get_adapter',
    'get_proxy',
]

# ---------------------------------------------------------------------------
# 1. Central registry --------------------------------------------------------
# ---------------------------------------------------------------------------
# Map backend name -> callable that converts AdjacencyStore -> backend graph
_REGISTRY = {
    "networkx": nx_to_backend,
}

_ADAPTERS = {
    "networkx": NetworkXAdapter,
}


# ---------------------------------------------------------------------------
# 2. Public helpers ----------------------------------------------------------
# ---------------------------------------------------------------------------
def get_adapter(name: str) -> GraphAdapter:
    """Return a *new* adapter instance of the requested backend."""
    try:
        return _ADAPTERS[name.lower()]()
    except KeyError:
        raise ValueError(f"No adapter registered for '{name}'") from None


def get_proxy(backend_name: str, store: "AdjacencyStore") -> BackendProxy:
    """Return a lazy proxy so users can write `store.nx.<algo>()`."""
    if backend_name not in _REGISTRY:
        raise ValueError(f"No backend '{backend_name}' registered")
    return BackendProxy(store, backend_name)


def ensure_materialized(backend_name: str, store: "AdjacencyStore") -> dict:
    """
    Convert (or re-convert) *store* into the requested backend object and
    cache the result on the store's private state object. Returns the cache
    entry: {"module": nx, "graph": nx.Graph, "version": int}
    """
    cache = store._state._backend_cache               # per-instance cache
    entry = cache.get(backend_name)

    if entry is None or store._state.dirty_since(entry["version"]):
        backend_module = importlib.import_module(backend_name)   # e.g. 'networkx'
        converted = _REGISTRY[backend_name](store)
        entry = cache[backend_name] = {
            "module":  backend_module,
            "graph":   converted,
            "version": store._state.version,
        }

    return entry
