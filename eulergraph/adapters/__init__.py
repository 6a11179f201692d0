from .networkx import NetworkXAdapter, from_nx, to_nx
from .manager import ensure_materialized, get_adapter, get_proxy

__all__ = [
    "NetworkXAdapter", "from_nx", "to_nx",
    "ensure_materialized", "get_adapter", "get_proxy",
]
