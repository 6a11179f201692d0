from .structure import *
from .adjacency import AdjacencyStore
from .trail import TrailBuilder, TrailResult, next_vertex
from .closer import CircuitCloser, ClosureResult, ClosingStrategy

__all__ = [
    "structure", "AdjacencyStore",
    "TrailBuilder", "TrailResult", "next_vertex",
    "CircuitCloser", "ClosureResult", "ClosingStrategy",
]
