from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "EdgeType",
    "Continue",
    "Close",
    "Step",
]


class EdgeType(str, Enum):
    """Edge type (DIRECTED, UNDIRECTED).

    Attributes:
        DIRECTED: Every edge (u, v) is stored one-way only
        UNDIRECTED: Every edge (u, v) is mirrored as (v, u)
    """

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def from_flag(cls, directed: bool) -> "EdgeType":
        return cls.DIRECTED if directed else cls.UNDIRECTED


@dataclass(frozen=True)
class Continue:
    """The walk may continue along the free edge (u, vertex)."""

    vertex: int


@dataclass(frozen=True)
class Close:
    """No free edge is left for the current endpoint; the trail must close."""


Step = Union[Continue, Close]

"""
Outcome of one free-edge search. A real vertex index is never used as a stop
signal, so vertex 0 stays a legal continuation even when it is the start.
"""
