# config.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .core.structure import EdgeType
from .core.trail import target_edge_count
from .errors import InvalidConfiguration

__all__ = [
    "GeneratorConfig",
    "MIN_VERTICES",
    "USAGE",
]

MIN_VERTICES = 4

_DIRECTED_WORDS = {"direct", "directed", "d"}
_UNDIRECTED_WORDS = {"indirect", "undirected", "u"}

USAGE = """\
This application creates a new random Eulerian graph.
Usage:
  eulergraph VERTICES DENSITY [directed|undirected] [options]
Where:
  - VERTICES is the number of vertices in the new graph. It must be at least 4.
  - DENSITY is the fraction of edges of the complete graph to create.
    It is a value from (0; 1]. 0 is not allowed.
  - [directed|undirected] selects the graph kind ('direct'/'indirect' are
    accepted too). Default: undirected.
"""


@dataclass
class GeneratorConfig:
    # Graph shape
    vertex_count: int
    density: float
    directed: bool = False

    # Walk
    start: int = 0
    seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    @property
    def edge_type(self) -> EdgeType:
        return EdgeType.from_flag(self.directed)

    @property
    def complete_edges(self) -> int:
        """Edge count of the complete graph on ``vertex_count`` vertices."""
        return self.vertex_count * (self.vertex_count - 1) // (1 if self.directed else 2)

    @property
    def target_edges(self) -> int:
        """Edges the trail phase aims for: ``floor(density * complete_edges)``."""
        return target_edge_count(self.vertex_count, self.density, self.directed)

    def validate(self) -> None:
        """
        Check the parameters before any construction work begins.

        Raises
        ------
        InvalidConfiguration
            If the vertex count is below 4, the density is outside (0, 1],
            or the start vertex is not a vertex of the graph.
        """
        if isinstance(self.vertex_count, bool) or not isinstance(self.vertex_count, int):
            raise InvalidConfiguration(f"Vertex count must be an integer, got {self.vertex_count!r}")
        if self.vertex_count < MIN_VERTICES:
            raise InvalidConfiguration(
                f"Too low value for number of vertices: {self.vertex_count} (minimum {MIN_VERTICES})"
            )
        try:
            density = float(self.density)
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"Density must be a number, got {self.density!r}") from None
        if math.isnan(density) or density <= 0 or density > 1:
            raise InvalidConfiguration(f"Wrong density value: {self.density!r}; expected (0, 1]")
        self.density = density
        if not 0 <= self.start < self.vertex_count:
            raise InvalidConfiguration(f"Start vertex {self.start} is outside 0..{self.vertex_count - 1}")

    @classmethod
    def from_args(cls, args: Sequence[str], *, seed: Optional[int] = None) -> "GeneratorConfig":
        """
        Build a config from positional command-line words.

        Parameters
        ----------
        args : sequence of str
            ``VERTICES DENSITY [MODE]`` where MODE is one of
            ``direct``/``directed`` or ``indirect``/``undirected``
            (case-insensitive).
        seed : int, optional
            Seed for the random source.

        Raises
        ------
        InvalidConfiguration
            On too few arguments, non-numeric values, an unknown mode, or
            any failure of :meth:`validate`.
        """
        if len(args) < 2:
            raise InvalidConfiguration("Too few parameters.")
        try:
            vertex_count = int(args[0])
            density = float(args[1])
        except ValueError as exc:
            raise InvalidConfiguration(f"Parameter format exception: {exc}") from exc

        directed = False
        if len(args) >= 3:
            mode = str(args[2]).strip().lower()
            if mode in _DIRECTED_WORDS:
                directed = True
            elif mode not in _UNDIRECTED_WORDS:
                raise InvalidConfiguration(f"Unknown graph mode {args[2]!r}")

        return cls(vertex_count=vertex_count, density=density, directed=directed, seed=seed)
