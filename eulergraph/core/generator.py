from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import GeneratorConfig
from .adjacency import AdjacencyStore
from .closer import CircuitCloser, ClosureResult
from .trail import TrailBuilder, TrailResult

logger = logging.getLogger(__name__)

__all__ = [
    "EulerGraphGenerator",
    "GenerationResult",
    "generate_euler",
]


@dataclass(frozen=True)
class GenerationResult:
    store: AdjacencyStore
    trail: TrailResult
    closure: ClosureResult

    @property
    def edge_count(self) -> int:
        return self.store.number_of_edges()


class EulerGraphGenerator:
    """
    Build a random graph that is a single Eulerian circuit.

    Parameters
    ----------
    config : GeneratorConfig
        Validated construction parameters.
    rng : numpy.random.Generator, optional
        Random source shared by the trail and closing phases. When omitted it
        is built from ``config.seed``.
    history : bool, optional
        Record the mutation history on the produced store.

    Examples
    --------
    >>> gen = EulerGraphGenerator(GeneratorConfig(vertex_count=6, density=0.5, seed=1))
    >>> result = gen.generate()
    >>> result.store.nx.is_eulerian()
    True
    """

    def __init__(self, config: GeneratorConfig, rng: Optional[np.random.Generator] = None, history: bool = True):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.history = history

    def generate(self) -> GenerationResult:
        cfg = self.config
        store = AdjacencyStore(cfg.vertex_count, directed=cfg.directed, history=self.history)

        store.mark("trail")
        trail = TrailBuilder(store, self.rng).build(cfg.density, start=cfg.start)

        store.mark("close")
        closure = CircuitCloser(store, self.rng).close(trail.end, cfg.start)

        logger.info(
            "Generated %s graph: %d vertices, %d edges",
            store.edge_type.value, store.n, store.number_of_edges(),
        )
        return GenerationResult(store=store, trail=trail, closure=closure)


def generate_euler(vertex_count, density, directed=False, seed=None) -> AdjacencyStore:
    """Shortcut: validate the parameters, build the graph, return the store."""
    config = GeneratorConfig(vertex_count=vertex_count, density=density, directed=directed, seed=seed)
    return EulerGraphGenerator(config).generate().store
