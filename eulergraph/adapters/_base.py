from abc import ABC, abstractmethod
from typing import Any

from ..core.adjacency import AdjacencyStore


class GraphAdapter(ABC):
    @abstractmethod
    def export(self, store: AdjacencyStore, **kwargs) -> Any:
        pass
