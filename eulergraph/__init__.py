# eulergraph/__init__.py
"""eulergraph: random Eulerian graphs, single import."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "eulergraph.adapters",
    "io": "eulergraph.io",
    "core": "eulergraph.core",
    "utils": "eulergraph.utils",
    "cli": "eulergraph.cli",
    # direct convenience
    "networkx": "eulergraph.adapters.networkx",
    "vertex_form": "eulergraph.io.vertex_form",
    "edgelist": "eulergraph.io.edgelist",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "AdjacencyStore": ("eulergraph.core.adjacency", "AdjacencyStore"),
    "TrailBuilder": ("eulergraph.core.trail", "TrailBuilder"),
    "CircuitCloser": ("eulergraph.core.closer", "CircuitCloser"),
    "EulerGraphGenerator": ("eulergraph.core.generator", "EulerGraphGenerator"),
    "GenerationResult": ("eulergraph.core.generator", "GenerationResult"),
    "generate_euler": ("eulergraph.core.generator", "generate_euler"),
    "next_vertex": ("eulergraph.core.trail", "next_vertex"),
    "EdgeType": ("eulergraph.core.structure", "EdgeType"),

    # Config / errors
    "GeneratorConfig": ("eulergraph.config", "GeneratorConfig"),
    "InvalidConfiguration": ("eulergraph.errors", "InvalidConfiguration"),
    "OutputError": ("eulergraph.errors", "OutputError"),

    # Vertex form
    "to_vertex_form": ("eulergraph.io.vertex_form", "to_vertex_form"),
    "save_vertex_form": ("eulergraph.io.vertex_form", "save_vertex_form"),
    "read_vertex_form": ("eulergraph.io.vertex_form", "read_vertex_form"),

    # Polars edge list
    "to_dataframe": ("eulergraph.io.edgelist", "to_dataframe"),
    "save_edgelist": ("eulergraph.io.edgelist", "save_edgelist"),

    # NetworkX adapter
    "to_nx": ("eulergraph.adapters.networkx", "to_nx"),
    "from_nx": ("eulergraph.adapters.networkx", "from_nx"),

    # Validation
    "check_eulerian": ("eulergraph.utils.validation", "check_eulerian"),
    "assert_eulerian": ("eulergraph.utils.validation", "assert_eulerian"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("eulergraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
