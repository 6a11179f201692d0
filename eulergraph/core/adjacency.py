import json
import logging
import time
from datetime import datetime, timezone

import numpy as np
import polars as pl
import scipy.sparse as sp

from ._state import _State
from .structure import EdgeType

logger = logging.getLogger(__name__)

__all__ = [
    "AdjacencyStore",
]


class AdjacencyStore:
    """
    Dense boolean adjacency relation over the vertices ``0..n-1``.

    ``edge[u][v]`` is true when the edge (u, v) exists. In undirected mode every
    write is mirrored to ``edge[v][u]`` so the relation stays symmetric; in
    directed mode it is not.

    Parameters
    ----------
    n : int
        Number of vertices. Fixed for the lifetime of the store.
    directed : bool, optional
        Whether edges are one-way. Fixed for the lifetime of the store.
    history : bool, optional
        Record every mutation in an in-memory log (see :meth:`history`).

    Notes
    -----
    - Every :meth:`add_edge` emits a ``Edge (u, v).`` record on the module
      logger at DEBUG level, whether or not history is enabled.
    - Vertex indices outside ``0..n-1`` raise ``IndexError``.

    See Also
    --------
    add_edge, remove_edge, has_edge, in_degree
    """

    # Construction

    def __init__(self, n, directed=False, history=True):
        if n < 1:
            raise ValueError(f"Vertex count must be positive, got {n}")
        self._n = int(n)
        self._directed = bool(directed)
        self._adj = np.zeros((self._n, self._n), dtype=bool)
        self._state = _State()

        # History
        self._history_enabled = bool(history)
        self._history = []
        self._history_clock0 = time.perf_counter_ns()

    @property
    def n(self) -> int:
        return self._n

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_type(self) -> EdgeType:
        return EdgeType.from_flag(self._directed)

    def __len__(self):
        return self._n

    def __repr__(self) -> str:
        return f"<AdjacencyStore | V={self._n} · E={self.number_of_edges()} · directed={self._directed}>"

    def __eq__(self, other):
        if not isinstance(other, AdjacencyStore):
            return NotImplemented
        return self._directed == other._directed and np.array_equal(self._adj, other._adj)

    __hash__ = None

    def _check_vertex(self, v):
        if not 0 <= v < self._n:
            raise IndexError(f"Vertex {v} is outside 0..{self._n - 1}")

    # Mutation

    def add_edge(self, u, v):
        """
        Add the edge (u, v).

        Parameters
        ----------
        u : int
            Tail of the edge.
        v : int
            Head of the edge.

        Notes
        -----
        Idempotent: adding an existing edge leaves the relation unchanged but is
        still traced and recorded.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        logger.debug("Edge (%d, %d).", u, v)
        self._adj[u, v] = True
        if not self._directed:
            self._adj[v, u] = True
        self._state.bump()
        self._log_event("add_edge", u=u, v=v)

    def remove_edge(self, u, v):
        """
        Remove the edge (u, v), whether it exists or not.

        Removing an absent edge is a no-op on the relation, so repeated removal
        never flips an edge back on.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        self._adj[u, v] = False
        if not self._directed:
            self._adj[v, u] = False
        self._state.bump()
        self._log_event("remove_edge", u=u, v=v)

    # Queries

    def has_edge(self, u, v) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return bool(self._adj[u, v])

    def in_degree(self, v) -> int:
        """Number of edges entering ``v`` (column sum)."""
        self._check_vertex(v)
        return int(self._adj[:, v].sum())

    # The column sum doubles as the "untouched vertex" test in both modes.
    degree_sum = in_degree

    def out_degree(self, v) -> int:
        """Number of edges leaving ``v`` (row sum)."""
        self._check_vertex(v)
        return int(self._adj[v, :].sum())

    def degree(self, v) -> int:
        """
        Total degree of ``v``.

        For directed stores this is in-degree plus out-degree; for undirected
        stores it is the number of neighbours.
        """
        if self._directed:
            return self.in_degree(v) + self.out_degree(v)
        return self.out_degree(v)

    def in_degrees(self) -> np.ndarray:
        return self._adj.sum(axis=0).astype(np.int64)

    def out_degrees(self) -> np.ndarray:
        return self._adj.sum(axis=1).astype(np.int64)

    def degrees(self) -> np.ndarray:
        if self._directed:
            return self.in_degrees() + self.out_degrees()
        return self.out_degrees()

    def neighbors(self, v) -> list[int]:
        """Heads of the edges leaving ``v``, ascending."""
        self._check_vertex(v)
        return np.flatnonzero(self._adj[v]).tolist()

    def free_vertices(self, u) -> np.ndarray:
        """Vertices ``i != u`` with no edge (u, i), ascending."""
        self._check_vertex(u)
        free = np.flatnonzero(~self._adj[u])
        return free[free != u]

    def isolated_vertices(self) -> list[int]:
        """Vertices with no entering edge (zero column sum), in index order."""
        return np.flatnonzero(self._adj.sum(axis=0) == 0).tolist()

    def edges(self) -> list[tuple[int, int]]:
        """
        All edges in row-major order.

        Undirected edges are listed once, as ``(u, v)`` with ``u < v``.
        """
        adj = self._adj if self._directed else np.triu(self._adj)
        rows, cols = np.nonzero(adj)
        return list(zip(rows.tolist(), cols.tolist()))

    def number_of_edges(self) -> int:
        total = int(self._adj.sum())
        if self._directed:
            return total
        # diagonal entries are counted once in a symmetric matrix
        loops = int(np.trace(self._adj))
        return (total - loops) // 2 + loops

    def self_loops(self) -> list[int]:
        return np.flatnonzero(np.diagonal(self._adj)).tolist()

    # Conversion

    def to_numpy(self, dtype=bool) -> np.ndarray:
        """Dense copy of the relation."""
        return self._adj.astype(dtype, copy=True)

    def to_sparse(self) -> sp.csr_matrix:
        """The relation as a SciPy CSR (compressed sparse row) matrix of 0/1 ints."""
        return sp.csr_matrix(self._adj.astype(np.int8))

    @classmethod
    def from_edges(cls, n, edges, directed=False, history=False) -> "AdjacencyStore":
        store = cls(n, directed=directed, history=history)
        for u, v in edges:
            store.add_edge(u, v)
        return store

    def copy(self) -> "AdjacencyStore":
        """Deep copy of the relation. History is not copied."""
        new = AdjacencyStore(self._n, directed=self._directed, history=self._history_enabled)
        new._adj = self._adj.copy()
        return new

    # History

    def _utcnow_iso(self) -> str:
        return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        evt = {
            "version": self._state.version,
            "ts_utc": self._utcnow_iso(),                    # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = v.item() if isinstance(v, np.generic) else v
        self._history.append(evt)

    def history(self, as_df: bool = False):
        """
        Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise return a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes 'version', 'ts_utc', 'mono_ns' (monotonic
            nanoseconds since the store was created) and 'op'. Edge events carry
            'u' and 'v'; markers carry 'label'.
        """
        if as_df:
            return pl.DataFrame(self._history, infer_schema_length=None)
        return list(self._history)

    def export_history(self, path: str) -> int:
        """
        Write the mutation history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: '.parquet', '.ndjson' (a.k.a. '.jsonl'),
            '.json', '.csv'. Unknown extensions default to Parquet by appending '.parquet'.

        Returns
        -------
        int
            Number of events written. Returns 0 if the history is empty.

        Raises
        ------
        OSError
            If the file cannot be written.
        """
        if not self._history:
            return 0
        df = self.history(as_df=True)
        path = str(path)
        p = path.lower()
        if p.endswith(".parquet"):
            df.write_parquet(path)
        elif p.endswith(".ndjson") or p.endswith(".jsonl"):
            df.write_ndjson(path)
        elif p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(df.to_dicts(), f, ensure_ascii=False)
        elif p.endswith(".csv"):
            df.write_csv(path)
        else:
            df.write_parquet(path + ".parquet")
        return len(df)

    def enable_history(self, flag: bool = True):
        """Start (or with ``flag=False`` pause) in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        self._history.clear()

    def mark(self, label: str):
        """
        Insert a manual marker into the mutation history.

        The event is recorded with 'op'='mark'. Logging must be enabled for the
        marker to be recorded.
        """
        self._log_event("mark", label=label)

    # Lazy proxies

    @property
    def nx(self):
        """
        Accessor for the lazy NX (NetworkX) proxy.
        Usage: store.nx.<algorithm>(); e.g. store.nx.is_eulerian()
        """
        from ..adapters import manager as _backend_manager

        return _backend_manager.get_proxy("networkx", self)
