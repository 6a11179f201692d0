"""
Vertex form: one line per vertex, ``i : j1 j2 ...`` with the heads of the
edges leaving ``i`` in ascending order.

    0 : 1 3 
    1 : 0 2 
    2 : 1 3 
    3 : 0 2 

Each neighbour is followed by a single space, so a vertex without edges is
written as ``i : ``. Readers accept lines with or without trailing
whitespace.
"""
from __future__ import annotations

import logging
from typing import Iterable, List

from ..core.adjacency import AdjacencyStore
from ..errors import OutputError

logger = logging.getLogger(__name__)

__all__ = [
    "iter_vertex_form",
    "parse_vertex_form",
    "read_vertex_form",
    "save_vertex_form",
    "to_vertex_form",
]


def iter_vertex_form(store: AdjacencyStore) -> Iterable[str]:
    """Yield the vertex-form lines of *store*, newline included."""
    for i in range(store.n):
        parts = [f"{i} : "]
        parts.extend(f"{j} " for j in store.neighbors(i))
        yield "".join(parts) + "\n"


def to_vertex_form(store: AdjacencyStore) -> str:
    return "".join(iter_vertex_form(store))


def save_vertex_form(store: AdjacencyStore, path) -> int:
    """
    Write *store* in vertex form.

    Parameters
    ----------
    store : AdjacencyStore
    path : str or os.PathLike

    Returns
    -------
    int
        Number of lines written (one per vertex).

    Raises
    ------
    OutputError
        If the destination cannot be opened or written. The store is left
        untouched.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(iter_vertex_form(store))
    except OSError as exc:
        raise OutputError(path, exc.strerror or str(exc)) from exc
    logger.info("Wrote %d vertices to %s", store.n, path)
    return store.n


def parse_vertex_form(lines: Iterable[str], *, directed: bool = False) -> AdjacencyStore:
    """
    Parse vertex-form lines into an adjacency store.

    Blank lines are skipped. Vertex ids must be ``0..n-1``; ``n`` is taken from
    the number of vertex lines.

    Raises
    ------
    ValueError
        On a line without ``:``, a non-integer id, or an id outside ``0..n-1``.
    """
    rows: List[tuple] = []
    for line_no, raw in enumerate(lines, start=1):
        s = raw.strip()
        if not s:
            continue
        head, sep, tail = s.partition(":")
        if not sep:
            raise ValueError(f"Line {line_no}: expected 'vertex : neighbours', got {raw!r}")
        try:
            u = int(head)
            nbrs = [int(tok) for tok in tail.split()]
        except ValueError:
            raise ValueError(f"Line {line_no}: vertex ids must be integers, got {raw!r}") from None
        rows.append((line_no, u, nbrs))

    n = len(rows)
    store = AdjacencyStore(n, directed=directed, history=False)
    for line_no, u, nbrs in rows:
        for v in nbrs:
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"Line {line_no}: edge ({u}, {v}) is outside 0..{n - 1}")
            store.add_edge(u, v)
    return store


def read_vertex_form(path, *, directed: bool = False, encoding: str = "utf-8") -> AdjacencyStore:
    with open(path, "r", encoding=encoding) as f:
        return parse_vertex_form(f, directed=directed)
