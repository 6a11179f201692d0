# io/edgelist.py
from __future__ import annotations

import logging

import polars as pl

from ..core.adjacency import AdjacencyStore
from ..errors import OutputError

logger = logging.getLogger(__name__)

__all__ = [
    "from_dataframe",
    "save_edgelist",
    "to_dataframe",
]

SRC = "source"
DST = "target"


def to_dataframe(store: AdjacencyStore) -> pl.DataFrame:
    """
    Edge list of *store* as a Polars DataFrame.

    Columns ``source`` and ``target`` (Int64). Undirected edges appear once,
    with ``source < target``.
    """
    edges = store.edges()
    return pl.DataFrame(
        {SRC: [u for u, _ in edges], DST: [v for _, v in edges]},
        schema={SRC: pl.Int64, DST: pl.Int64},
    )


def from_dataframe(df: pl.DataFrame, n: int | None = None, *, directed: bool = False) -> AdjacencyStore:
    """
    Build a store from a ``source``/``target`` DataFrame.

    ``n`` defaults to one more than the largest vertex id.
    """
    if n is None:
        n = int(max(df[SRC].max() or 0, df[DST].max() or 0)) + 1 if df.height else 0
    return AdjacencyStore.from_edges(n, df.select(SRC, DST).iter_rows(), directed=directed)


def save_edgelist(store: AdjacencyStore, path) -> int:
    """
    Write the edge list to ``path``.

    The format follows the extension: '.parquet' writes Parquet, anything else
    CSV.

    Returns
    -------
    int
        Number of edges written.

    Raises
    ------
    OutputError
        If the file cannot be written.
    """
    df = to_dataframe(store)
    try:
        with open(path, "wb") as f:
            if str(path).lower().endswith(".parquet"):
                df.write_parquet(f)
            else:
                df.write_csv(f)
    except OSError as exc:
        raise OutputError(path, exc.strerror or str(exc)) from exc
    logger.info("Wrote %d edges to %s", df.height, path)
    return df.height
