"""
Command-line entry point: build a random Eulerian graph and write it out.

    eulergraph 10 0.4 undirected -o graph.txt
    eulergraph 6 0.3 directed --seed 7 --format csv -o graph.csv
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import USAGE, GeneratorConfig
from .core.generator import EulerGraphGenerator
from .errors import InvalidConfiguration, OutputError
from .io.edgelist import save_edgelist
from .io.vertex_form import save_vertex_form

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "graph.txt"
FORMATS = ("vertex", "csv", "parquet")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="eulergraph",
        description="Create a random graph that is a single Eulerian circuit.",
        usage=argparse.SUPPRESS,
        add_help=True,
    )
    ap.add_argument("params", nargs="*", metavar="VERTICES DENSITY [MODE]",
                    help="vertex count (>= 4), density in (0, 1], and directed|undirected")
    ap.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                    help=f"Output file (default: {DEFAULT_OUTPUT})")
    ap.add_argument("--format", choices=FORMATS, default="vertex",
                    help="Output format (default: vertex)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    ap.add_argument("--history", default=None,
                    help="Also export the mutation history (.parquet, .ndjson, .json, .csv)")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v logs progress, -vv logs every edge")
    return ap


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = GeneratorConfig.from_args(args.params, seed=args.seed)
    except InvalidConfiguration as exc:
        print(f"Parameter format exception: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    result = EulerGraphGenerator(config).generate()
    store = result.store

    out = args.output
    if args.format == "parquet" and not out.lower().endswith(".parquet"):
        out += ".parquet"
    try:
        if args.format == "vertex":
            save_vertex_form(store, out)
        else:
            save_edgelist(store, out)
        if args.history:
            store.export_history(args.history)
    except OutputError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Cannot write history to \"{args.history}\": {exc}", file=sys.stderr)
        return 1

    print(f"Generated {store.edge_type.value} graph: {store.n} vertices, "
          f"{store.number_of_edges()} edges -> {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
