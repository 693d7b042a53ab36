"""Run shortest-path and depth-first reports over graph data files."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from dsalab.graphl import GraphL
from dsalab.graphm import GraphM


def run_shortest_paths(stream: TextIO, out: TextIO) -> int:
    """Report all shortest paths for every graph in stream; return how many graphs."""
    count = 0
    while True:
        graph = GraphL()
        try:
            graph.build_graph(stream)
        except EOFError:
            return count
        graph.find_shortest_path()
        out.write(graph.display_all())
        count += 1


def run_depth_first(stream: TextIO, out: TextIO) -> int:
    """Report each graph in stream and its depth-first ordering; return how many graphs."""
    count = 0
    while True:
        graph = GraphM()
        try:
            graph.build_graph(stream)
        except EOFError:
            return count
        out.write(graph.display_graph())
        ordering = "".join(f"{node} " for node in graph.depth_first_search())
        out.write(f"Depth First Ordering: {ordering}\n")
        count += 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Shortest paths and depth-first search.")
    parser.add_argument("weighted", nargs="?", default="data31.txt",
                        help="graphs with weighted edges for shortest paths")
    parser.add_argument("unweighted", nargs="?", default="data32.txt",
                        help="graphs with plain edges for depth-first search")
    args = parser.parse_args(argv)

    out = sys.stdout
    for path, runner in ((args.weighted, run_shortest_paths),
                         (args.unweighted, run_depth_first)):
        try:
            with open(path, encoding="utf-8") as infile:
                runner(infile, out)
        except OSError:
            print("File could not be opened.")
            return 1
    out.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())