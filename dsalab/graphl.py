"""Shortest paths over a weighted directed graph held as adjacency lists."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from dsalab.nodedata import NodeData

MAXNODES = 100
HEADER = "Description\t\tFrom Node\tTo Node\tDijkstra's Path"


@dataclass(frozen=True)
class Edge:
    """A directed edge to to_node with a non-negative cost."""

    to_node: int
    cost: int


def _read_size(stream: TextIO) -> int:
    """Read the node count from the next non-blank line, discarding the rest of it."""
    for line in iter(stream.readline, ""):
        tokens = line.split()
        if not tokens:
            continue
        try:
            size = int(tokens[0])
        except ValueError:
            raise ValueError(f"expected a node count, got {tokens[0]!r}") from None
        if not 0 <= size < MAXNODES:
            raise ValueError(f"node count must lie between 0 and {MAXNODES - 1}")
        return size
    raise EOFError("no more graphs")


def _records(stream: TextIO, width: int) -> Iterator[tuple[int, ...]]:
    """Yield groups of width integers until a group starting with 0."""
    pending: list[int] = []
    for line in iter(stream.readline, ""):
        pending.extend(int(token) for token in line.split())
        while len(pending) >= width:
            record, pending = tuple(pending[:width]), pending[width:]
            if record[0] == 0:
                return
            yield record
    raise ValueError("edge data ends without a terminating 0")


def _read_descriptions(stream: TextIO, size: int) -> list[NodeData]:
    descriptions = []
    for _ in range(size):
        try:
            descriptions.append(NodeData.from_stream(stream))
        except EOFError:
            raise ValueError("missing node description") from None
    return descriptions


class GraphL:
    """A directed graph with weighted edges and Dijkstra shortest paths.

    Nodes are numbered from 1; every node has a zero-cost edge to itself.
    """

    def __init__(self) -> None:
        self._descriptions: list[NodeData] = []
        self._adjacency: dict[int, list[Edge]] = {}
        self._dist: Optional[dict[int, dict[int, int]]] = None
        self._prev: Optional[dict[int, dict[int, int]]] = None

    @property
    def size(self) -> int:
        return len(self._descriptions)

    def build_graph(self, stream: TextIO) -> None:
        """Read one graph: a node count, one description per node, then
        'from to cost' triples ending with a triple whose first value is 0.

        Edges with a non-positive cost or an unknown node are skipped.
        Raises EOFError when the stream holds no further graph.
        """
        size = _read_size(stream)
        descriptions = _read_descriptions(stream, size)
        adjacency = {node: [Edge(node, 0)] for node in range(1, size + 1)}
        for from_node, to_node, cost in _records(stream, 3):
            if from_node in adjacency and to_node in adjacency and cost > 0:
                adjacency[from_node].append(Edge(to_node, cost))
        self._descriptions = descriptions
        self._adjacency = adjacency
        self._dist = self._prev = None

    def find_shortest_path(self) -> None:
        """Compute the shortest distance and route between every pair of nodes."""
        all_dist: dict[int, dict[int, int]] = {}
        all_prev: dict[int, dict[int, int]] = {}
        for source in self._adjacency:
            dist = {source: 0}
            prev = {source: source}
            done: set[int] = set()
            heap = [(0, source)]
            while heap:
                d, v = heapq.heappop(heap)
                if v in done:
                    continue
                done.add(v)
                for edge in self._adjacency[v]:
                    w = edge.to_node
                    candidate = d + edge.cost
                    if w not in done and candidate < dist.get(w, candidate + 1):
                        dist[w] = candidate
                        prev[w] = v
                        heapq.heappush(heap, (candidate, w))
            all_dist[source] = dist
            all_prev[source] = prev
        self._dist, self._prev = all_dist, all_prev

    def _tables(self) -> tuple[dict[int, dict[int, int]], dict[int, dict[int, int]]]:
        if self._dist is None or self._prev is None:
            self.find_shortest_path()
        assert self._dist is not None and self._prev is not None
        return self._dist, self._prev

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            if node not in self._adjacency:
                raise ValueError(f"no node {node} in a graph of {self.size} nodes")

    def distance(self, from_node: int, to_node: int) -> Optional[int]:
        """Return the shortest distance, or None if to_node cannot be reached."""
        self._check(from_node, to_node)
        dist, _ = self._tables()
        return dist[from_node].get(to_node)

    def path(self, from_node: int, to_node: int) -> list[int]:
        """Return the nodes of the shortest route, or [] if there is none."""
        self._check(from_node, to_node)
        dist, prev = self._tables()
        if to_node not in dist[from_node]:
            return []
        route = [to_node]
        while route[-1] != from_node:
            route.append(prev[from_node][route[-1]])
        route.reverse()
        return route

    def _route_text(self, from_node: int, to_node: int) -> str:
        if from_node == to_node:
            return ""
        return "".join(f"{node} " for node in self.path(from_node, to_node))

    def display(self, from_node: int, to_node: int) -> str:
        """Describe the shortest route between two nodes."""
        dist = self.distance(from_node, to_node)
        if dist is None:
            return "No connection"
        return f"{from_node}\t{to_node}\t{dist}\t{self._route_text(from_node, to_node)}"

    def display_all(self) -> str:
        """Tabulate the shortest distance and route from every node to every other."""
        lines = [HEADER + "\n"]
        for source, description in enumerate(self._descriptions, start=1):
            lines.append(f"{description}\n")
            for target in self._adjacency:
                if target == source:
                    continue
                prefix = f"\t\t\t {source}\t\t {target}\t"
                dist = self.distance(source, target)
                if dist is None:
                    lines.append(prefix + "---\n")
                else:
                    lines.append(f"{prefix}{dist}\t   {self._route_text(source, target)}\n")
        return "".join(lines)