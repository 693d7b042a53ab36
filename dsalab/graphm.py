"""Depth-first traversal over an unweighted directed graph held as a matrix."""

from __future__ import annotations

from typing import Iterator, TextIO

from dsalab.nodedata import NodeData

MAXNODES = 100


def _read_size(stream: TextIO) -> int:
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


def _pairs(stream: TextIO) -> Iterator[tuple[int, int]]:
    pending: list[int] = []
    for line in iter(stream.readline, ""):
        pending.extend(int(token) for token in line.split())
        while len(pending) >= 2:
            from_node, to_node = pending[0], pending[1]
            pending = pending[2:]
            if from_node == 0:
                return
            yield from_node, to_node
    raise ValueError("edge data ends without a terminating 0")


class GraphM:
    """A directed, unweighted graph whose nodes are numbered from 1."""

    def __init__(self) -> None:
        self._descriptions: list[NodeData] = []
        self._matrix: list[list[bool]] = []

    @property
    def size(self) -> int:
        return len(self._descriptions)

    def build_graph(self, stream: TextIO) -> None:
        """Read one graph: a node count, one description per node, then
        'from to' pairs ending with a pair whose first value is 0.

        Raises EOFError when the stream holds no further graph.
        """
        size = _read_size(stream)
        descriptions = []
        for _ in range(size):
            try:
                descriptions.append(NodeData.from_stream(stream))
            except EOFError:
                raise ValueError("missing node description") from None
        matrix = [[False] * (size + 1) for _ in range(size + 1)]
        for from_node, to_node in _pairs(stream):
            if 1 <= from_node <= size and 1 <= to_node <= size:
                matrix[from_node][to_node] = True
        self._descriptions = descriptions
        self._matrix = matrix

    def _neighbours(self, node: int) -> Iterator[int]:
        return (j for j, linked in enumerate(self._matrix[node]) if linked)

    def display_graph(self) -> str:
        """List every node with its description and its outgoing edges."""
        lines = ["Graph: \n"]
        for node, description in enumerate(self._descriptions, start=1):
            lines.append(f"Node {node}   {description} \n")
            lines.extend(f"edge {node} {j}\n" for j in self._neighbours(node))
        return "".join(lines)

    def depth_first_search(self) -> list[int]:
        """Return the nodes in depth-first order, starting each tree at the lowest unvisited node."""
        visited: set[int] = set()
        order: list[int] = []
        for start in range(1, self.size + 1):
            if start in visited:
                continue
            stack = [start]
            while stack:
                node = stack.pop()
                if node in visited:
                    continue
                visited.add(node)
                order.append(node)
                stack.extend(reversed([j for j in self._neighbours(node) if j not in visited]))
        return order