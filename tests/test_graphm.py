import io

import pytest

from dsalab.graphm import GraphM

SAMPLE = """5
Aurora and 85th
Green Lake Starbucks
Woodland Park Zoo
Troll under bridge
PCC
1 2
1 3
2 4
3 4
4 5
0 0
"""


def built(text=SAMPLE):
    graph = GraphM()
    graph.build_graph(io.StringIO(text))
    return graph


def edges_of(graph):
    pairs = set()
    for line in graph.display_graph().splitlines():
        if line.startswith("edge "):
            _, a, b = line.split()
            pairs.add((int(a), int(b)))
    return pairs


def test_dfs_visits_every_node_once():
    order = built().depth_first_search()
    assert sorted(order) == [1, 2, 3, 4, 5]
    assert order[0] == 1


def test_dfs_follows_edges():
    graph = built()
    order = graph.depth_first_search()
    edges = edges_of(graph)
    for i, node in enumerate(order[1:], start=1):
        assert any((earlier, node) in edges for earlier in order[:i])


def test_dfs_chain_order():
    assert built("3\na\nb\nc\n1 3\n3 2\n0 0\n").depth_first_search() == [1, 3, 2]


def test_dfs_includes_disconnected_nodes():
    assert built("2\na\nb\n0 0\n").depth_first_search() == [1, 2]


def test_dfs_is_repeatable():
    graph = built()
    first = graph.depth_first_search()
    second = graph.depth_first_search()
    assert first == [1, 2, 4, 5, 3]
    assert second == [1, 2, 4, 5, 3]


def test_display_graph():
    graph = built()
    text = graph.display_graph()
    assert text.startswith("Graph: \n")
    assert "Node 1   Aurora and 85th \n" in text
    assert "edge 1 2\n" in text
    assert "edge 2 1\n" not in text


def test_edges_round_trip():
    assert edges_of(built()) == {(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)}


def test_out_of_range_edges_skipped():
    graph = built("2\na\nb\n1 7\n0 0\n")
    assert edges_of(graph) == set()


def test_empty_stream_raises_eof():
    with pytest.raises(EOFError):
        GraphM().build_graph(io.StringIO("\n\n"))


def test_missing_description():
    with pytest.raises(ValueError):
        GraphM().build_graph(io.StringIO("3\na\n"))


def test_too_many_nodes():
    with pytest.raises(ValueError):
        GraphM().build_graph(io.StringIO("150\n"))