import pytest

from dsalab.graph import Graph, TravelTimes


def _graph(n, edges):
    graph = Graph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


EDGES = [(0, 1), (0, 2), (1, 3)]


def test_matrix_is_symmetric_and_matches_edges():
    matrix = _graph(4, EDGES).matrix()
    for u in range(4):
        for v in range(4):
            assert matrix[u][v] == matrix[v][u]
            assert matrix[u][v] == int((u, v) in EDGES or (v, u) in EDGES)


def test_matrix_is_a_copy():
    graph = _graph(4, EDGES)
    graph.matrix()[0][3] = 1
    assert graph.matrix()[0][3] == 0


def test_bfs_order():
    assert _graph(4, EDGES).bfs(0) == [0, 1, 2, 3]


def test_dfs_prefers_highest_neighbour():
    assert _graph(4, EDGES).dfs(0) == [0, 2, 1, 3]


@pytest.mark.parametrize("start", range(5))
def test_traversals_cover_component(start):
    graph = _graph(6, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])
    for order in (graph.bfs(start), graph.dfs(start)):
        assert order[0] == start
        assert sorted(order) == [0, 1, 2, 3, 4]


def test_isolated_start():
    graph = _graph(3, [(0, 1)])
    assert graph.bfs(2) == [2]
    assert graph.dfs(2) == [2]


def test_repeated_traversals_agree():
    graph = _graph(4, EDGES)
    assert graph.bfs(0) == [0, 1, 2, 3]
    assert graph.bfs(0) == [0, 1, 2, 3]
    assert graph.bfs(3) == [3, 1, 0, 2]
    assert graph.dfs(0) == [0, 2, 1, 3]
    assert graph.dfs(0) == [0, 2, 1, 3]
    assert graph.dfs(3) == [3, 1, 0, 2]


def test_out_of_range_vertices():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.bfs(-1)
    with pytest.raises(IndexError):
        graph.dfs(3)


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        Graph(0)


def test_travel_time_lookup():
    table = TravelTimes(["Pune", "Mumbai"], [[0, 3], [4, 0]])
    assert table.time("Pune", "Mumbai") == 3
    assert table.time("Mumbai", "Pune") == 4


def test_travel_table_format():
    table = TravelTimes(["Pune", "Mumbai"], [[0, 3], [4, 0]])
    assert table.format_table() == "0 3 \n4 0 \n"


def test_travel_table_shape_checked():
    with pytest.raises(ValueError):
        TravelTimes(["Pune", "Mumbai"], [[0, 3]])
    with pytest.raises(ValueError):
        TravelTimes(["Pune", "Mumbai"], [[0, 3], [4]])


def test_unknown_city():
    table = TravelTimes(["Pune"], [[0]])
    with pytest.raises(KeyError):
        table.time("Pune", "Delhi")