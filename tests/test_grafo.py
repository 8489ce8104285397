import pytest

from aulalab.grafo import (
    NO_ROUTE,
    UNREACHABLE,
    Graph,
    format_route,
    hop_counts,
    main,
    route,
)

EDGES = {(0, 1): 9, (0, 2): 7, (1, 2): 2, (1, 3): 5, (2, 3): 2}


def _cost(a, b):
    return EDGES.get((a, b), EDGES.get((b, a)))


@pytest.fixture
def sedes():
    graph = Graph(4)
    for (a, b), cost in EDGES.items():
        graph.add_edge(a, b, cost)
    return graph


def test_distances_symmetric_with_zero_diagonal(sedes):
    distances, _ = sedes.floyd_warshall()
    for i in range(4):
        assert distances[i][i] == 0
        for j in range(4):
            assert distances[i][j] == distances[j][i]


def test_route_cost_matches_distance(sedes):
    distances, routes = sedes.floyd_warshall()
    for i in range(4):
        for j in range(4):
            path = route(routes, i, j)
            assert path[0] == i and path[-1] == j
            total = sum(_cost(a, b) for a, b in zip(path, path[1:]))
            assert total == distances[i][j]


def test_worked_example_from_s_to_3(sedes):
    distances, routes = sedes.floyd_warshall()
    assert distances[0][3] == 9
    assert route(routes, 0, 3) == [0, 2, 3]


def test_hop_counts_match_route_lengths(sedes):
    _, routes = sedes.floyd_warshall()
    counts = hop_counts(routes, 0)
    assert set(counts) == {1, 2, 3}
    for target, hops in counts.items():
        assert hops == len(route(routes, 0, target)) - 1


def test_format_route(sedes):
    _, routes = sedes.floyd_warshall()
    assert format_route(routes, 0, 0) == "0"
    assert format_route(routes, 0, 3).split(" -> ") == [
        str(node) for node in route(routes, 0, 3)
    ]


def test_unreachable_node():
    graph = Graph(3)
    graph.add_edge(0, 1, 4)
    distances, routes = graph.floyd_warshall()
    assert distances[0][2] == UNREACHABLE
    assert route(routes, 0, 2) is None
    assert format_route(routes, 0, 2) == NO_ROUTE


def test_bfs_visits_in_nondecreasing_hop_order(sedes):
    order = sedes.bfs(3)
    assert order[0] == 3
    assert sorted(order) == [0, 1, 2, 3]
    depth = {3: 0}
    for node in order:
        for neighbour in sedes.neighbors(node):
            depth.setdefault(neighbour, depth[node] + 1)
    levels = [depth[node] for node in order]
    assert levels == sorted(levels)


def test_bfs_star_follows_insertion_order():
    graph = Graph(4)
    leaves = [3, 1, 2]
    for leaf in leaves:
        graph.add_edge(0, leaf, 1)
    assert graph.bfs(0) == [0] + leaves


def test_dfs_each_node_adjacent_to_earlier(sedes):
    order = sedes.dfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]
    for position, node in enumerate(order[1:], start=1):
        assert any(earlier in sedes.neighbors(node) for earlier in order[:position])


def test_traversal_stays_in_component():
    graph = Graph(4)
    graph.add_edge(0, 1, 1)
    graph.add_edge(2, 3, 1)
    assert sorted(graph.bfs(0)) == [0, 1]
    assert sorted(graph.dfs(3)) == [2, 3]


def test_invalid_node_raises():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 5, 1)
    with pytest.raises(IndexError):
        graph.bfs(-1)


def test_main_reports_max_links(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Rutas optimas desde S (0):\n")
    assert "Numero maximo de enlaces (respuesta final): 2" in out