import pytest

from algocollection.graphs import (
    adjacency,
    bfs_distances,
    dijkstra,
    find_cycle,
    is_connected,
    message_route,
)

BFS_EDGES = [
    (1, 2), (1, 3), (1, 4), (2, 5), (2, 6),
    (3, 7), (3, 8), (4, 9), (6, 10), (7, 10),
]

DIJKSTRA_EDGES = [(1, 4, 100), (1, 3, 200), (2, 1, 100), (5, 2, 200), (3, 5, 300)]


def test_adjacency_lists_both_directions():
    graph = adjacency(3, [(1, 2), (2, 3)])
    assert graph == {1: [2], 2: [1, 3], 3: [2]}


def test_adjacency_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        adjacency(3, [(1, 4)])


def test_bfs_distance_from_source_example():
    distances = bfs_distances(10, BFS_EDGES, 1)
    assert distances[10] == 3
    assert distances[1] == 0


def test_bfs_distances_differ_by_at_most_one_along_edges():
    distances = bfs_distances(10, BFS_EDGES, 1)
    assert set(distances) == set(range(1, 11))
    for x, y in BFS_EDGES:
        assert abs(distances[x] - distances[y]) <= 1


def test_bfs_omits_unreachable_nodes():
    distances = bfs_distances(4, [(1, 2)], 1)
    assert set(distances) == {1, 2}


def test_dijkstra_source_example():
    distances = dijkstra(5, DIJKSTRA_EDGES, 1)
    assert [distances[node] for node in range(1, 6)] == [0, 100, 200, 100, 300]


def test_dijkstra_unreachable_is_none():
    distances = dijkstra(3, [(1, 2, 5)], 1)
    assert distances[3] is None
    assert distances[2] == 5


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)], 1)


def test_message_route_shortest():
    route = message_route(5, [(1, 2), (1, 3), (1, 4), (2, 3), (5, 4)])
    assert route == [1, 4, 5]


def test_message_route_is_a_path_of_edges():
    route = message_route(10, BFS_EDGES)
    edges = {frozenset(edge) for edge in BFS_EDGES}
    assert route[0] == 1 and route[-1] == 10
    assert len(route) - 1 == bfs_distances(10, BFS_EDGES, 1)[10]
    for a, b in zip(route, route[1:]):
        assert frozenset((a, b)) in edges


def test_message_route_impossible():
    assert message_route(4, [(1, 2), (3, 4)]) is None


def test_is_connected():
    assert is_connected(10, BFS_EDGES) is True
    assert is_connected(11, BFS_EDGES) is False


def test_is_connected_rejects_empty_graph():
    with pytest.raises(ValueError):
        is_connected(0, [])


def test_find_cycle_returns_closed_walk_of_edges():
    edges = [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)]
    cycle = find_cycle(5, edges)
    edge_set = {frozenset(edge) for edge in edges}
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 4
    assert len(set(cycle[:-1])) == len(cycle) - 1
    for a, b in zip(cycle, cycle[1:]):
        assert frozenset((a, b)) in edge_set


def test_find_cycle_none_in_tree():
    assert find_cycle(10, [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]) is None


def test_find_cycle_ignores_repeated_edge():
    assert find_cycle(2, [(1, 2), (1, 2)]) is None


def test_find_cycle_self_loop():
    assert find_cycle(3, [(1, 2), (3, 3)]) == [3, 3]