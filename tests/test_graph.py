import pytest

from dsakit.graph import bfs, dfs

GRAPH = [
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 1, 1, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 0, 0, 0],
    [0, 1, 0, 0, 1, 1, 0, 0],
    [0, 1, 1, 1, 0, 1, 0, 0],
    [0, 0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 1, 0, 0],
]


def test_bfs_source_example():
    assert bfs(GRAPH, 2) == [2, 1, 4, 3, 5, 6, 7]


def test_dfs_source_example():
    assert dfs(GRAPH, 1) == [1, 2, 4, 3, 5, 6, 7]


@pytest.mark.parametrize("traverse", [bfs, dfs])
@pytest.mark.parametrize("start", range(1, 8))
def test_visits_each_reachable_vertex_once(traverse, start):
    order = traverse(GRAPH, start)
    assert order[0] == start
    assert len(order) == len(set(order))
    assert set(order) == set(range(1, 8))


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_isolated_vertex(traverse):
    assert traverse(GRAPH, 0) == [0]


def test_dfs_repeatable():
    first = dfs(GRAPH, 1)
    second = dfs(GRAPH, 1)
    assert first == [1, 2, 4, 3, 5, 6, 7]
    assert second == [1, 2, 4, 3, 5, 6, 7]


def test_bfs_levels_nondecreasing():
    order = bfs(GRAPH, 2)
    depth = {2: 0}
    for vertex in order:
        for neighbour, edge in enumerate(GRAPH[vertex]):
            if edge and neighbour not in depth:
                depth[neighbour] = depth[vertex] + 1
    depths = [depth[vertex] for vertex in order]
    assert depths == sorted(depths)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_start_out_of_range(traverse):
    with pytest.raises(IndexError):
        traverse(GRAPH, 8)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_non_square_matrix(traverse):
    with pytest.raises(ValueError):
        traverse([[0, 1], [1]], 0)