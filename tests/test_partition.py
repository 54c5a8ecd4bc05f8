import gzip

import pytest

from influencegraph.partition import (
    ComponentType,
    Graph,
    GraphStats,
    load_graph,
    partition_slice,
    read_edge_list,
)


def _chain(n):
    graph = Graph()
    for i in range(n - 1):
        graph.add_edge(i, i + 1)
    return graph


def test_add_vertex_is_idempotent():
    graph = Graph()
    graph.add_vertex(7)
    graph.add_vertex(7)
    assert list(graph.vertices) == [7]
    vertex = graph.vertices[7]
    assert vertex.index == -1
    assert vertex.lowlink == -1
    assert vertex.type == ComponentType.UNDEFINED
    assert vertex.on_stack is False


def test_add_edge_records_neighbors_and_weights():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(1, 3, 2.5)
    assert graph.vertices[1].neighbors == [2, 3]
    assert graph.vertices[1].weights == [1.0, 2.5]
    assert graph.edges == [(1, 2), (1, 3)]
    assert graph.weighted_edges == [(1, 3)]
    assert set(graph.vertices) == {1, 2, 3}


def test_partition_assigns_distinct_indices():
    graph = _chain(6)
    graph.partition()
    indices = sorted(v.index for v in graph.vertices.values())
    assert indices == list(range(6))
    assert all(not v.on_stack for v in graph.vertices.values())


def test_acyclic_graph_every_vertex_is_cac():
    graph = _chain(5)
    graph.add_edge(0, 3)
    graph.partition()
    assert len(graph.components) == len(graph.vertices)
    for vertex_id, vertex in graph.vertices.items():
        assert vertex.type == ComponentType.CAC
        assert graph.component_of(vertex_id) == vertex.index
    assert all(t == ComponentType.CAC for t in graph.component_types.values())


def test_stats_match_partition():
    graph = _chain(4)
    graph.partition()
    stats = graph.stats()
    assert stats.vertices == len(graph.vertices)
    assert stats.edges == len(graph.edges)
    assert stats.components == len(graph.components)
    assert stats.scc_count + stats.cac_count == stats.components


def test_stats_format():
    stats = GraphStats(vertices=2, edges=1, components=2, scc_count=0, cac_count=2)
    text = stats.format()
    lines = text.splitlines()
    assert lines[0] == "Graph Statistics:"
    assert "Number of vertices: 2" in lines
    assert "Number of edges: 1" in lines
    assert "Number of CAC components: 2" in lines


def test_cycle_member_left_without_component():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(2, 1)
    graph.partition()
    assert graph.component_of(1) == graph.vertices[1].index
    assert graph.component_of(2) is None
    assert graph.vertices[2].lowlink == graph.vertices[1].index


def test_component_of_unknown_vertex():
    graph = _chain(3)
    graph.partition()
    assert graph.component_of(99) is None


def test_explore_discovers_target_and_raises_level():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.explore(1, 2)
    target = graph.vertices[2]
    assert target.index != -1
    assert target.type == ComponentType.CAC
    assert graph.vertices[1].level == target.level + 1


def test_explore_with_undefined_target_takes_lowlink():
    graph = Graph()
    graph.add_edge(1, 2)
    graph.add_edge(2, 1)
    graph.partition()
    source = graph.vertices[1]
    target = graph.vertices[2]
    target.lowlink = -5
    source.lowlink = 10
    graph.explore(1, 2)
    assert source.lowlink == -5


def test_read_edge_list_plain(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("1 2\n3 4 0.5\n\nbad line\n5 6 x\n")
    assert list(read_edge_list(path)) == [(1, 2, 1.0), (3, 4, 0.5), (5, 6, 1.0)]


def test_read_edge_list_gzip(tmp_path):
    path = tmp_path / "edges.edgelist.gz"
    with gzip.open(path, "wt") as handle:
        handle.write("10 20\n20 30 2.0\n")
    assert list(read_edge_list(path)) == [(10, 20, 1.0), (20, 30, 2.0)]


def test_read_edge_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_edge_list(tmp_path / "absent.gz"))


def test_load_graph_builds_edges(tmp_path):
    path = tmp_path / "edges.gz"
    with gzip.open(path, "wt") as handle:
        handle.write("1 2\n2 3 4.0\n")
    graph = load_graph(path)
    assert graph.edges == [(1, 2), (2, 3)]
    assert graph.weighted_edges == [(2, 3)]
    assert graph.vertices[2].weights == [4.0]


def test_partition_slice_single_worker_covers_all():
    graph = _chain(5)
    partition_slice(graph, 0, 1)
    assert all(v.index != -1 for v in graph.vertices.values())
    assert len(graph.components) == len(graph.vertices)


def test_partition_slice_first_half_only():
    graph = Graph()
    for vertex_id in range(4):
        graph.add_vertex(vertex_id)
    partition_slice(graph, 0, 2)
    discovered = {vid for vid, v in graph.vertices.items() if v.index != -1}
    assert discovered == {0, 1}


def test_partition_slice_last_worker_takes_remainder():
    graph = Graph()
    for vertex_id in range(5):
        graph.add_vertex(vertex_id)
    partition_slice(graph, 1, 2)
    discovered = {vid for vid, v in graph.vertices.items() if v.index != -1}
    assert discovered == {2, 3, 4}


@pytest.mark.parametrize("rank,size", [(0, 0), (2, 2), (-1, 3)])
def test_partition_slice_rejects_bad_arguments(rank, size):
    with pytest.raises(ValueError):
        partition_slice(_chain(3), rank, size)