import gzip
import random

import pytest

from influencegraph.cli import main, partition_main, run_pipeline
from influencegraph.partition import load_graph

EDGES = "1 2\n2 3\n3 1\n3 4 2.5\n"


@pytest.fixture
def edge_file(tmp_path):
    path = tmp_path / "edges.gz"
    with gzip.open(path, "wt", encoding="utf-8") as handle:
        handle.write(EDGES)
    return path


def _ranked_lines(report):
    return [line for line in report.splitlines() if ". User " in line]


def test_pipeline_reports_graph_counts(edge_file):
    report = run_pipeline(edge_file, random.Random(1))
    assert "=== Phase 1: SCC/CAC Partitioning ===" in report
    assert "=== Phase 2: Influence Analysis ===" in report
    assert "Vertices: 4, Edges: 4" in report


def test_pipeline_component_counts_match_partition(edge_file):
    graph = load_graph(edge_file)
    graph.partition()
    stats = graph.stats()
    report = run_pipeline(edge_file, random.Random(1))
    assert f"SCC components: {stats.scc_count}, CAC components: {stats.cac_count}" in report


def test_pipeline_lists_every_vertex_when_small(edge_file):
    ranked = _ranked_lines(run_pipeline(edge_file, random.Random(2)))
    assert len(ranked) == 4
    assert ranked[0].startswith("1. User ")


def test_pipeline_ranks_heavily_weighted_user_first(edge_file):
    report = run_pipeline(edge_file, random.Random(7))
    ranked = _ranked_lines(report)
    assert ranked[0].startswith("1. User 4 ")
    users = sorted(int(line.split("User ")[1].split()[0]) for line in ranked)
    assert users == [1, 2, 3, 4]
    assert report == run_pipeline(edge_file, random.Random(7))


def test_pipeline_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_pipeline(tmp_path / "missing.gz")


def test_main_prints_report(edge_file, capsys):
    assert main([str(edge_file), "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Top 10 Influencers:" in out


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.gz"
    assert main([str(missing)]) == 1
    assert f"Failed to open file: {missing}" in capsys.readouterr().err


def test_partition_main_prints_stats(edge_file, capsys):
    assert partition_main([str(edge_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("After partitioning: Graph Statistics:")
    assert "Number of vertices: 4" in out
    assert "Number of edges: 4" in out


def test_partition_main_rejects_bad_size(edge_file, capsys):
    assert partition_main([str(edge_file), "--size", "0"]) == 2
    assert "size must be positive" in capsys.readouterr().err


def test_partition_main_missing_file(tmp_path):
    assert partition_main([str(tmp_path / "missing.gz")]) == 1