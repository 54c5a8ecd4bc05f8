"""Command-line entry points for partitioning and influence analysis."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from influencegraph.influence import from_partition_graph
from influencegraph.partition import load_graph, partition_slice

DEFAULT_DATASET = "higgs-social_network.edgelist.gz"
DEFAULT_WORKERS = 4
TOP_INFLUENCERS = 10


def run_pipeline(path: str | Path, rng: random.Random | None = None) -> str:
    """Partition the graph, measure influence and return the full report."""
    graph = load_graph(path)
    graph.partition()
    stats = graph.stats()

    influence = from_partition_graph(graph, rng)
    influence.calculate_influence_power(DEFAULT_WORKERS)

    lines = [
        "=== Phase 1: SCC/CAC Partitioning ===",
        "SCC/CAC Graph Statistics:",
        f"Vertices: {stats.vertices}, Edges: {stats.edges}",
        f"SCC components: {stats.scc_count}, CAC components: {stats.cac_count}",
        "",
        "=== Phase 2: Influence Analysis ===",
        influence.summary(),
        "",
        f"Top {TOP_INFLUENCERS} Influencers:",
    ]
    lines.extend(
        f"{rank}. User {user} (IP: {influence.influence_of(user):g})"
        for rank, user in enumerate(influence.top_k(TOP_INFLUENCERS), start=1)
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run partitioning and influence analysis on an edge list."""
    parser = argparse.ArgumentParser(description="Social network analysis.")
    parser.add_argument("path", nargs="?", default=DEFAULT_DATASET)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        report = run_pipeline(args.path, random.Random(args.seed))
    except OSError:
        print(f"Failed to open file: {args.path}", file=sys.stderr)
        return 1
    print(report)
    return 0


def partition_main(argv: list[str] | None = None) -> int:
    """Partition an edge list and print its statistics."""
    parser = argparse.ArgumentParser(description="SCC/CAC partitioning.")
    parser.add_argument("path", nargs="?", default=DEFAULT_DATASET)
    parser.add_argument("--size", type=int, default=1, help="number of workers sharing the graph")
    args = parser.parse_args(argv)

    try:
        graph = load_graph(args.path)
    except OSError:
        print(f"Failed to open file: {args.path}", file=sys.stderr)
        return 1
    try:
        partition_slice(graph, 0, args.size)
    except ValueError as error:
        print(str(error), file=sys.stderr)
        return 2
    print("After partitioning: " + graph.stats().format())
    return 0