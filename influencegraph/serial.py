"""Serial influence scoring from retweet / reply / mention interactions."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_DATASET = "combined_higgs_dataset.edgelist"
RETWEET_WEIGHT = 0.5
REPLY_WEIGHT = 0.3
MENTION_WEIGHT = 0.2
_FIELDS = 5


@dataclass(frozen=True)
class Interaction:
    """Interaction counts from one user towards a target user."""

    target: int
    retweet: int
    reply: int
    mention: int

    @property
    def weight(self) -> float:
        """Weighted strength of the interaction."""
        return (
            self.retweet * RETWEET_WEIGHT
            + self.reply * REPLY_WEIGHT
            + self.mention * MENTION_WEIGHT
        )


def _tokens(path: str | Path) -> Iterator[str]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            yield from line.split()


def _records(path: str | Path) -> Iterator[tuple[int, ...]]:
    record: list[int] = []
    for token in _tokens(path):
        try:
            record.append(int(token))
        except ValueError:
            return
        if len(record) == _FIELDS:
            yield tuple(record)
            record = []


def read_graph(path: str | Path) -> dict[int, list[Interaction]]:
    """Read `source target retweet reply mention` records until the first malformed one."""
    graph: dict[int, list[Interaction]] = {}
    for source, target, retweet, reply, mention in _records(path):
        graph.setdefault(source, []).append(Interaction(target, retweet, reply, mention))
    return graph


def calculate_influence(
    graph: dict[int, list[Interaction]], steps: int = 3
) -> dict[int, float]:
    """Propagate influence along interactions for a number of steps."""
    influence = {source: 1.0 for source in graph}
    for _ in range(steps):
        updated = dict(influence)
        for source, interactions in graph.items():
            source_score = influence.get(source, 0.0)
            for interaction in interactions:
                updated[interaction.target] = (
                    updated.get(interaction.target, 0.0) + source_score * interaction.weight
                )
        influence = updated
    return influence


def top_influencers(influence: dict[int, float], n: int = 10) -> list[tuple[int, float]]:
    """The `n` highest scoring users, highest first."""
    if n <= 0:
        return []
    ranked = sorted(influence.items(), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def format_top(influence: dict[int, float], n: int = 10) -> str:
    """Render the ranking of the strongest users."""
    lines = [f"\nTop {n} Influential Users:\n"]
    lines.extend(
        f"User {user} → Influence Score: {score:g}\n"
        for user, score in top_influencers(influence, n)
    )
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Score users of an interaction edge list and print the strongest ones."""
    parser = argparse.ArgumentParser(description="Serial influence scoring.")
    parser.add_argument("path", nargs="?", default=DEFAULT_DATASET)
    parser.add_argument("--steps", type=int, default=3)
    parser.add_argument("--top", type=int, default=10)
    args = parser.parse_args(argv)

    try:
        graph = read_graph(args.path)
    except OSError:
        print(f"Error opening file: {args.path}", file=sys.stderr)
        graph = {}

    if not graph:
        print("Graph is empty or file not found.", file=sys.stderr)
        return 1

    print(f"Graph loaded with {len(graph)} users.")
    influence = calculate_influence(graph, args.steps)
    print(format_top(influence, args.top), end="")
    return 0