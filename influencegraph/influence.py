"""Influence power measurement over a follower graph."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from influencegraph.partition import Graph

INTEREST_CATEGORIES: tuple[int, ...] = (1, 2, 3, 4, 5)
FRIENDSHIP_FACTORS: tuple[float, ...] = (0.1, 0.2, 0.3, 0.4, 0.5)
MAX_LEVEL = 3
_BLOCK = 10


@dataclass
class InfluenceVertex:
    """A user with its influence score and follow relations."""

    id: int
    interest_category: int
    influence_power: float = 0.0
    followers: list[int] = field(default_factory=list)
    following: list[int] = field(default_factory=list)


class InfluenceGraph:
    """Directed follower graph that scores the influence of each user."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.vertices: dict[int, InfluenceVertex] = {}
        self.edges: list[tuple[int, int]] = []
        self.weights: dict[tuple[int, int], float] = {}

    def add_vertex(self, vertex_id: int) -> InfluenceVertex:
        """Add a user with a random interest category if absent; return it."""
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            vertex = InfluenceVertex(vertex_id, self.rng.choice(INTEREST_CATEGORIES))
            self.vertices[vertex_id] = vertex
        return vertex

    def add_edge(self, source: int, target: int, weight: float = 1.0) -> None:
        """Record that `source` follows `target` with the given weight."""
        follower = self.add_vertex(source)
        followed = self.add_vertex(target)
        follower.following.append(target)
        followed.followers.append(source)
        self.weights[(source, target)] = weight
        self.edges.append((source, target))

    def edge_weight(self, source: int, target: int) -> float:
        """Weight of the edge source -> target, or 0.0 if there is none."""
        return self.weights.get((source, target), 0.0)

    def influence_of(self, vertex_id: int) -> float:
        """Influence power of a user, or 0.0 for an unknown user."""
        vertex = self.vertices.get(vertex_id)
        return vertex.influence_power if vertex is not None else 0.0

    def interest_similarity(self, u: int, v: int) -> float:
        """1.0 when two users share an interest category, 0.5 otherwise."""
        same = self.vertices[u].interest_category == self.vertices[v].interest_category
        return 1.0 if same else 0.5

    def mutual_followers(self, u: int, v: int) -> int:
        """Count followers of `v` that also follow `u`."""
        u_followers = set(self.vertices[u].followers)
        return sum(1 for follower in self.vertices[v].followers if follower in u_followers)

    def _spread_block(self, vertex_ids: list[int], block: int, level: int) -> None:
        alpha = FRIENDSHIP_FACTORS[level % len(FRIENDSHIP_FACTORS)]
        start = block * _BLOCK
        end = min((block + 1) * _BLOCK, len(vertex_ids))
        for u_id in vertex_ids[start:end]:
            for v_id in self.vertices[u_id].followers:
                psi = (
                    alpha
                    * self.interest_similarity(u_id, v_id)
                    * self.mutual_followers(u_id, v_id)
                )
                self.vertices[v_id].influence_power += psi

    def calculate_influence_power(self, workers: int = 4, damping: float = 0.85) -> None:
        """Compute the influence power of every user over a fixed number of levels."""
        if workers <= 0:
            raise ValueError("workers must be positive")
        total = len(self.vertices)
        num_components = max(total // _BLOCK, 1)
        per_worker = num_components // workers

        for level in range(MAX_LEVEL):
            vertex_ids = list(self.vertices)
            for worker in range(1, workers + 1):
                first = per_worker + (worker - 1) * num_components // workers
                for block in range(first, first + per_worker):
                    self._spread_block(vertex_ids, block, level)

            for vertex in self.vertices.values():
                share = len(vertex.followers) / total
                spread = 0.0
                for follower_id in vertex.followers:
                    follower_count = len(self.vertices[follower_id].followers) or 1
                    spread += self.edge_weight(follower_id, vertex.id) * share / follower_count
                vertex.influence_power = (1 - damping) * share + damping * spread

    def top_k(self, k: int) -> list[int]:
        """Ids of the `k` users with the highest influence power."""
        if k <= 0:
            return []
        ranked = sorted(
            self.vertices.values(), key=lambda vertex: vertex.influence_power, reverse=True
        )
        return [vertex.id for vertex in ranked[:k]]

    def summary(self) -> str:
        """Render counts, average influence and the five strongest users."""
        count = len(self.vertices)
        total = sum(vertex.influence_power for vertex in self.vertices.values())
        average = total / count if count else 0.0
        top = " ".join(
            f"{vertex_id}({self.vertices[vertex_id].influence_power:g})"
            for vertex_id in self.top_k(5)
        )
        return "\n".join(
            [
                "Influence Graph Statistics:",
                f"Vertices: {count}, Edges: {len(self.edges)}",
                f"Avg Influence: {average:g}",
                f"Top 5: {top}",
            ]
        )


def from_partition_graph(graph: Graph, rng: random.Random | None = None) -> InfluenceGraph:
    """Copy the vertices and weighted edges of a partition graph."""
    influence = InfluenceGraph(rng)
    for vertex_id, vertex in graph.vertices.items():
        influence.add_vertex(vertex_id)
        for neighbor, weight in zip(vertex.neighbors, vertex.weights):
            influence.add_edge(vertex_id, neighbor, weight)
    return influence