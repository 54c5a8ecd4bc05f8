"""SCC/CAC partitioning of directed graphs (discover / explore / finish)."""

from __future__ import annotations

import gzip
import io
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import IO, Iterator

_GZIP_MAGIC = b"\x1f\x8b"


class ComponentType(IntEnum):
    """Kind of component a vertex has been assigned to."""

    UNDEFINED = 0
    SCC = 1
    CAC = 2


@dataclass
class Vertex:
    """A vertex together with its partitioning state."""

    id: int
    index: int = -1
    lowlink: int = -1
    level: int = 0
    depth: int = 0
    type: ComponentType = ComponentType.UNDEFINED
    on_stack: bool = False
    influence_power: float = 0.0
    neighbors: list[int] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)

    def _mark_discovered(self, index: int) -> None:
        self.index = index
        self.lowlink = index
        self.level = 1
        self.depth = 1
        self.on_stack = True


@dataclass(frozen=True)
class GraphStats:
    """Counts describing a partitioned graph."""

    vertices: int
    edges: int
    components: int
    scc_count: int
    cac_count: int

    def format(self) -> str:
        """Render the statistics as a multi-line report."""
        return "\n".join(
            [
                "Graph Statistics:",
                f"Number of vertices: {self.vertices}",
                f"Number of edges: {self.edges}",
                f"Number of components: {self.components}",
                f"Number of SCC components: {self.scc_count}",
                f"Number of CAC components: {self.cac_count}",
            ]
        )


class Graph:
    """Directed weighted graph that can be split into SCC and CAC components."""

    def __init__(self) -> None:
        self.vertices: dict[int, Vertex] = {}
        self.edges: list[tuple[int, int]] = []
        self.weighted_edges: list[tuple[int, int]] = []
        self.components: dict[int, list[int]] = {}
        self.component_types: dict[int, ComponentType] = {}
        self._index = 0

    def add_vertex(self, vertex_id: int) -> Vertex:
        """Add a vertex if it is not present yet and return it."""
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            vertex = Vertex(vertex_id)
            self.vertices[vertex_id] = vertex
        return vertex

    def add_edge(self, source: int, target: int, weight: float = 1.0) -> None:
        """Add a directed edge, creating its endpoints as needed."""
        origin = self.add_vertex(source)
        self.add_vertex(target)
        origin.neighbors.append(target)
        origin.weights.append(weight)
        self.edges.append((source, target))
        if weight != 1.0:
            self.weighted_edges.append((source, target))

    def partition(self) -> None:
        """Partition every undiscovered vertex into components."""
        self._index = 0
        for vertex_id, vertex in list(self.vertices.items()):
            if vertex.index == -1:
                self.discover(vertex_id)

    def _next_index(self) -> int:
        value = self._index
        self._index += 1
        return value

    def discover(self, vertex_id: int) -> None:
        """Run the iterative depth-first discovery from one vertex."""
        root = self.add_vertex(vertex_id)
        root._mark_discovered(self._next_index())
        stack = [vertex_id]

        while stack:
            current_id = stack[-1]
            current = self.vertices[current_id]
            descended = False

            for target_id in current.neighbors:
                target = self.vertices[target_id]
                if target.index == -1:
                    target._mark_discovered(self._next_index())
                    stack.append(target_id)
                    descended = True
                    break
                if target.on_stack:
                    current.lowlink = min(current.lowlink, target.index)
                if target.type != ComponentType.UNDEFINED:
                    current.level = max(current.level, target.level + 1)

            if not descended:
                stack.pop()
                current.on_stack = False
                self.finish(current_id)

    def explore(self, vertex_id: int, target_id: int) -> None:
        """Follow the edge vertex -> target, discovering the target if needed."""
        vertex = self.add_vertex(vertex_id)
        target = self.add_vertex(target_id)

        if target.index == -1:
            self.discover(target_id)
            self.finish(target_id)

        if target.type != ComponentType.UNDEFINED:
            vertex.level = max(vertex.level, target.level + 1)
        else:
            vertex.level = max(vertex.level, target.level)
            vertex.lowlink = min(vertex.lowlink, target.lowlink)

    def finish(self, vertex_id: int) -> None:
        """Close the component rooted at a vertex if it is a root."""
        root = self.vertices[vertex_id]
        if root.lowlink != root.index:
            return

        root_index = root.index
        component: list[int] = []
        seen: set[int] = set()
        pending = [vertex_id]

        while pending:
            member_id = pending.pop()
            member = self.vertices[member_id]
            if member_id in seen or member.lowlink != root_index:
                continue
            seen.add(member_id)
            component.append(member_id)
            member.type = ComponentType.SCC
            member.level = root.level
            pending.extend(
                neighbor_id
                for neighbor_id in member.neighbors
                if self.vertices[neighbor_id].on_stack
                and self.vertices[neighbor_id].lowlink == root_index
            )

        self.components[root_index] = component
        self.component_types[root_index] = ComponentType.SCC

        if len(component) == 1:
            root.type = ComponentType.CAC
            self.component_types[root_index] = ComponentType.CAC
            merges = any(
                self.vertices[neighbor_id].type
                in (ComponentType.SCC, ComponentType.CAC)
                and self.vertices[neighbor_id].level == root.level - 1
                for neighbor_id in root.neighbors
            )
            if merges:
                root.level -= 1

    def component_of(self, vertex_id: int) -> int | None:
        """Return the key of the component holding a vertex, or None."""
        for key, members in self.components.items():
            if vertex_id in members:
                return key
        return None

    def stats(self) -> GraphStats:
        """Summarise vertex, edge and component counts."""
        types = list(self.component_types.values())
        return GraphStats(
            vertices=len(self.vertices),
            edges=len(self.edges),
            components=len(self.components),
            scc_count=types.count(ComponentType.SCC),
            cac_count=types.count(ComponentType.CAC),
        )


def _open_text(path: str | Path) -> IO[str]:
    with open(path, "rb") as probe:
        magic = probe.read(2)
    if magic == _GZIP_MAGIC:
        return io.TextIOWrapper(gzip.open(path, "rb"), encoding="utf-8", errors="replace")
    return open(path, encoding="utf-8", errors="replace")


def _parse_line(line: str) -> tuple[int, int, float] | None:
    tokens = line.split()
    if len(tokens) < 2:
        return None
    try:
        source, target = int(tokens[0]), int(tokens[1])
    except ValueError:
        return None
    weight = 1.0
    if len(tokens) > 2:
        try:
            weight = float(tokens[2])
        except ValueError:
            weight = 1.0
    return source, target, weight


def read_edge_list(path: str | Path) -> Iterator[tuple[int, int, float]]:
    """Yield (source, target, weight) from a plain or gzip-compressed edge list."""
    with _open_text(path) as handle:
        for line in handle:
            parsed = _parse_line(line)
            if parsed is not None:
                yield parsed


def load_graph(path: str | Path) -> Graph:
    """Build a graph from an edge-list file."""
    graph = Graph()
    for source, target, weight in read_edge_list(path):
        graph.add_edge(source, target, weight)
    return graph


def partition_slice(graph: Graph, rank: int, size: int) -> None:
    """Discover the share of vertices that belongs to one worker out of `size`."""
    if size <= 0:
        raise ValueError("size must be positive")
    if not 0 <= rank < size:
        raise ValueError("rank must lie in [0, size)")
    vertex_ids = list(graph.vertices)
    per_worker = len(vertex_ids) // size
    start = rank * per_worker
    end = len(vertex_ids) if rank == size - 1 else (rank + 1) * per_worker
    for vertex_id in vertex_ids[start:end]:
        if graph.vertices[vertex_id].index == -1:
            graph.discover(vertex_id)