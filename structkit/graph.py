"""Weighted graphs with Dijkstra and Bellman-Ford shortest paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MAX_VERTICES = 100
INF = 1_000_000


class NegativeCycleError(Exception):
    """Raised when Bellman-Ford finds a negative-weight cycle."""


def _check_count(num_vertices: int) -> None:
    if not 0 <= num_vertices <= MAX_VERTICES:
        raise ValueError(f"number of vertices must be between 0 and {MAX_VERTICES}")


def _check_vertex(vertex: int, num_vertices: int) -> None:
    if not 0 <= vertex < num_vertices:
        raise IndexError(f"vertex {vertex} out of range")


class Graph:
    """An undirected weighted graph stored as adjacency lists."""

    def __init__(self, num_vertices: int) -> None:
        _check_count(num_vertices)
        self.num_vertices = num_vertices
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Connect src and dest in both directions."""
        _check_vertex(src, self.num_vertices)
        _check_vertex(dest, self.num_vertices)
        self._adjacency[src].insert(0, (dest, weight))
        self._adjacency[dest].insert(0, (src, weight))

    def neighbors(self, vertex: int) -> list[tuple[int, int]]:
        """Return (vertex, weight) pairs, most recently added first."""
        _check_vertex(vertex, self.num_vertices)
        return list(self._adjacency[vertex])

    def dijkstra(self, start: int) -> list[int]:
        """Return shortest distances from start; unreachable vertices get INF."""
        _check_vertex(start, self.num_vertices)
        distances = [INF] * self.num_vertices
        distances[start] = 0
        visited = [False] * self.num_vertices

        for _ in range(self.num_vertices):
            candidates = [
                (distance, vertex)
                for vertex, distance in enumerate(distances)
                if not visited[vertex] and distance < INF
            ]
            if not candidates:
                break
            _, u = min(candidates)
            visited[u] = True
            for v, weight in self._adjacency[u]:
                if not visited[v] and distances[u] + weight < distances[v]:
                    distances[v] = distances[u] + weight
        return distances


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed weighted edge."""

    src: int
    dest: int
    weight: int


class BellmanGraph:
    """A directed weighted graph stored as an edge list."""

    def __init__(self, num_vertices: int) -> None:
        _check_count(num_vertices)
        self.num_vertices = num_vertices
        self.edges: list[Edge] = []

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        _check_vertex(src, self.num_vertices)
        _check_vertex(dest, self.num_vertices)
        self.edges.append(Edge(src, dest, weight))

    def _relaxable(self, distances: list[int], edge: Edge) -> bool:
        return distances[edge.src] != INF and distances[edge.src] + edge.weight < distances[edge.dest]

    def bellman_ford(self, src: int) -> list[int]:
        """Return shortest distances from src; raise NegativeCycleError on a negative cycle."""
        _check_vertex(src, self.num_vertices)
        distances = [INF] * self.num_vertices
        distances[src] = 0

        for _ in range(self.num_vertices - 1):
            for edge in self.edges:
                if self._relaxable(distances, edge):
                    distances[edge.dest] = distances[edge.src] + edge.weight

        if any(self._relaxable(distances, edge) for edge in self.edges):
            raise NegativeCycleError("Negative-weight cycle detected!")
        return distances


def main(argv: Optional[list[str]] = None) -> int:
    """Run Dijkstra and Bellman-Ford on sample graphs."""
    graph = Graph(6)
    for src, dest, weight in [
        (0, 1, 7), (0, 2, 9), (0, 5, 14), (1, 2, 10), (1, 3, 15),
        (2, 3, 11), (2, 5, 2), (3, 4, 6), (4, 5, 9),
    ]:
        graph.add_edge(src, dest, weight)

    print("Shortest distances from vertex 0:")
    for vertex, distance in enumerate(graph.dijkstra(0)):
        print(f"To {vertex}: {distance}")

    directed = BellmanGraph(5)
    for src, dest, weight in [
        (0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2),
        (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3),
    ]:
        directed.add_edge(src, dest, weight)

    try:
        distances = directed.bellman_ford(0)
    except NegativeCycleError as error:
        print(error)
    else:
        print("Vertex distances from source 0:")
        for vertex, distance in enumerate(distances):
            print(f"To {vertex}: {distance}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())