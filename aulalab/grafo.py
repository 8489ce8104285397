"""Undirected weighted graph of offices with shortest routes and traversals."""

from __future__ import annotations

import argparse
import math
import sys
from collections import deque
from collections.abc import Sequence

UNREACHABLE = math.inf
NO_ROUTE = "No hay ruta"

Matrix = list[list[float]]
Routes = list[list["int | None"]]

_SEDES_EDGES = (
    (0, 1, 9),
    (0, 2, 7),
    (1, 2, 2),
    (1, 3, 5),
    (2, 3, 2),
)


class Graph:
    """An undirected graph with weighted edges between numbered nodes."""

    def __init__(self, num_nodes: int) -> None:
        if num_nodes < 0:
            raise ValueError("the number of nodes cannot be negative")
        self.num_nodes = num_nodes
        self._adjacency: list[list[int]] = [[] for _ in range(num_nodes)]
        self._costs: Matrix = [
            [0 if row == column else UNREACHABLE for column in range(num_nodes)]
            for row in range(num_nodes)
        ]

    def _check(self, node: int) -> None:
        if not 0 <= node < self.num_nodes:
            raise IndexError(f"node {node} is not in the graph")

    def neighbors(self, node: int) -> list[int]:
        """Return the neighbours of node in the order their edges were added."""
        self._check(node)
        return list(self._adjacency[node])

    def add_edge(self, origin: int, destination: int, cost: float) -> None:
        """Connect origin and destination in both directions with the given cost."""
        self._check(origin)
        self._check(destination)
        self._adjacency[origin].append(destination)
        self._adjacency[destination].append(origin)
        self._costs[origin][destination] = cost
        self._costs[destination][origin] = cost

    def floyd_warshall(self) -> tuple[Matrix, Routes]:
        """Compute all-pairs shortest distances and predecessor routes.

        routes[i][j] is the node before j on the best path from i, or None
        when there is no path (or i == j).
        """
        size = self.num_nodes
        distances = [list(row) for row in self._costs]
        routes: Routes = [
            [
                origin if origin != target and cost != UNREACHABLE else None
                for target, cost in enumerate(row)
            ]
            for origin, row in enumerate(self._costs)
        ]
        for middle in range(size):
            through = distances[middle]
            for origin, row in enumerate(distances):
                to_middle = row[middle]
                if to_middle == UNREACHABLE:
                    continue
                for target in range(size):
                    candidate = to_middle + through[target]
                    if row[target] > candidate:
                        row[target] = candidate
                        routes[origin][target] = routes[middle][target]
        return distances, routes

    def bfs(self, start: int) -> list[int]:
        """Return the nodes in breadth-first order from start."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the nodes in depth-first order from start."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order


def route(routes: Routes, origin: int, destination: int) -> list[int] | None:
    """Return the node sequence from origin to destination, or None if unreachable."""
    path = [destination]
    node = destination
    while node != origin:
        previous = routes[origin][node]
        if previous is None:
            return None
        path.append(previous)
        node = previous
    path.reverse()
    return path


def format_route(routes: Routes, origin: int, destination: int) -> str:
    """Render a route as 'a -> b -> c', or the no-route message."""
    nodes = route(routes, origin, destination)
    if nodes is None:
        return NO_ROUTE
    return " -> ".join(str(node) for node in nodes)


def hop_counts(routes: Routes, source: int = 0) -> dict[int, int]:
    """Count the links on the best route from source to every other node."""
    counts: dict[int, int] = {}
    for target in range(len(routes)):
        if target == source:
            continue
        hops = 1
        node = target
        while (previous := routes[source][node]) is not None and previous != source:
            hops += 1
            node = previous
        counts[target] = hops
    return counts


def _format_cost(cost: float) -> str:
    if cost == UNREACHABLE:
        return "infinito"
    return str(int(cost)) if float(cost).is_integer() else str(cost)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the optimal routes from office S (node 0) and the maximum hop count."""
    parser = argparse.ArgumentParser(
        description="Rutas optimas entre sedes con Floyd-Warshall."
    )
    parser.parse_args(argv)

    graph = Graph(4)
    for origin, destination, cost in _SEDES_EDGES:
        graph.add_edge(origin, destination, cost)

    distances, routes = graph.floyd_warshall()
    hops = hop_counts(routes, 0)

    out = sys.stdout
    out.write("Rutas optimas desde S (0):\n")
    for target, count in hops.items():
        out.write(
            f"0 -> {target}: Coste = {_format_cost(distances[0][target])}, "
            f"Saltos = {count}, Ruta: {format_route(routes, 0, target)}\n"
        )
    max_hops = max(hops.values(), default=0)
    out.write(f"\nNumero maximo de enlaces (respuesta final): {max_hops}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())