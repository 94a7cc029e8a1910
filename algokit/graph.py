"""Adjacency-list graphs with traversal, cycle detection and topological order."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator


class Graph:
    """A graph over integer nodes, stored as adjacency lists.

    Edges keep their insertion order and may carry an optional weight.
    """

    def __init__(self) -> None:
        self._adj: defaultdict[int, list[tuple[int, int | None]]] = defaultdict(list)

    def add_edge(
        self, u: int, v: int, directed: bool = False, weight: int | None = None
    ) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self._adj[u].append((v, weight))
        if not directed:
            self._adj[v].append((u, weight))

    def neighbours(self, node: int) -> list[int]:
        """Nodes adjacent to ``node``, in the order their edges were added."""
        return [target for target, _ in self._adj.get(node, ())]

    def format_adjacency(self, n: int) -> str:
        """Adjacency lists of nodes 0..n inclusive, one line per node."""
        lines = []
        for node in range(n + 1):
            entries = "".join(
                f"{target}," if weight is None else f"({target},{weight}),"
                for target, weight in self._adj.get(node, ())
            )
            lines.append(f"{node} : {{{entries}}}")
        return "\n".join(lines)

    def bfs(self, src: int) -> list[int]:
        """Nodes reachable from ``src`` in breadth-first order."""
        visited = {src}
        queue = deque([src])
        order = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self.neighbours(node):
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def _walk(self, src: int, visited: set[int]) -> Iterator[int]:
        """Yield nodes depth-first from ``src``, skipping those already visited."""
        visited.add(src)
        yield src
        stack = [iter(self.neighbours(src))]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    yield nbr
                    stack.append(iter(self.neighbours(nbr)))
                    break
            else:
                stack.pop()

    def dfs(self, n: int) -> list[int]:
        """Depth-first order, starting a new search at each unvisited node 0..n-1."""
        visited: set[int] = set()
        order: list[int] = []
        for src in range(n):
            if src not in visited:
                order.extend(self._walk(src, visited))
        return order

    def _cycle_from_bfs(self, src: int, visited: set[int]) -> bool:
        parent: dict[int, int | None] = {src: None}
        visited.add(src)
        queue = deque([src])
        while queue:
            node = queue.popleft()
            for nbr in self.neighbours(node):
                if nbr not in visited:
                    visited.add(nbr)
                    parent[nbr] = node
                    queue.append(nbr)
                elif nbr != parent[node]:
                    return True
        return False

    def has_cycle_bfs(self, n: int) -> bool:
        """Whether an undirected cycle is found from nodes 0..n-1, by breadth-first search."""
        visited: set[int] = set()
        return any(
            self._cycle_from_bfs(src, visited)
            for src in range(n)
            if src not in visited
        )

    def _cycle_from_dfs(self, src: int, visited: set[int]) -> bool:
        visited.add(src)
        stack: list[tuple[int | None, Iterator[int]]] = [
            (None, iter(self.neighbours(src)))
        ]
        nodes = [src]
        while stack:
            parent, neighbours = stack[-1]
            node = nodes[-1]
            for nbr in neighbours:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append((node, iter(self.neighbours(nbr))))
                    nodes.append(nbr)
                    break
                if nbr != parent:
                    return True
            else:
                stack.pop()
                nodes.pop()
        return False

    def has_cycle_dfs(self, n: int) -> bool:
        """Whether an undirected cycle is found from nodes 0..n-1, by depth-first search."""
        visited: set[int] = set()
        return any(
            self._cycle_from_dfs(src, visited)
            for src in range(n)
            if src not in visited
        )

    def topological_sort(self, n: int) -> list[int]:
        """Topological order of a directed acyclic graph, searching from nodes 0..n."""
        visited: set[int] = set()
        finished: list[int] = []
        for src in range(n + 1):
            if src in visited:
                continue
            visited.add(src)
            stack = [(src, iter(self.neighbours(src)))]
            while stack:
                node, neighbours = stack[-1]
                for nbr in neighbours:
                    if nbr not in visited:
                        visited.add(nbr)
                        stack.append((nbr, iter(self.neighbours(nbr))))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished