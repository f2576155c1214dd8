from abc import ABC, abstractmethod
from enum import Enum


class SearchStrategy(Enum):
    DFS = "dfs"
    BFS = "bfs"
    NONE = "none"

    @classmethod
    def parse(cls, value):
        """Accepts a SearchStrategy or its name/value in any case."""
        if isinstance(value, cls):
            return value
        choices = ", ".join(s.value for s in cls)
        if not isinstance(value, str):
            raise ValueError(f"Unknown search strategy {value!r} (expected one of: {choices})")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown search strategy '{value}' (expected one of: {choices})") from None


class Search(ABC):
    """A traversal bound to one graph for its whole life."""
    label = None

    def __init__(self, graph):
        self._graph = graph

    @property
    def graph(self):
        return self._graph

    def search(self, root=None):
        """Announces the run and returns the nodes reachable from ``root`` in visit order.

        ``root`` defaults to the graph's first node; an empty graph yields [].
        """
        directed = str(self._graph.is_directed).lower()
        print(f"Made search with {self.label}. Is graph directed: {directed}")
        if root is None:
            nodes = self._graph.nodes
            if not nodes:
                return []
            root = nodes[0]
        return self.visit(self._graph.arcs_frame(), root, self._graph.is_directed)

    def find(self, start, goals):
        """Goal search from ``start``: (goal_node, nodes_expanded, path) or None."""
        return self.run(self._graph.arcs_frame(), start, goals, self._graph.is_directed)

    @abstractmethod
    def visit(self, arcs_df, root, is_directed):
        ...

    @abstractmethod
    def run(self, arcs_df, start, goals, is_directed):
        ...

    def __repr__(self):
        return f"{type(self).__name__}({self._graph!r})"


def build_adjacency(arcs_df, is_directed):
    """Builds {node: [neighbour, ...]} from an arcs DataFrame.

    In an undirected graph every arc is entered both ways. Neighbours keep arc insertion order.
    Nodes are keyed by identity.
    """
    adjacency = {}
    for _, row in arcs_df.iterrows():
        source, target = row['from'], row['to']
        adjacency.setdefault(source, []).append(target)
        if not is_directed:
            adjacency.setdefault(target, []).append(source)
    return adjacency


def reconstruct_path(came_from, current):
    """Reconstructs path (list of nodes) from came_from map."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
