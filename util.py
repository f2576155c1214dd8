from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

import pandas as pd

from strategies import SearchStrategy, create_search


class ConfigurationError(ValueError):
    """Raised when a graph is requested with an invalid configuration."""


@runtime_checkable
class Weightable(Protocol):
    """Anything carrying a mutable weight."""
    weight: float


class Node:
    """Represents a named vertex in the graph."""
    def __init__(self, name):
        self._name = name

    @property
    def name(self):
        return self._name

    def __repr__(self):
        return f"Node {self._name}"


class Arc:
    """Edge between two nodes.

    ``is_directed`` belongs to whichever graph the arc is added to and is
    overwritten on insertion.
    """
    def __init__(self, source, target, weight=0.0):
        self.source = source
        self.target = target
        self.weight = float(weight)
        self.is_directed = False

    def __repr__(self):
        arrow = "->" if self.is_directed else "--"
        return f"Arc {self.source.name} {arrow} {self.target.name} ({self.weight})"


class GraphType(ABC):
    """What callers of ``create_graph`` get to work with."""

    @property
    @abstractmethod
    def nodes(self): ...

    @property
    @abstractmethod
    def arcs(self): ...

    @property
    @abstractmethod
    def is_directed(self): ...

    @abstractmethod
    def search_algorithm(self, root=None): ...

    @abstractmethod
    def add(self, arc): ...

    @abstractmethod
    def add_search_with(self, strategy): ...


def check_shape(num_nodes, is_directed):
    """Raises ConfigurationError unless num_nodes is an int >= 0 and is_directed a bool."""
    # bool is an int subclass but never a sensible node count
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, int):
        raise ConfigurationError(f"num_nodes must be an integer, got {num_nodes!r}")
    if num_nodes < 0:
        raise ConfigurationError(f"num_nodes must be >= 0, got {num_nodes}")
    if not isinstance(is_directed, bool):
        raise ConfigurationError(f"is_directed must be a bool, got {is_directed!r}")


class Graph(GraphType):
    """Nodes, arcs and the currently bound search strategy."""
    def __init__(self, num_nodes: int, is_directed: bool):
        check_shape(num_nodes, is_directed)
        self._nodes = []
        self._arcs = []
        self._search = None
        self._build_nodes(num_nodes)
        self._is_directed = is_directed

    @property
    def nodes(self):
        return tuple(self._nodes)

    @property
    def arcs(self):
        return tuple(self._arcs)

    @property
    def is_directed(self):
        return self._is_directed

    @property
    def search(self):
        return self._search

    def search_algorithm(self, root=None):
        """Runs the bound search from ``root`` (default: first node). Does nothing when no search is bound."""
        if self._search is None:
            return None
        return self._search.search(root)

    def add(self, arc):
        """Adds an arc, forcing its orientation to the graph's.

        Source and target are not checked against the graph's nodes.
        """
        arc.is_directed = self._is_directed
        self._arcs.append(arc)

    def add_search_with(self, strategy):
        """Binds a search for ``strategy``, replacing any previous one."""
        try:
            strategy = SearchStrategy.parse(strategy)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self._search = create_search(self, strategy)

    def arcs_frame(self):
        """Arcs as a DataFrame (columns: from, to, weight, directed)."""
        rows = [
            {"from": arc.source, "to": arc.target, "weight": arc.weight, "directed": self._is_directed}
            for arc in self._arcs
        ]
        return pd.DataFrame(rows, columns=["from", "to", "weight", "directed"])

    def nodes_frame(self):
        """Nodes as a DataFrame (index: position, columns: name)."""
        nodes_df = pd.DataFrame({"name": [node.name for node in self._nodes]})
        nodes_df.index.name = "id"
        return nodes_df

    def _build_nodes(self, num_nodes):
        for i in range(num_nodes):
            self._nodes.append(Node(f"node_{i}"))

    def __repr__(self):
        kind = "directed" if self._is_directed else "undirected"
        return f"Graph ({kind}, {len(self._nodes)} nodes, {len(self._arcs)} arcs)"


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
