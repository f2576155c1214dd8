"""Declarative graph construction.

A GraphConfig says how big the graph is, whether its arcs are directed and
which search strategy to attach. ``create_graph`` turns one into a ready
graph. Nothing is cached between calls.
"""
from dataclasses import dataclass

from strategies import SearchStrategy
from util import ConfigurationError, Graph, GraphType, check_shape


@dataclass(frozen=True)
class GraphConfig:
    is_directed: bool
    num_nodes: int
    search_strategy: SearchStrategy

    def __post_init__(self):
        check_shape(self.num_nodes, self.is_directed)
        try:
            strategy = SearchStrategy.parse(self.search_strategy)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        object.__setattr__(self, "search_strategy", strategy)


def create_graph(config: GraphConfig) -> GraphType:
    """Builds a graph sized and oriented per ``config`` with its search attached."""
    graph = Graph(num_nodes=config.num_nodes, is_directed=config.is_directed)
    graph.add_search_with(config.search_strategy)
    return graph
