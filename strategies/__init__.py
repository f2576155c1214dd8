"""Package exposing search strategy implementations."""

from .common import Search, SearchStrategy
from .dfs import SearchDFS, run_dfs, visit_dfs
from .bfs import SearchBFS, run_bfs, visit_bfs


def create_search(graph, strategy):
    """Returns the search bound to ``graph`` for ``strategy``, or None for NONE."""
    strategy = SearchStrategy.parse(strategy)
    if strategy is SearchStrategy.BFS:
        return SearchBFS(graph)
    if strategy is SearchStrategy.DFS:
        return SearchDFS(graph)
    return None


__all__ = [
    "Search",
    "SearchStrategy",
    "SearchBFS",
    "SearchDFS",
    "create_search",
    "run_bfs",
    "run_dfs",
    "visit_bfs",
    "visit_dfs",
]
