from collections import deque
from strategies.common import Search, build_adjacency, reconstruct_path


def visit_bfs(arcs_df, root, is_directed):
    """Breadth-first visit order starting at root."""
    adjacency = build_adjacency(arcs_df, is_directed)
    q = deque([root])
    visited = {root}
    order = []

    while q:
        node = q.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, []):
            if neighbour not in visited:
                visited.add(neighbour)
                q.append(neighbour)

    return order


def run_bfs(arcs_df, start, goals, is_directed):
    """Breadth-First Search over an arcs DataFrame: returns (goal_node, nodes_created, path_list) or None."""
    goals = set(goals)
    if start is None or not goals:
        return None

    adjacency = build_adjacency(arcs_df, is_directed)

    q = deque([(start, None)])
    came_from = {}
    visited = {start}
    nodes_created = 0

    while q:
        node, parent = q.popleft()
        nodes_created += 1
        if parent is not None:
            came_from[node] = parent

        if node in goals:
            path = reconstruct_path(came_from, node)
            return node, nodes_created, path

        for neighbour in adjacency.get(node, []):
            if neighbour not in visited:
                visited.add(neighbour)
                q.append((neighbour, node))

    return None


class SearchBFS(Search):
    label = "BFS"

    def visit(self, arcs_df, root, is_directed):
        return visit_bfs(arcs_df, root, is_directed)

    def run(self, arcs_df, start, goals, is_directed):
        return run_bfs(arcs_df, start, goals, is_directed)
