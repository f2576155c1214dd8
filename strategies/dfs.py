from strategies.common import Search, build_adjacency, reconstruct_path


def visit_dfs(arcs_df, root, is_directed):
    """Depth-first visit order starting at root."""
    adjacency = build_adjacency(arcs_df, is_directed)
    stack = [root]
    visited = set()
    order = []

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        # push neighbours in reverse so the first-added arc is expanded first
        for neighbour in reversed(adjacency.get(node, [])):
            if neighbour not in visited:
                stack.append(neighbour)

    return order


def run_dfs(arcs_df, start, goals, is_directed):
    """Depth-First Search over an arcs DataFrame: returns (goal_node, nodes_created, path_list) or None."""
    goals = set(goals)
    if start is None or not goals:
        return None

    adjacency = build_adjacency(arcs_df, is_directed)

    stack = [(start, None)]  # (node, parent)
    came_from = {}
    visited = set()
    nodes_created = 0

    while stack:
        node, parent = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        nodes_created += 1
        if parent is not None:
            came_from[node] = parent

        if node in goals:
            path = reconstruct_path(came_from, node)
            return node, nodes_created, path

        for neighbour in reversed(adjacency.get(node, [])):
            if neighbour not in visited:
                stack.append((neighbour, node))

    return None


class SearchDFS(Search):
    label = "DFS"

    def visit(self, arcs_df, root, is_directed):
        return visit_dfs(arcs_df, root, is_directed)

    def run(self, arcs_df, start, goals, is_directed):
        return run_dfs(arcs_df, start, goals, is_directed)
