"""Who is connected? Breadth first search between virtual edge nodes"""

from collections import deque

from hexgraph import HexGraph, empty, opponent


def reachable(graph: HexGraph, start: int, goal: int, player: int) -> bool:
    """True if goal can be reached from start through nodes marked by player"""
    if start == goal:
        return True

    marks = graph.marks.tolist()
    adj = graph.adj
    visited = [False] * graph.nodes
    visited[start] = True
    queue = deque([start])

    while queue:
        node = queue.popleft()
        if marks[node] != player:
            continue
        for n in adj[node]:
            if marks[n] != player:
                continue
            if n == goal:
                return True
            if not visited[n]:
                visited[n] = True
                queue.append(n)

    return False


def winner(graph: HexGraph, player: int) -> int:
    """The connected player, checking player before the opponent; 0 for none"""
    for p in (player, opponent(player)):
        if reachable(graph, graph.start_node(p), graph.end_node(p), p):
            return p
    return empty
