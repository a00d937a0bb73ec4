"""Max-flow by breadth-first augmenting paths on unit capacities.

Combinatorial counterpart of the binary program in ``milp``: Edmonds-Karp on
the adjacency matrix, each arc carrying capacity 1. No external solver.
"""

from __future__ import annotations

from collections import deque
from typing import List, Optional

import numpy as np

from secgraph.graph import num_vertices
from secgraph.types.dto import FlowResult


def _shortest_augmenting_path(
    cap: np.ndarray, flow: np.ndarray, s: int, t: int
) -> Optional[List[int]]:
    """BFS predecessor array reaching ``t`` in the residual graph, or None."""
    parent = [-1] * cap.shape[0]
    parent[s] = s
    queue = deque([s])
    while queue:
        u = queue.popleft()
        # Forward residual on unsaturated arcs, backward residual on flowing arcs
        residual = (cap[u, :] - flow[u, :] > 0) | (flow[:, u] > 0)
        for v in np.flatnonzero(residual):
            v = int(v)
            if parent[v] != -1:
                continue
            parent[v] = u
            if v == t:
                return parent
            queue.append(v)
    return None


def max_flow_augmenting(g: np.ndarray, a: int, b: int) -> FlowResult:
    """Compute the max-flow from ``a`` to ``b`` by repeated BFS augmentation.

    Each augmentation pushes one unit along a shortest residual path,
    cancelling opposite flow before using an arc forward. Self-loops never
    carry flow.

    Args:
        g: Validated 0/1 adjacency matrix.
        a: 1-based source vertex.
        b: 1-based sink vertex.

    Returns:
        FlowResult with the flow value and 0/1 arc assignment.
    """
    n = num_vertices(g)
    s, t = a - 1, b - 1
    cap = np.array(g, dtype=np.int64)
    np.fill_diagonal(cap, 0)
    flow = np.zeros((n, n), dtype=np.int64)

    value = 0
    while True:
        parent = _shortest_augmenting_path(cap, flow, s, t)
        if parent is None:
            break
        v = t
        while v != s:
            u = parent[v]
            if flow[v, u] > 0:
                flow[v, u] -= 1
            else:
                flow[u, v] += 1
            v = u
        value += 1

    return FlowResult(value, flow)
