"""Reading minimum cuts off an optimal flow."""

from __future__ import annotations

from typing import List

import numpy as np

from secgraph.graph import successors
from secgraph.types.base import CutStrategy
from secgraph.types.dto import CutEdge


def residual_reachable(g: np.ndarray, assignment: np.ndarray, source: int) -> np.ndarray:
    """Boolean mask of vertices reachable from ``source`` in the residual graph.

    Arc u -> v is residual when it exists and carries no flow, or when v -> u
    carries flow.
    """
    forward = (g - assignment) > 0
    backward = assignment.T > 0
    residual = forward | backward

    reachable = np.zeros(g.shape[0], dtype=bool)
    stack = [source - 1]
    while stack:
        u = stack.pop()
        if reachable[u]:
            continue
        reachable[u] = True
        stack.extend(int(v) for v in np.flatnonzero(residual[u] & ~reachable))
    return reachable


def residual_cut(g: np.ndarray, assignment: np.ndarray, source: int) -> List[CutEdge]:
    """Arcs from the residual-reachable side of ``source`` to the rest.

    For a maximum flow every such arc is saturated and their number equals the
    flow value.
    """
    reachable = residual_reachable(g, assignment, source)
    crossing = (g > 0) & reachable[:, None] & ~reachable[None, :]
    rows, cols = np.nonzero(crossing)
    return [(int(i) + 1, int(j) + 1) for i, j in zip(rows, cols)]


def source_arcs_cut(assignment: np.ndarray, source: int) -> List[CutEdge]:
    """Flow-carrying arcs leaving ``source``."""
    return [(source, j) for j in successors(assignment, source) if j != source]


def extract_cut(
    g: np.ndarray,
    assignment: np.ndarray,
    source: int,
    strategy: CutStrategy = CutStrategy.RESIDUAL,
) -> List[CutEdge]:
    """Cut arcs of the flow ``assignment`` out of ``source`` under ``strategy``."""
    if strategy == CutStrategy.SOURCE_ARCS:
        return source_arcs_cut(assignment, source)
    return residual_cut(g, assignment, source)
