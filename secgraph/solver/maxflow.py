"""Single source/sink max-flow on unit-capacity directed graphs."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Union

from secgraph.config import SOLVER_CONFIG, SolverConfig
from secgraph.graph import as_adjacency, check_vertex
from secgraph.solver.augmenting import max_flow_augmenting
from secgraph.solver.cut import extract_cut
from secgraph.solver.milp import solve_max_flow
from secgraph.types.base import Backend, CutStrategy
from secgraph.types.dto import CutEdge, FlowResult


def maxflow(
    g: Any,
    a: int,
    b: int,
    *,
    backend: Optional[Union[Backend, str]] = None,
    config: Optional[SolverConfig] = None,
) -> FlowResult:
    """Maximum number of unit flows routable from ``a`` to ``b``.

    Every existing arc has capacity 1, so the value counts arc-disjoint
    a -> b paths.

    Args:
        g: Square 0/1 adjacency matrix.
        a: 1-based source vertex.
        b: 1-based sink vertex, distinct from ``a``.
        backend: Overrides ``config.backend`` ("milp" or "augmenting").
        config: Solver configuration; defaults to ``SOLVER_CONFIG``.

    Returns:
        ``FlowResult(value, assignment)``.

    Raises:
        ValueError: If ``g`` is not a square 0/1 matrix, a vertex is out of
            range, or ``a == b``.
        SolverError: If the MILP backend cannot prove an optimum.

    Examples:
        >>> from secgraph.generate import cycle_graph
        >>> value, x = maxflow(cycle_graph(4), 1, 3)
        >>> value
        1
    """
    g = as_adjacency(g)
    check_vertex(g, a, "source")
    check_vertex(g, b, "sink")
    if a == b:
        raise ValueError(f"Source and sink must differ, got {a} for both")

    cfg = (config or SOLVER_CONFIG).override(backend=backend)
    if cfg.backend == Backend.AUGMENTING:
        return max_flow_augmenting(g, a, b)
    return solve_max_flow(g, a, b, time_limit=cfg.time_limit, msg=cfg.solver_msg)


def min_cut(
    g: Any,
    a: int,
    b: int,
    *,
    backend: Optional[Union[Backend, str]] = None,
    cut_strategy: Optional[Union[CutStrategy, str]] = None,
    config: Optional[SolverConfig] = None,
) -> Tuple[int, List[CutEdge]]:
    """Max-flow value from ``a`` to ``b`` and the arcs of a matching cut.

    Returns:
        ``(value, cut)``; ``cut`` is empty when ``value`` is 0.
    """
    cfg = (config or SOLVER_CONFIG).override(
        backend=backend, cut_strategy=cut_strategy
    )
    g = as_adjacency(g)
    value, assignment = maxflow(g, a, b, config=cfg)
    if value == 0:
        return 0, []
    return value, extract_cut(g, assignment, a, cfg.cut_strategy)
