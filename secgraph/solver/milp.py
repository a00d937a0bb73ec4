"""Binary arc-flow program for single source/sink max-flow, solved with CBC.

Model for source ``a`` and sink ``b`` on an n-vertex graph ``g``:

    maximize    sum_{j in succ(a)} x[a, j]
    subject to  x[i, j] <= g[i, j]                                for all i, j
                sum_{j in pred(i)} x[j, i] == sum_{j in succ(i)} x[i, j]
                                                              for i not in {a, b}
                sum_{j in pred(a)} x[j, a] == 0
                sum_{j in succ(b)} x[b, j] == 0
                x[i, j] in {0, 1}

The last two rows pin the terminals. Without them, flow returning to ``a``
(for example around a 2-cycle) would be counted by the objective.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np
import pulp

from secgraph.exceptions import SolverError
from secgraph.graph import num_vertices, predecessors, successors
from secgraph.logging import get_logger
from secgraph.types.dto import CutEdge, FlowResult

logger = get_logger(__name__)

FlowVars = Dict[CutEdge, pulp.LpVariable]


def build_flow_model(
    g: np.ndarray, a: int, b: int
) -> Tuple[pulp.LpProblem, FlowVars]:
    """Build the binary max-flow program from ``a`` to ``b``.

    Args:
        g: Validated 0/1 adjacency matrix.
        a: 1-based source vertex.
        b: 1-based sink vertex.

    Returns:
        ``(problem, x)`` where ``x[(i, j)]`` is the binary flow variable of arc (i, j).
    """
    n = num_vertices(g)
    prob = pulp.LpProblem(f"maxflow_{a}_{b}", pulp.LpMaximize)

    x: FlowVars = {
        (i, j): pulp.LpVariable(f"x_{i}_{j}", cat=pulp.LpBinary)
        for i in range(1, n + 1)
        for j in range(1, n + 1)
    }

    prob += pulp.lpSum(x[a, j] for j in successors(g, a)), "source_outflow"

    for (i, j), var in x.items():
        prob += var <= int(g[i - 1, j - 1]), f"capacity_{i}_{j}"

    for i in range(1, n + 1):
        if i in (a, b):
            continue
        pred, succ = predecessors(g, i), successors(g, i)
        if not pred and not succ:
            continue
        prob += (
            pulp.lpSum(x[j, i] for j in pred) == pulp.lpSum(x[i, j] for j in succ),
            f"conservation_{i}",
        )

    source_in = predecessors(g, a)
    if source_in:
        prob += pulp.lpSum(x[j, a] for j in source_in) == 0, "source_inflow"
    sink_out = successors(g, b)
    if sink_out:
        prob += pulp.lpSum(x[b, j] for j in sink_out) == 0, "sink_outflow"

    return prob, x


def solve_max_flow(
    g: np.ndarray,
    a: int,
    b: int,
    *,
    time_limit: Optional[float] = None,
    msg: bool = False,
) -> FlowResult:
    """Solve the max-flow program from ``a`` to ``b`` with CBC.

    A source without out-arcs or a sink without in-arcs has flow 0 and is
    answered without building a model.

    Raises:
        SolverError: If CBC does not report a proven optimum.
    """
    n = num_vertices(g)
    if not successors(g, a) or not predecessors(g, b):
        return FlowResult(0, np.zeros((n, n), dtype=np.int64))

    prob, x = build_flow_model(g, a, b)
    logger.debug(
        f"Solving P({a},{b}): {len(x)} variables, {len(prob.constraints)} constraints"
    )

    status = prob.solve(pulp.PULP_CBC_CMD(msg=msg, timeLimit=time_limit))
    if status != pulp.LpStatusOptimal:
        raise SolverError(a, b, pulp.LpStatus[status])
    if prob.sol_status != pulp.LpSolutionOptimal:
        raise SolverError(a, b, pulp.LpSolution[prob.sol_status])

    assignment = np.zeros((n, n), dtype=np.int64)
    for (i, j), var in x.items():
        assignment[i - 1, j - 1] = int(round(var.varValue or 0.0))

    value = int(round(pulp.value(prob.objective)))
    return FlowResult(value, assignment)
