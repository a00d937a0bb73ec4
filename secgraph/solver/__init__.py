"""Max-flow backends and cut extraction."""

from secgraph.solver.augmenting import max_flow_augmenting
from secgraph.solver.cut import (
    extract_cut,
    residual_cut,
    residual_reachable,
    source_arcs_cut,
)
from secgraph.solver.maxflow import maxflow, min_cut
from secgraph.solver.milp import build_flow_model, solve_max_flow

__all__ = [
    "maxflow",
    "min_cut",
    "build_flow_model",
    "solve_max_flow",
    "max_flow_augmenting",
    "extract_cut",
    "residual_cut",
    "residual_reachable",
    "source_arcs_cut",
]
