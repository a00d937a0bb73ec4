"""secgraph: strong edge connectivity of directed graphs.

Graphs are square 0/1 adjacency matrices with vertices labelled 1..n; every
existing arc has capacity 1.

Primary API:
    sec() - Strong edge connectivity and one minimum arc cut
    maxflow() - Max-flow between two vertices as a binary program (PuLP/CBC)
    min_cut() - Max-flow value and a matching minimum cut
    SolverConfig - Backend, cut rule, time limit and parallelism settings
    from_networkx() / to_networkx() - Conversion to and from NetworkX

Example:
    from secgraph import sec, rand_graph

    g = rand_graph(8, 0.5, seed=1)
    value, cut = sec(g)
"""

from __future__ import annotations

from secgraph import logging
from secgraph.config import SOLVER_CONFIG, SolverConfig
from secgraph.connectivity import probe_pairs, sec
from secgraph.exceptions import SolverError
from secgraph.generate import complete_graph, cycle_graph, rand_graph
from secgraph.graph import (
    NodeMap,
    add_arc,
    arcs,
    as_adjacency,
    from_networkx,
    predecessors,
    remove_arcs,
    successors,
    to_networkx,
)
from secgraph.solver import maxflow, min_cut
from secgraph.types import Backend, CutEdge, CutStrategy, FlowResult, ProbeResult, SECResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "sec",
    "maxflow",
    "min_cut",
    "probe_pairs",
    # Config and errors
    "SolverConfig",
    "SOLVER_CONFIG",
    "SolverError",
    # Types
    "Backend",
    "CutStrategy",
    "CutEdge",
    "FlowResult",
    "ProbeResult",
    "SECResult",
    # Graphs
    "as_adjacency",
    "successors",
    "predecessors",
    "arcs",
    "add_arc",
    "remove_arcs",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    "rand_graph",
    "complete_graph",
    "cycle_graph",
    # Utilities
    "logging",
]
