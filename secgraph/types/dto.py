"""Result containers for max-flow probes and SEC computations.

``FlowResult`` and ``SECResult`` are named tuples so callers can unpack them
as ``value, assignment = maxflow(...)`` and ``value, cut = sec(...)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

import numpy as np

#: Directed arc (i, j) between 1-based vertex labels.
CutEdge = Tuple[int, int]


class FlowResult(NamedTuple):
    """Optimal flow between one source/sink pair.

    Attributes:
        value: Number of unit flows routed from source to sink.
        assignment: n x n 0/1 matrix; ``assignment[i - 1, j - 1] == 1`` iff arc
            (i, j) carries flow.
    """

    value: int
    assignment: np.ndarray


class SECResult(NamedTuple):
    """Strong edge connectivity of a graph and one cut achieving it.

    Attributes:
        value: Minimum max-flow over the probed vertex pairs.
        cut: Arcs of a minimum cut; empty when ``value`` is 0.
    """

    value: int
    cut: List[CutEdge]


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe of the cyclic sequence.

    Attributes:
        index: Position in the probe sequence (0 for the pair (1, 2)).
        source: 1-based source vertex.
        sink: 1-based sink vertex.
        value: Max-flow value from source to sink.
        cut: Cut arcs extracted from the optimal flow.
    """

    index: int
    source: int
    sink: int
    value: int
    cut: Tuple[CutEdge, ...]
