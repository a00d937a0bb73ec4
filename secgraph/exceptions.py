"""Exceptions raised by secgraph."""

from __future__ import annotations


class SolverError(RuntimeError):
    """The optimisation backend could not certify an optimal flow.

    Attributes:
        source: 1-based source vertex of the failed probe.
        sink: 1-based sink vertex of the failed probe.
        status: Solver status name reported by PuLP (e.g. "Not Solved").
    """

    def __init__(self, source: int, sink: int, status: str) -> None:
        self.source = source
        self.sink = sink
        self.status = status
        super().__init__(
            f"No optimal max-flow found for P({source},{sink}): solver status '{status}'"
        )
